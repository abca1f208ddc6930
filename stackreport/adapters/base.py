"""Abstract base for comment platform adapters."""

from abc import ABC, abstractmethod
from typing import List

import requests

from stackreport.models import Comment, RemoteResult


class CommentPlatformError(Exception):
    """Raised when a comment platform API call fails."""

    pass


class CommentPlatformAdapter(ABC):
    """Abstract interface for hosts that keep comments on pull requests."""

    @abstractmethod
    def list_comments(self, repo: str, issue_number: int) -> List[Comment]:
        """Fetch all comments on an issue or PR, oldest first."""
        ...

    @abstractmethod
    def update_comment(self, repo: str, comment_id: int, body: str) -> Comment:
        """Replace the body of an existing comment."""
        ...

    @abstractmethod
    def create_comment(self, repo: str, issue_number: int, body: str) -> Comment:
        """Post a comment on an issue or PR."""
        ...

    def try_list_comments(self, repo: str, issue_number: int) -> RemoteResult[List[Comment]]:
        """list_comments, with platform and transport errors returned as a
        failure."""
        try:
            return RemoteResult.success(self.list_comments(repo, issue_number))
        except (CommentPlatformError, requests.RequestException) as e:
            return RemoteResult.failure(str(e))

    def try_update_comment(self, repo: str, comment_id: int, body: str) -> RemoteResult[Comment]:
        """update_comment, with platform and transport errors returned as a
        failure."""
        try:
            return RemoteResult.success(self.update_comment(repo, comment_id, body))
        except (CommentPlatformError, requests.RequestException) as e:
            return RemoteResult.failure(str(e))
