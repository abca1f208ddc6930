"""Comment platform adapters (base and implementations)."""

from stackreport.adapters.base import CommentPlatformAdapter, CommentPlatformError
from stackreport.adapters.github import GitHubAdapter

__all__ = ["CommentPlatformAdapter", "CommentPlatformError", "GitHubAdapter"]
