"""Find the comment a previous run posted."""

from typing import Iterable

from stackreport.models import Comment


def find_comment(comments: Iterable[Comment], identity_prefix: str) -> Comment | None:
    """Return the first comment whose body starts with identity_prefix.

    Comments are scanned in the order given (creation order for GitHub), so
    the oldest matching comment wins.
    """
    for comment in comments:
        if comment.body.startswith(identity_prefix):
            return comment
    return None
