"""Pull request the report belongs to."""

from pydantic import BaseModel


class PullRequestContext(BaseModel):
    """Target repository and pull request number.

    pr_number is None when the run was not triggered by a pull request.
    """

    repo: str
    pr_number: int | None = None
