"""Data models for comments, rendered reports and reconciliation (Pydantic)."""

from stackreport.models.comment import Comment
from stackreport.models.context import PullRequestContext
from stackreport.models.outcome import ReconcileOutcome
from stackreport.models.rendered import RenderedComment
from stackreport.models.result import RemoteResult

__all__ = ["Comment", "PullRequestContext", "ReconcileOutcome", "RenderedComment", "RemoteResult"]
