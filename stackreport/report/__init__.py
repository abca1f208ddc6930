"""Report comment formatting, lookup and reconciliation."""

from stackreport.report.formatter import MAX_OUTPUT_BYTES, identity_prefix, render_report, truncate_output
from stackreport.report.locator import find_comment
from stackreport.report.reconciler import MissingPullRequestError, reconcile_comment

__all__ = [
    "MAX_OUTPUT_BYTES",
    "MissingPullRequestError",
    "find_comment",
    "identity_prefix",
    "reconcile_comment",
    "render_report",
    "truncate_output",
]
