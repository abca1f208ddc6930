"""Create or update the report comment on a pull request.

Flow: when editing is enabled, list the PR comments and update the one that
starts with the report's identity prefix; otherwise, or when nothing
matches, or when listing/updating fails, create a new comment. A failed
lookup never fails the run: a duplicate comment is preferred over no
comment. Only create failures propagate.
"""

import logging

from stackreport.adapters.base import CommentPlatformAdapter
from stackreport.models import PullRequestContext, ReconcileOutcome, RenderedComment
from stackreport.report.locator import find_comment

logger = logging.getLogger(__name__)

FALLBACK_WARNING = "Not able to edit comment, defaulting to creating a new comment."


class MissingPullRequestError(ValueError):
    """Raised when the run has no pull request to comment on."""

    pass


def _try_update(
    adapter: CommentPlatformAdapter,
    context: PullRequestContext,
    pr_number: int,
    rendered: RenderedComment,
) -> ReconcileOutcome | None:
    """Update the matching comment; None means fall back to creating."""
    logger.debug("Searching for an existing comment that starts with `%s`.", rendered.identity_prefix)
    listed = adapter.try_list_comments(context.repo, pr_number)
    if not listed.ok:
        logger.warning("%s (%s)", FALLBACK_WARNING, listed.error)
        return None

    match = find_comment(listed.value or [], rendered.identity_prefix)
    if match is None:
        logger.debug("No existing comment found; creating new comment.")
        return None

    logger.debug("Found existing comment to update with id %s.", match.id)
    updated = adapter.try_update_comment(context.repo, match.id, rendered.body)
    if not updated.ok or updated.value is None:
        logger.warning("%s (%s)", FALLBACK_WARNING, updated.error)
        return None
    return ReconcileOutcome(action="updated", comment=updated.value)


def reconcile_comment(
    adapter: CommentPlatformAdapter,
    context: PullRequestContext,
    rendered: RenderedComment,
    edit_existing: bool = True,
) -> ReconcileOutcome:
    """Post rendered on the PR, updating this report's earlier comment if
    allowed.

    Args:
        adapter: Platform client.
        context: Repository and PR number of the run.
        rendered: Comment produced by render_report.
        edit_existing: Search for and update a previous comment instead of
            always posting a new one.

    Returns:
        ReconcileOutcome describing the single mutating call made.

    Raises:
        MissingPullRequestError: context has no PR number.
        CommentPlatformError: creating the comment failed.
    """
    pr_number = context.pr_number
    if pr_number is None:
        raise MissingPullRequestError("Missing pull request event data.")

    if edit_existing:
        outcome = _try_update(adapter, context, pr_number, rendered)
        if outcome is not None:
            logger.info("Updated comment %s on %s#%s", outcome.comment.id, context.repo, pr_number)
            return outcome

    comment = adapter.create_comment(context.repo, pr_number, rendered.body)
    logger.info("Created comment %s on %s#%s", comment.id, context.repo, pr_number)
    return ReconcileOutcome(action="created", comment=comment)
