"""Pull request context from explicit values or the GitHub Actions
environment.

GitHub Actions exposes the repository as GITHUB_REPOSITORY (owner/name)
and the triggering event payload as a JSON file at GITHUB_EVENT_PATH; for
pull_request events the payload carries pull_request.number.
"""

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from stackreport.models import PullRequestContext

logger = logging.getLogger(__name__)


class ContextError(ValueError):
    """Raised when the target repository cannot be determined."""

    pass


def _load_event(env: Mapping[str, str]) -> dict[str, Any]:
    path = env.get("GITHUB_EVENT_PATH")
    if not path or not Path(path).is_file():
        return {}
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return data if isinstance(data, dict) else {}


def pr_number_from_event(event: Mapping[str, Any]) -> int | None:
    """Return pull_request.number from an event payload, if present."""
    pr = event.get("pull_request")
    if isinstance(pr, dict) and isinstance(pr.get("number"), int):
        return pr["number"]
    return None


def load_pull_request_context(
    env: Mapping[str, str],
    repo: str | None = None,
    pr_number: int | None = None,
) -> PullRequestContext:
    """Build the context; explicit repo/pr_number take precedence over env.

    A missing PR number is not an error here: the context is returned with
    pr_number=None and posting fails later.

    Raises:
        ContextError: no repository given and GITHUB_REPOSITORY unset or
            not in owner/name form.
    """
    repo = repo or env.get("GITHUB_REPOSITORY") or ""
    if "/" not in repo:
        raise ContextError("Repository not set: pass --repo or set GITHUB_REPOSITORY (owner/name)")
    if pr_number is None:
        pr_number = pr_number_from_event(_load_event(env))
        if pr_number is None:
            logger.debug("No pull_request.number in event payload")
    return PullRequestContext(repo=repo, pr_number=pr_number)
