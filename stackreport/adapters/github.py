"""GitHub API adapter."""

from datetime import datetime
from typing import Any, Dict, List

import requests

from stackreport.adapters.base import CommentPlatformAdapter, CommentPlatformError
from stackreport.models import Comment

PER_PAGE = 100


def _parse_iso(s: str) -> datetime:
    return datetime.fromisoformat(s.replace("Z", "+00:00"))


def _comment_from_api(data: Dict[str, Any]) -> Comment:
    user = data.get("user") or {}
    created = data.get("created_at")
    updated = data.get("updated_at") or created
    return Comment(
        id=data["id"],
        body=data.get("body") or "",
        author=user.get("login", ""),
        created_at=_parse_iso(created) if created else None,
        updated_at=_parse_iso(updated) if updated else None,
    )


class GitHubAdapter(CommentPlatformAdapter):
    """GitHub API implementation (issue comments; PRs are issues)."""

    def __init__(self, token: str, api_url: str = "https://api.github.com") -> None:
        self._api_url = api_url.rstrip("/")
        self._session = requests.Session()
        if token:
            self._session.headers["Authorization"] = f"token {token}"
        self._session.headers["Accept"] = "application/vnd.github.v3+json"

    def _url(self, path: str) -> str:
        return f"{self._api_url}{path}" if path.startswith("/") else f"{self._api_url}/{path}"

    def _request(
        self,
        method: str,
        url: str,
        params: Dict[str, Any] | None = None,
        json: Dict[str, Any] | None = None,
    ) -> requests.Response:
        resp = self._session.request(method, url, params=params, json=json, timeout=30)
        if resp.status_code >= 400:
            msg = resp.text or resp.reason or str(resp.status_code)
            try:
                msg = resp.json().get("message", msg)
            except ValueError:
                pass
            raise CommentPlatformError(f"{resp.status_code}: {msg}")
        return resp

    def list_comments(self, repo: str, issue_number: int) -> List[Comment]:
        url: str | None = self._url(f"/repos/{repo}/issues/{issue_number}/comments")
        params: Dict[str, Any] | None = {"per_page": PER_PAGE}
        comments: List[Comment] = []
        while url:
            resp = self._request("GET", url, params=params)
            data = resp.json() or []
            comments.extend(_comment_from_api(d) for d in data)
            # The next link already carries per_page and page
            url = (resp.links or {}).get("next", {}).get("url")
            params = None
        return comments

    def update_comment(self, repo: str, comment_id: int, body: str) -> Comment:
        resp = self._request(
            "PATCH",
            self._url(f"/repos/{repo}/issues/comments/{comment_id}"),
            json={"body": body},
        )
        return _comment_from_api(resp.json())

    def create_comment(self, repo: str, issue_number: int, body: str) -> Comment:
        resp = self._request(
            "POST",
            self._url(f"/repos/{repo}/issues/{issue_number}/comments"),
            json={"body": body},
        )
        return _comment_from_api(resp.json())
