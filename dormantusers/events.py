"""Commits, issues and comments made in a repository since a given date."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from .api import ApiError, RestClient
from .header import get_next_page_url
from .limiter import concurrent_slot

EMPTY_REPOSITORY_MESSAGE = "Git Repository is empty."

_log = logging.getLogger(__name__)

T = TypeVar("T")


def _mapping(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _login(data: dict[str, Any], key: str) -> str:
    return _mapping(data.get(key)).get("login") or ""


@dataclass(frozen=True)
class Commit:
    """A commit and the account it is attributed to."""

    sha: str
    login: str
    author_name: str = ""
    author_email: str = ""
    date: str = ""

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Commit:
        author = _mapping(_mapping(data.get("commit")).get("author"))
        return cls(
            sha=data.get("sha") or "",
            login=_login(data, "author"),
            author_name=author.get("name") or "",
            author_email=author.get("email") or "",
            date=author.get("date") or "",
        )


@dataclass(frozen=True)
class Issue:
    """An issue and the account that opened it."""

    id: int
    title: str
    login: str
    created_at: str = ""

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Issue:
        return cls(
            id=data.get("id") or 0,
            title=data.get("title") or "",
            login=_login(data, "user"),
            created_at=data.get("created_at") or "",
        )


@dataclass(frozen=True)
class IssueComment:
    """A comment on an issue and the account that wrote it."""

    id: int
    login: str
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> IssueComment:
        return cls(
            id=data.get("id") or 0,
            login=_login(data, "user"),
            created_at=data.get("created_at") or "",
            updated_at=data.get("updated_at") or "",
        )


@dataclass(frozen=True)
class PullRequestComment:
    """A review comment on a pull request and the account that wrote it."""

    id: int
    login: str
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> PullRequestComment:
        return cls(
            id=data.get("id") or 0,
            login=_login(data, "user"),
            created_at=data.get("created_at") or "",
            updated_at=data.get("updated_at") or "",
        )


def _fetch_all(
    client: RestClient,
    path: str,
    parse: Callable[[dict[str, Any]], T],
    what: str,
) -> list[T]:
    """Collect every page of ``path``.

    An empty repository ends the listing with what was gathered so far; any
    other request failure yields an empty list. Undecodable pages raise.
    """
    items: list[T] = []
    url: str | None = path
    while url:
        try:
            with concurrent_slot():
                response = client.request("GET", url)
        except ApiError as exc:
            if EMPTY_REPOSITORY_MESSAGE in str(exc):
                _log.debug("Repository is empty: %s", path)
                break
            _log.debug("Failed to fetch %s: %s", what, exc)
            return []
        try:
            page = response.json()
        except ValueError as exc:
            raise ApiError(f"Failed to decode {what}: {exc}") from exc
        items.extend(parse(entry) for entry in page or [])
        url = get_next_page_url(response.headers.get("Link", ""))
    return items


def get_commits_since_date(
    organization: str, repository: str, date: str, client: RestClient
) -> list[Commit]:
    """Fetch the commits of a repository made since ``date``."""
    path = f"repos/{organization}/{repository}/commits?per_page=100&since={date}"
    return _fetch_all(client, path, Commit.from_json, "commits")


def get_issues_since_date(
    organization: str, repository: str, date: str, client: RestClient
) -> list[Issue]:
    """Fetch the issues of a repository updated since ``date``."""
    path = f"repos/{organization}/{repository}/issues?per_page=100&since={date}"
    return _fetch_all(client, path, Issue.from_json, "issues")


def get_issue_comments_since_date(
    organization: str, repository: str, date: str, client: RestClient
) -> list[IssueComment]:
    """Fetch the issue comments of a repository updated since ``date``."""
    path = f"repos/{organization}/{repository}/issues/comments?per_page=100&since={date}"
    return _fetch_all(client, path, IssueComment.from_json, "issue comments")


def get_pull_request_comments_since_date(
    organization: str, repository: str, date: str, client: RestClient
) -> list[PullRequestComment]:
    """Fetch the pull request review comments of a repository updated since ``date``."""
    path = f"repos/{organization}/{repository}/pulls/comments?per_page=100&since={date}"
    return _fetch_all(client, path, PullRequestComment.from_json, "pull request comments")