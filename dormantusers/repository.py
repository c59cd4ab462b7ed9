"""Listing the repositories of an organization."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

import requests
from rich.console import Console

from .api import ApiError, RestClient
from .header import get_next_page_url

MAX_ATTEMPTS = 5

_console = Console(stderr=True)


@dataclass(frozen=True)
class Repository:
    """A repository, identified by its name."""

    name: str


def _request_with_retries(
    client: RestClient, url: str, sleep: Callable[[float], None]
) -> requests.Response:
    error: ApiError | None = None
    for attempt in range(MAX_ATTEMPTS):
        try:
            return client.request("GET", url)
        except ApiError as exc:
            error = exc
            delay = 1 << attempt
            _console.print(
                f"[blue]INFO[/] Failed to fetch repositories: {exc}. "
                f"Retrying in {delay} seconds..."
            )
            sleep(delay)
    assert error is not None
    raise error


def get_org_repositories(
    organization: str,
    client: RestClient,
    sleep: Callable[[float], None] = time.sleep,
) -> list[Repository]:
    """Fetch every repository of an organization, retrying failed pages."""
    repositories: list[Repository] = []
    url: str | None = f"orgs/{organization}/repos?per_page=100"
    with _console.status("Fetching repositories..."):
        while url:
            try:
                response = _request_with_retries(client, url, sleep)
            except ApiError:
                _console.print("[red]FAIL[/] Failed to fetch repositories after retries")
                raise
            try:
                page = response.json()
            except ValueError as exc:
                _console.print("[red]FAIL[/] Failed to decode repositories")
                raise ApiError(f"Failed to decode repositories: {exc}") from exc
            repositories.extend(Repository(name=item.get("name") or "") for item in page)
            url = get_next_page_url(response.headers.get("Link", ""))
    _console.print("[green]SUCCESS[/] Fetched repositories successfully")
    _console.print(f"[blue]INFO[/] Fetched {len(repositories)} repositories")
    return repositories