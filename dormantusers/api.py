"""A small REST client for the GitHub API."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Any

import requests

from .header import get_next_page_url

DEFAULT_HOST = "github.com"
DEFAULT_BASE_URL = "https://api.github.com/"
_TIMEOUT = 30


class ApiError(Exception):
    """Raised when an API request fails or returns an error status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class RestClient:
    """Issues authenticated requests against a REST API base URL."""

    def __init__(
        self,
        token: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        session: requests.Session | None = None,
    ) -> None:
        self.token = token
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.session = session or requests.Session()

    def _url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return self.base_url + path.lstrip("/")

    def request(self, method: str, path: str) -> requests.Response:
        """Send a request; raise ApiError on transport failure or an error status."""
        url = self._url(path)
        headers = {"Accept": "application/vnd.github+json"}
        if self.token:
            headers["Authorization"] = f"token {self.token}"
        try:
            response = self.session.request(method, url, headers=headers, timeout=_TIMEOUT)
        except requests.RequestException as exc:
            raise ApiError(str(exc)) from exc
        if response.status_code >= 400:
            message = response.reason or ""
            try:
                body = response.json()
            except ValueError:
                body = None
            if isinstance(body, dict) and body.get("message"):
                message = body["message"]
            raise ApiError(
                f"HTTP {response.status_code}: {message} ({url})",
                status_code=response.status_code,
            )
        return response

    def paginate(self, path: str) -> Iterator[Any]:
        """Yield the decoded JSON of each page, following ``rel="next"`` links."""
        url: str | None = path
        while url:
            response = self.request("GET", url)
            try:
                yield response.json()
            except ValueError as exc:
                raise ApiError(f"Failed to decode response from {response.url}: {exc}") from exc
            url = get_next_page_url(response.headers.get("Link", ""))


def create_client() -> RestClient:
    """Build a client from GH_HOST and the token environment variables."""
    host = os.environ.get("GH_HOST") or DEFAULT_HOST
    if host == DEFAULT_HOST:
        base_url = DEFAULT_BASE_URL
        names = ("GH_TOKEN", "GITHUB_TOKEN")
    else:
        base_url = f"https://{host}/api/v3/"
        names = ("GH_ENTERPRISE_TOKEN", "GITHUB_ENTERPRISE_TOKEN", "GH_TOKEN", "GITHUB_TOKEN")
    token = next((os.environ[name] for name in names if os.environ.get(name)), None)
    if token is None:
        raise ApiError(f"authentication token not found for host {host}")
    return RestClient(token=token, base_url=base_url)