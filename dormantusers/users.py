"""Organization members and outside collaborators."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from rich.console import Console

from .api import ApiError, RestClient
from .limiter import concurrent_slot

MEMBERS_ENDPOINT = "orgs/%s/members?per_page=100"
OUTSIDE_COLLABORATORS_ENDPOINT = "orgs/%s/outside_collaborators?per_page=100"

_console = Console(stderr=True)


@dataclass
class User:
    """An account together with the activity found for it."""

    login: str
    id: int = 0
    email: str = ""
    active: bool = False
    activity_types: set[str] = field(default_factory=set)

    def make_active(self) -> None:
        self.active = True

    def make_inactive(self) -> None:
        self.active = False

    def add_activity_type(self, activity_type: str) -> None:
        self.activity_types.add(activity_type)

    def activity_type_list(self) -> list[str]:
        """The recorded activity types, sorted."""
        return sorted(self.activity_types)


def _user_from_json(data: dict[str, Any]) -> User:
    return User(
        login=data.get("login") or "",
        id=data.get("id") or 0,
        email=data.get("email") or "",
    )


def _fetch_emails(users: list[User], client: RestClient) -> None:
    _console.print("[blue]INFO[/] Getting user emails, if present")
    for user in users:
        try:
            with concurrent_slot():
                response = client.request("GET", f"users/{user.login}")
        except ApiError as exc:
            _console.print(f"[blue]INFO[/] Failed to fetch user details: {exc}")
            continue
        try:
            details = response.json()
        except ValueError as exc:
            raise ApiError(f"Failed to decode user details: {exc}") from exc
        user.email = _user_from_json(details).email


def get_users(organization: str, endpoint: str, email: bool, client: RestClient) -> list[User]:
    """Fetch every user listed by ``endpoint`` (a template taking the organization)."""
    all_users: list[User] = []
    with _console.status("Fetching users..."):
        for page in client.paginate(endpoint % organization):
            users = [_user_from_json(item) for item in page]
            if email:
                _fetch_emails(users, client)
            all_users.extend(users)
    _console.print("[green]SUCCESS[/] Fetched users successfully")
    return all_users


def get_organization_users(organization: str, email: bool, client: RestClient) -> list[User]:
    """Fetch the members of an organization."""
    _console.print(f"[blue]INFO[/] Starting to fetch members for organization: {organization}")
    return get_users(organization, MEMBERS_ENDPOINT, email, client)


def get_organization_outside_collaborators(
    organization: str, email: bool, client: RestClient
) -> list[User]:
    """Fetch the outside collaborators of an organization."""
    _console.print(
        f"[blue]INFO[/] Starting to fetch outside collaborators for organization: {organization}"
    )
    return get_users(organization, OUTSIDE_COLLABORATORS_ENDPOINT, email, client)