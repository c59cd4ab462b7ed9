"""Matching repository activity to users and reporting the result."""

from __future__ import annotations

import csv
import logging
from collections import defaultdict
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from rich.console import Console
from rich.progress import Progress

from .api import RestClient
from .events import (
    get_commits_since_date,
    get_issue_comments_since_date,
    get_issues_since_date,
    get_pull_request_comments_since_date,
)
from .repository import Repository
from .users import User

CSV_HEADER = ["Username", "Email", "Active", "ActivityTypes"]
DEFAULT_ACTIVITY_TYPES = ("commits", "issues", "issue-comments", "pr-comments")
_BAR_WIDTH = 40

_log = logging.getLogger(__name__)
_console = Console(stderr=True)

_Fetcher = Callable[[str, str, str, RestClient], Sequence[Any]]

_SOURCES: dict[str, tuple[_Fetcher, str]] = {
    "commits": (get_commits_since_date, "Checking for commit activity..."),
    "issues": (get_issues_since_date, "Checking for issue activity..."),
    "issue-comments": (get_issue_comments_since_date, "Checking for issue comment activity..."),
    "pr-comments": (
        get_pull_request_comments_since_date,
        "Checking for pull request comment activity...",
    ),
}


class ActivityChecker:
    """Tracks which logins have shown activity across repositories."""

    def __init__(self) -> None:
        self.active_users: dict[str, bool] = {}

    def check_activity(
        self,
        users: list[User],
        organization: str,
        repositories: Sequence[Repository],
        date: str,
        client: RestClient,
        activity_types: Iterable[str],
    ) -> None:
        """Mark users active for each kind of activity found since ``date``.

        Unknown activity types are ignored.
        """
        for user in users:
            self.active_users[user.login] = False
        by_login: dict[str, list[User]] = defaultdict(list)
        for user in users:
            by_login[user.login].append(user)
        for activity_type in activity_types:
            source = _SOURCES.get(activity_type)
            if source is None:
                continue
            fetch, title = source
            self._scan(by_login, activity_type, fetch, title, organization, repositories, date, client)

    def _scan(
        self,
        by_login: dict[str, list[User]],
        activity_type: str,
        fetch: _Fetcher,
        title: str,
        organization: str,
        repositories: Sequence[Repository],
        date: str,
        client: RestClient,
    ) -> None:
        with Progress(console=_console, transient=True) as progress:
            for repo in progress.track(repositories, description=title):
                for item in fetch(organization, repo.name, date, client):
                    for user in by_login.get(item.login, ()):
                        user.add_activity_type(activity_type)
                        if not user.active and not self.active_users.get(user.login):
                            user.make_active()
                            self.active_users[user.login] = True

    def counts(self) -> tuple[int, int]:
        """Return the number of active and inactive logins."""
        active = sum(1 for flag in self.active_users.values() if flag)
        return active, len(self.active_users) - active

    def render_bar_chart(self, console: Console | None = None) -> None:
        """Draw a bar chart of active against inactive logins."""
        console = console or Console()
        active, inactive = self.counts()
        largest = max(active, inactive, 1)
        for label, value, colour in (("Active", active, "green"), ("Inactive", inactive, "red")):
            length = round(value / largest * _BAR_WIDTH)
            bar = "█" * length
            console.print(f"{label:<8} [{colour}]{bar}[/] {value}", highlight=False)


def generate_user_report_csv(users: Iterable[User], file_path: str) -> None:
    """Write one row per user with their activity state to ``file_path``."""
    _log.info("Generating CSV report: %s", file_path)
    with open(file_path, "w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for user in users:
            types = user.activity_type_list() if user.active else ["none"]
            writer.writerow(
                [user.login, user.email, "true" if user.active else "false", ",".join(types)]
            )