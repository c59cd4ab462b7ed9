"""Command line entry point for the dormant users report."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .activity import DEFAULT_ACTIVITY_TYPES, ActivityChecker, generate_user_report_csv
from .api import ApiError, RestClient, create_client
from .dates import DateError, get_iso_date, validate_date
from .repository import get_org_repositories
from .users import get_organization_outside_collaborators, get_organization_users

PROG = "gh-dormant-users"
DESCRIPTION = (
    "A CLI tool to report upon and take action on dormant GitHub users within GHEC / GHES"
)
BANNER = "GitHub Dormant Users ૮(-.-)ა"


def _split_csv(value: str) -> list[str]:
    """Split a comma separated flag value, dropping empty entries."""
    return [part.strip() for part in value.split(",") if part.strip()]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its ``report`` sub-command."""
    parser = argparse.ArgumentParser(prog=PROG, description=DESCRIPTION)
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    report = commands.add_parser("report", help="Generate a report", description="Generate a report")
    report.add_argument(
        "--org-name",
        required=True,
        help="The name of the organization to report upon",
    )
    report.add_argument(
        "-e",
        "--email",
        action="store_true",
        help="Check if user has an email",
    )
    report.add_argument(
        "--outside-collaborators",
        action="store_true",
        help="Also include outside collaborators in the report",
    )
    report.add_argument(
        "--date",
        required=True,
        help="The date from which to start looking for activity. Max 3 months in the past.",
    )
    report.add_argument(
        "--activity-types",
        action="extend",
        type=_split_csv,
        default=None,
        help=(
            "Comma-separated list of activity types to check "
            "(commits, issues, issue-comments, pr-comments)"
        ),
    )
    return parser


def generate_report(
    org_name: str,
    email: bool,
    outside_collaborators: bool,
    date: str,
    activity_types: Sequence[str] = DEFAULT_ACTIVITY_TYPES,
    client: RestClient | None = None,
    console: Console | None = None,
) -> str:
    """Check the organization for dormant users and write the CSV report.

    Returns the path of the report written.
    """
    console = console or Console()
    validate_date(date)
    iso_date = get_iso_date(date)
    if client is None:
        client = create_client()

    users = get_organization_users(org_name, email, client)
    if outside_collaborators:
        users.extend(get_organization_outside_collaborators(org_name, email, client))

    repositories = get_org_repositories(org_name, client)

    console.print(
        Panel(
            f"Number of users: {len(users)}\nNumber of repositories: {len(repositories)}",
            title="Organization Info",
            padding=(1, 1),
            expand=False,
        )
    )
    console.print("[blue]INFO[/] Checking for activity...")
    checker = ActivityChecker()
    checker.check_activity(users, org_name, repositories, iso_date, client, activity_types)
    checker.render_bar_chart(console)

    file_path = f"{org_name}-dormant-users.csv"
    generate_user_report_csv(users, file_path)
    return file_path


def _print_banner(parser: argparse.ArgumentParser, console: Console) -> None:
    text = Text(BANNER, style="rgb(0,255,255)")
    console.print(Panel(text, padding=(3, 5), expand=False))
    console.print(parser.format_help(), markup=False, highlight=False)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line interface and return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    console = Console()

    if args.command != "report":
        _print_banner(parser, console)
        return 0

    activity_types = (
        args.activity_types if args.activity_types is not None else list(DEFAULT_ACTIVITY_TYPES)
    )
    errors = Console(stderr=True)
    try:
        generate_report(
            args.org_name,
            args.email,
            args.outside_collaborators,
            args.date,
            activity_types,
            console=console,
        )
    except (DateError, ApiError, OSError) as exc:
        errors.print(f"[red]FATAL[/] {exc}", highlight=False)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())