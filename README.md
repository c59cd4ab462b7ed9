# dormantusers

Find the dormant members of a GitHub organization.

`dormantusers` lists every member of an organization (and, on request, its
outside collaborators), walks every repository in the organization, and checks
for activity since a given date:

- commits (`commits`)
- issues (`issues`)
- issue comments (`issue-comments`)
- pull request review comments (`pr-comments`)

Anyone who shows none of the checked activities is reported as dormant. The
tool prints a summary panel and a bar chart of active against inactive users,
and writes a CSV report named `<org>-dormant-users.csv` in the current
directory.

## Installation

```
pip install .
```

For development and tests:

```
pip install ".[test]"
pytest
```

## Authentication

The tool talks to the GitHub REST API. Provide a token with access to the
organization through the `GH_TOKEN` or `GITHUB_TOKEN` environment variable.

For GitHub Enterprise Server, set `GH_HOST` to your server's host name; the
API is then reached at `https://<host>/api/v3/`, and the token is taken from
`GH_ENTERPRISE_TOKEN`, `GITHUB_ENTERPRISE_TOKEN`, `GH_TOKEN` or
`GITHUB_TOKEN`, in that order.

```
export GH_TOKEN=token
```

## Usage

Running the command with no subcommand shows a banner and the help text:

```
gh-dormant-users
```

Generate a report:

```
gh-dormant-users report --org-name my-org --date "Jan 2 2025"
```

Options for `report`:

| Option | Description |
| --- | --- |
| `--org-name` | Organization to report on (required). |
| `--date` | Start date for the activity window, written like `Jan 2 2025`. It must be no more than three months in the past (required). |
| `-e`, `--email` | Look up each user's public e-mail address and include it in the report. |
| `--outside-collaborators` | Include the organization's outside collaborators as well as its members. |
| `--activity-types` | Comma-separated activity types to check; may be given more than once. Defaults to `commits,issues,issue-comments,pr-comments`. Unknown types are ignored. |

Example checking only commits and pull request comments, including outside
collaborators:

```
gh-dormant-users report --org-name my-org --date "Mar 1 2025" \
    --outside-collaborators --activity-types commits,pr-comments
```

The command exits with status 1 and a `FATAL` message if the date cannot be
parsed or is too old, if no token is found, if the API returns an error while
listing users or repositories, or if the report file cannot be written.

## Behaviour worth knowing

- Every listing follows the API's `Link` header (`rel="next"`) through all
  pages, 100 items per page.
- A failed request for a page of repositories is retried, up to five attempts
  in all, waiting 1, 2, 4, 8 and 16 seconds between them.
- When fetching commits, issues or comments for one repository, an empty
  repository ends that listing, and any other request failure counts as no
  activity for that repository.
- Requests for per-repository activity and user e-mails go through a shared
  limit of 100 concurrent requests (`dormantusers.limiter.concurrent_slot`).

## Report format

The CSV file has one row per user:

```
Username,Email,Active,ActivityTypes
octocat,octocat@example.com,true,"commits,issues"
hubot,,false,none
```

`Email` is filled only when `--email` is given and the user has a public
address. `ActivityTypes` lists, in sorted order, every kind of activity seen
for an active user, and `none` for a dormant one.

## Using it as a library

The pieces are usable on their own:

```python
from dormantusers.api import create_client
from dormantusers.users import get_organization_users
from dormantusers.repository import get_org_repositories
from dormantusers.activity import ActivityChecker, generate_user_report_csv
from dormantusers.dates import get_iso_date

client = create_client()
users = get_organization_users("my-org", False, client)
repos = get_org_repositories("my-org", client)

checker = ActivityChecker()
checker.check_activity(users, "my-org", repos, get_iso_date("Jan 2 2025"), client, ["commits"])
print(checker.counts())          # (active, inactive)
checker.render_bar_chart()
generate_user_report_csv(users, "report.csv")
```

`dormantusers.cli.generate_report` runs the whole report for one organization
and returns the path of the CSV file it wrote. `dormantusers.api.RestClient`
can be built directly with a token and a base URL, and its `paginate` method
yields the decoded JSON of each page.

## What it does not do

The package only reports. It does not suspend, remove or otherwise act on
dormant users, and it keeps no record between runs: each run fetches
everything again from the API.