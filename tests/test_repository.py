import pytest
import responses

from dormantusers.api import ApiError, RestClient
from dormantusers.repository import Repository, get_org_repositories

BASE = "https://api.example.com/"
REPOS = BASE + "orgs/acme/repos?per_page=100"


@pytest.fixture
def client():
    return RestClient(token="token", base_url=BASE)


@pytest.fixture
def rsps():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as mock:
        yield mock


def test_repositories_across_pages(client, rsps):
    page2 = REPOS + "&page=2"
    rsps.add(
        responses.GET,
        REPOS,
        json=[{"name": "api"}, {"name": "web"}],
        headers={"Link": f'<{page2}>; rel="next", <{page2}>; rel="last"'},
    )
    rsps.add(responses.GET, page2, json=[{"name": "docs"}])
    sleeps = []
    repos = get_org_repositories("acme", client, sleeps.append)
    assert repos == [Repository("api"), Repository("web"), Repository("docs")]
    assert sleeps == []


def test_retry_then_success(client, rsps):
    rsps.add(responses.GET, REPOS, json={"message": "Bad Gateway"}, status=502)
    rsps.add(responses.GET, REPOS, json=[{"name": "api"}])
    sleeps = []
    repos = get_org_repositories("acme", client, sleeps.append)
    assert [r.name for r in repos] == ["api"]
    assert sleeps == [1]
    assert len(rsps.calls) == 2


def test_gives_up_after_five_attempts(client, rsps):
    rsps.add(responses.GET, REPOS, json={"message": "Server Error"}, status=500)
    sleeps = []
    with pytest.raises(ApiError) as info:
        get_org_repositories("acme", client, sleeps.append)
    assert info.value.status_code == 500
    assert len(rsps.calls) == 5
    assert len(sleeps) == 5
    assert sleeps[0] == 1
    assert all(later == 2 * earlier for earlier, later in zip(sleeps, sleeps[1:]))


def test_invalid_json_raises(client, rsps):
    rsps.add(responses.GET, REPOS, body="<html>")
    with pytest.raises(ApiError):
        get_org_repositories("acme", client, lambda _: None)