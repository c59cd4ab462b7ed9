from dormantusers.header import get_next_page_url


def test_returns_next_link_among_several():
    header = (
        '<https://api.example.com/orgs/acme/repos?page=2>; rel="next", '
        '<https://api.example.com/orgs/acme/repos?page=5>; rel="last"'
    )
    assert get_next_page_url(header) == "https://api.example.com/orgs/acme/repos?page=2"


def test_next_link_not_first():
    header = (
        '<https://api.example.com/x?page=1>; rel="prev", '
        '<https://api.example.com/x?page=3>; rel="next"'
    )
    assert get_next_page_url(header) == "https://api.example.com/x?page=3"


def test_no_next_link_gives_none():
    header = (
        '<https://api.example.com/x?page=1>; rel="first", '
        '<https://api.example.com/x?page=2>; rel="prev"'
    )
    assert get_next_page_url(header) is None


def test_entries_without_rel_are_skipped():
    assert get_next_page_url("<https://api.example.com/x?page=2>") is None


def test_empty_header_gives_none():
    assert get_next_page_url("") is None
    assert get_next_page_url(None) is None