import pytest

from pod_request.urls import build_url, join_url


@pytest.mark.parametrize(
    ("first", "second"),
    [
        ("http://host/api", "path"),
        ("http://host/api/", "path"),
        ("http://host/api", "/path"),
        ("http://host/api/", "/path"),
    ],
)
def test_join_url_keeps_single_separator(first: str, second: str) -> None:
    assert join_url(first, second) == "http://host/api/path"


def test_build_url_appends_trailing_segment() -> None:
    url = build_url("http://host/srv/", "/nzh/guild", "42")
    assert url == "http://host/srv/nzh/guild/42"


def test_build_url_skips_empty_trailing_segment() -> None:
    assert build_url("http://host/srv", "nzh/guild", "") == "http://host/srv/nzh/guild"
    assert build_url("http://host/srv", "nzh/guild", None) == "http://host/srv/nzh/guild"


def test_join_url_only_touches_the_seam() -> None:
    assert join_url("http://host//a/", "/b//c") == "http://host//a/b//c"
