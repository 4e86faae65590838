import pytest

from profile_explorer.username import parse_username


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("octocat", "octocat"),
        ("  octocat\n", "octocat"),
        ("@octocat", "octocat"),
        ("https://github.com/octocat", "octocat"),
        ("http://www.github.com/octocat/", "octocat"),
        ("github.com/octocat", "octocat"),
        ("", ""),
        ("   ", ""),
        ("@", ""),
    ],
)
def test_parse_username(raw, expected):
    assert parse_username(raw) == expected


def test_repository_url_is_not_a_profile_url():
    # left as typed so the lookup fails instead of silently picking the owner
    assert parse_username("https://github.com/octocat/hello-world") == "https://github.com/octocat/hello-world"
