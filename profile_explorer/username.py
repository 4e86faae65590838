"""
Username input parsing.
Accepts plain logins, @-prefixed logins and GitHub profile URLs.
"""

import re

# Profile URL (e.g., "https://github.com/octocat")
GITHUB_PROFILE_PATTERN = re.compile(
    r'^(?:https?://)?(?:www\.)?github\.com/([a-zA-Z0-9._-]+)/?$'
)


def parse_username(raw: str) -> str:
    """
    Reduce user input to a bare GitHub login.

    Returns an empty string when nothing usable was entered. Anything that is
    not a profile URL is passed through as typed (minus surrounding
    whitespace and a leading '@'); GitHub decides whether it exists.
    """
    value = raw.strip()

    url_match = GITHUB_PROFILE_PATTERN.match(value)
    if url_match:
        return url_match.group(1)

    if value.startswith('@'):
        value = value[1:].strip()

    return value
