"""
GitHub API integration for user profiles and repositories.
Handles the two public REST endpoints the explorer reads from.
"""

import logging
from typing import Any, List, Optional, Tuple
from urllib.parse import quote

import requests

from .models import Profile, Repository

logger = logging.getLogger(__name__)


class GitHubAPIError(Exception):
    """Raised when a GitHub API call fails for any reason."""

    def __init__(self, message: str, status_code: Optional[int] = None,
                 cause: Optional[BaseException] = None):
        super().__init__(message)
        self.status_code = status_code
        self.cause = cause


class UserNotFound(GitHubAPIError):
    """Raised when GitHub answers 404 for a username."""
    pass


class MalformedResponse(GitHubAPIError):
    """Raised when a response body is not the expected JSON shape."""
    pass


class GitHubAPI:
    """GitHub REST client for profile and repository lookups."""

    BASE_URL = "https://api.github.com"
    REPOS_PER_PAGE = 100  # single page, no pagination
    REPOS_SORT = "updated"
    USER_AGENT = "profile-explorer"

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        self.base_url = (base_url or self.BASE_URL).rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            'Accept': 'application/vnd.github+json',
            'User-Agent': self.USER_AGENT
        })

    def get_profile(self, username: str) -> Profile:
        """
        Fetch a user's public profile.

        Args:
            username: GitHub login

        Returns:
            Profile

        Raises:
            UserNotFound: If GitHub has no such user
            GitHubAPIError: On network failure or any other non-2xx status
            MalformedResponse: If the payload is not a profile object
        """
        data = self._get(f"/users/{quote(username, safe='')}")
        if not isinstance(data, dict):
            raise MalformedResponse(f"Expected a profile object for {username}")

        try:
            return Profile.from_api(data)
        except (KeyError, TypeError, ValueError) as e:
            raise MalformedResponse(f"Malformed profile for {username}: {e}", cause=e) from e

    def get_repositories(self, username: str) -> List[Repository]:
        """
        Fetch one page of a user's repositories, most recently updated first.

        Args:
            username: GitHub login

        Returns:
            List of Repository objects (at most REPOS_PER_PAGE)
        """
        params = {'per_page': self.REPOS_PER_PAGE, 'sort': self.REPOS_SORT}
        data = self._get(f"/users/{quote(username, safe='')}/repos", params=params)
        if not isinstance(data, list):
            raise MalformedResponse(f"Expected a repository list for {username}")

        try:
            return [Repository.from_api(item) for item in data]
        except (KeyError, TypeError, ValueError) as e:
            raise MalformedResponse(f"Malformed repository for {username}: {e}", cause=e) from e

    def fetch_user(self, username: str) -> Tuple[Profile, List[Repository]]:
        """Fetch the profile, then the repositories, in that order."""
        profile = self.get_profile(username)
        repositories = self.get_repositories(username)
        return profile, repositories

    def close(self):
        self.session.close()

    def _get(self, path: str, params: Optional[dict] = None) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("GET %s params=%s", url, params)

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise GitHubAPIError(f"Request to {url} failed: {e}", cause=e) from e

        if response.status_code == 404:
            raise UserNotFound(f"Not found: {url}", status_code=404)

        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            # 403 here is usually the unauthenticated rate limit
            remaining = response.headers.get('X-RateLimit-Remaining')
            if remaining == '0':
                logger.warning("GitHub API rate limit exhausted")
            raise GitHubAPIError(
                f"GitHub API error {response.status_code} for {url}",
                status_code=response.status_code,
                cause=e
            ) from e

        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponse(f"Invalid JSON from {url}", status_code=response.status_code,
                                    cause=e) from e
