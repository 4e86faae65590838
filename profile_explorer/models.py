"""
Shared data models for the profile-explorer tool.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


def _required_str(data: Dict[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def _optional_str(data: Dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string or null, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Profile:
    """A GitHub user account as returned by the users endpoint."""
    login: str
    html_url: str
    avatar_url: str = ""
    name: Optional[str] = None
    bio: Optional[str] = None
    public_repos: int = 0

    @property
    def display_name(self) -> str:
        """Return the profile name, falling back to the login."""
        return self.name or self.login

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Profile":
        """
        Build a Profile from a GitHub API payload.

        Raises KeyError, TypeError or ValueError when a field is missing or
        has the wrong type.
        """
        return cls(
            login=_required_str(data, 'login'),
            html_url=_required_str(data, 'html_url'),
            avatar_url=_optional_str(data, 'avatar_url') or "",
            name=_optional_str(data, 'name'),
            bio=_optional_str(data, 'bio'),
            public_repos=int(data.get('public_repos') or 0)
        )


@dataclass(frozen=True)
class Repository:
    """A single repository owned by a user."""
    id: int
    name: str
    html_url: str
    description: Optional[str] = None
    stargazers_count: int = 0
    forks_count: int = 0
    language: Optional[str] = None

    @property
    def is_starred(self) -> bool:
        return self.stargazers_count > 0

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Repository":
        return cls(
            id=int(data['id']),
            name=_required_str(data, 'name'),
            html_url=_required_str(data, 'html_url'),
            description=_optional_str(data, 'description'),
            stargazers_count=int(data.get('stargazers_count') or 0),
            forks_count=int(data.get('forks_count') or 0),
            language=_optional_str(data, 'language')
        )
