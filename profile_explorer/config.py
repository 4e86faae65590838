"""
Runtime configuration read from the environment (and a .env file).
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_COPY_SECONDS = 1.5


@dataclass
class Config:
    api_url: str = DEFAULT_API_URL
    timeout: Optional[float] = None  # None means wait indefinitely
    copy_feedback_seconds: float = DEFAULT_COPY_SECONDS
    dark: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None,
                 dotenv: bool = True) -> "Config":
        """
        Build a Config from environment variables.

        Recognized variables: GITHUB_API_URL, PROFILE_EXPLORER_TIMEOUT,
        PROFILE_EXPLORER_COPY_SECONDS and PROFILE_EXPLORER_THEME.
        """
        if dotenv:
            load_dotenv()
        env = os.environ if environ is None else environ

        timeout = env.get('PROFILE_EXPLORER_TIMEOUT')
        copy_seconds = env.get('PROFILE_EXPLORER_COPY_SECONDS')
        theme = (env.get('PROFILE_EXPLORER_THEME') or 'dark').strip().lower()
        if theme not in ('dark', 'light'):
            raise ValueError(f"PROFILE_EXPLORER_THEME must be 'dark' or 'light', got {theme!r}")

        return cls(
            api_url=env.get('GITHUB_API_URL') or DEFAULT_API_URL,
            timeout=float(timeout) if timeout else None,
            copy_feedback_seconds=float(copy_seconds) if copy_seconds else DEFAULT_COPY_SECONDS,
            dark=theme == 'dark'
        )
