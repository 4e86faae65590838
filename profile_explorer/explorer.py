"""
The ProfileExplorer controller.
Owns the explorer state and runs the fetch pipeline, filters, theme and copy actions.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Callable, Optional, Tuple

from .clipboard import ClipboardUnavailable, write_clipboard
from .config import Config
from .github_api import GitHubAPI, GitHubAPIError
from .models import Repository
from .state import CLIPBOARD_MESSAGE, ExplorerState, FailureDetail
from .username import parse_username
from .view import RepoView, count_starred
from . import state as ops

logger = logging.getLogger(__name__)


class ProfileExplorer:
    """Search a GitHub user and keep a filtered view of their repositories."""

    def __init__(self, api: Optional[GitHubAPI] = None, config: Optional[Config] = None,
                 clipboard: Callable[[str], None] = write_clipboard,
                 timer_factory: Callable[..., threading.Timer] = threading.Timer):
        self.config = config or Config()
        self.api = api or GitHubAPI(base_url=self.config.api_url, timeout=self.config.timeout)
        self.state = ExplorerState(dark=self.config.dark)
        self._clipboard = clipboard
        self._timer_factory = timer_factory
        self._view = RepoView()
        self._lock = threading.RLock()
        self._copy_token = 0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    # ---------------- search ----------------

    def submit(self, raw_username: str) -> bool:
        """
        Search for a user and load their profile and repositories.

        Returns True when results were committed. Empty input does nothing.
        A search superseded by a later submit never touches the state.
        """
        username = parse_username(raw_username)
        if not username:
            return False

        with self._lock:
            generation = ops.begin_search(self.state, username)

        logger.info("Searching GitHub for '%s' (generation %d)", username, generation)

        with self._loading(generation):
            try:
                profile, repositories = self.api.fetch_user(username)
            except GitHubAPIError as e:
                with self._lock:
                    if not ops.is_current(self.state, generation):
                        logger.info("Discarding stale failure for '%s'", username)
                        return False
                    logger.warning("Search for '%s' failed (status %s): %s",
                                   username, e.status_code, e)
                    ops.record_failure(self.state, FailureDetail(
                        username=username,
                        status_code=e.status_code,
                        cause=repr(e.cause or e)
                    ))
                return False

            with self._lock:
                if not ops.is_current(self.state, generation):
                    logger.info("Discarding stale results for '%s'", username)
                    return False
                ops.commit_results(self.state, profile, repositories)

        logger.info("Loaded %s with %d repositories", profile.login, len(repositories))
        return True

    @contextmanager
    def _loading(self, generation: int):
        with self._lock:
            ops.set_loading(self.state, True)
        try:
            yield
        finally:
            with self._lock:
                # only the newest search may clear the flag
                if ops.is_current(self.state, generation):
                    ops.set_loading(self.state, False)

    # ---------------- filters ----------------

    def set_repo_query(self, query: str):
        with self._lock:
            ops.set_repo_query(self.state, query)

    def toggle_star_only(self):
        with self._lock:
            ops.toggle_star_only(self.state)

    def toggle_theme(self):
        with self._lock:
            ops.toggle_theme(self.state)

    @property
    def visible_repositories(self) -> Tuple[Repository, ...]:
        with self._lock:
            return self._view.get(self.state)

    @property
    def starred_count(self) -> int:
        with self._lock:
            return count_starred(self.state.repositories)

    # ---------------- copy ----------------

    def copy_profile_url(self) -> bool:
        """Copy the profile URL and show feedback for a short while."""
        with self._lock:
            profile = self.state.profile
        if profile is None:
            return False

        try:
            self._clipboard(profile.html_url)
        except ClipboardUnavailable:
            with self._lock:
                ops.set_error(self.state, CLIPBOARD_MESSAGE)
            return False

        with self._lock:
            self._cancel_copy_timer()
            self._copy_token += 1
            timer = self._timer_factory(self.config.copy_feedback_seconds,
                                        self._reset_copied, args=(self._copy_token,))
            if self.state.error == CLIPBOARD_MESSAGE:
                ops.set_error(self.state, "")
            timer.daemon = True
            ops.set_copied(self.state, True, timer)
            timer.start()
        return True

    def _reset_copied(self, token: int):
        with self._lock:
            if token != self._copy_token:
                return
            ops.set_copied(self.state, False)

    def _cancel_copy_timer(self):
        if self.state.copy_timer is not None:
            self.state.copy_timer.cancel()
            self.state.copy_timer = None

    # ---------------- teardown ----------------

    def close(self):
        with self._lock:
            self._cancel_copy_timer()
            # invalidate any timer that already started running
            self._copy_token += 1
        self.api.close()
