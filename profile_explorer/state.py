"""
Explorer state container and the update operations that act on it.

Every field the explorer owns lives on ExplorerState. The functions below are
the only places that change it, so the Idle -> Loading -> Loaded/Failed cycle
can be exercised without rendering anything.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence, Tuple

from .models import Profile, Repository

NOT_FOUND_MESSAGE = "❌ GitHub user not found"
CLIPBOARD_MESSAGE = "❌ Clipboard unavailable"


@dataclass
class FailureDetail:
    """Diagnostic detail for the last failed search."""
    username: str
    status_code: Optional[int]
    cause: str


@dataclass
class ExplorerState:
    # search
    username: str = ""
    repo_query: str = ""
    show_star_only: bool = False

    # data
    profile: Optional[Profile] = None
    repositories: Tuple[Repository, ...] = ()
    repos_version: int = 0

    # ui
    dark: bool = True
    loading: bool = False
    error: str = ""
    copied: bool = False

    generation: int = 0
    last_failure: Optional[FailureDetail] = None
    copy_timer: Optional[Any] = field(default=None, repr=False)

    @property
    def status(self) -> str:
        """Current phase: idle, loading, loaded or failed."""
        if self.loading:
            return "loading"
        if self.last_failure is not None:
            return "failed"
        if self.profile is not None:
            return "loaded"
        return "idle"


def begin_search(state: ExplorerState, username: str) -> int:
    """Start a search and return its generation token."""
    state.generation += 1
    state.username = username
    state.error = ""
    return state.generation


def is_current(state: ExplorerState, generation: int) -> bool:
    return generation == state.generation


def commit_results(state: ExplorerState, profile: Profile,
                   repositories: Sequence[Repository]):
    """Replace profile and repositories together and clear the star filter."""
    state.profile = profile
    state.repositories = tuple(repositories)
    state.repos_version += 1
    state.show_star_only = False
    state.last_failure = None


def record_failure(state: ExplorerState, detail: FailureDetail):
    # Prior profile and repositories stay on screen after a failed search.
    state.error = NOT_FOUND_MESSAGE
    state.last_failure = detail


def set_loading(state: ExplorerState, loading: bool):
    state.loading = loading


def set_error(state: ExplorerState, message: str):
    state.error = message


def set_repo_query(state: ExplorerState, query: str):
    state.repo_query = query


def toggle_star_only(state: ExplorerState):
    state.show_star_only = not state.show_star_only


def toggle_theme(state: ExplorerState):
    state.dark = not state.dark


def set_copied(state: ExplorerState, copied: bool, timer: Optional[Any] = None):
    state.copied = copied
    state.copy_timer = timer
