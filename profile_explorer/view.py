"""
Derived repository views.
"""

from typing import Iterable, Optional, Sequence, Tuple

from .models import Repository
from .state import ExplorerState


def derive_repositories(repositories: Sequence[Repository], query: str,
                        star_only: bool) -> Tuple[Repository, ...]:
    """
    Filter and sort repositories for display.

    Keeps repositories whose name contains the query (case-insensitive),
    drops unstarred ones when star_only is set, then orders by stargazer
    count descending with the repository id as tie-break. The input sequence
    is left untouched.
    """
    needle = query.lower()
    matched = [repo for repo in repositories if needle in repo.name.lower()]

    if star_only:
        matched = [repo for repo in matched if repo.is_starred]

    return tuple(sorted(matched, key=lambda repo: (-repo.stargazers_count, repo.id)))


def count_starred(repositories: Iterable[Repository]) -> int:
    """Number of repositories with at least one star, ignoring any filter."""
    return sum(1 for repo in repositories if repo.is_starred)


class RepoView:
    """Memoized repository view keyed on list version, query and star flag."""

    def __init__(self):
        self._key: Optional[Tuple[int, str, bool]] = None
        self._value: Tuple[Repository, ...] = ()
        self.computations = 0

    def get(self, state: ExplorerState) -> Tuple[Repository, ...]:
        key = (state.repos_version, state.repo_query, state.show_star_only)
        if key != self._key:
            self._value = derive_repositories(state.repositories, state.repo_query,
                                              state.show_star_only)
            self._key = key
            self.computations += 1
        return self._value
