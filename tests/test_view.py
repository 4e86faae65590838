from profile_explorer.state import ExplorerState
from profile_explorer.view import RepoView, count_starred, derive_repositories

from conftest import make_repo


def names(repos):
    return [repo.name for repo in repos]


class TestDeriveRepositories:
    def test_name_filter_is_case_insensitive_substring(self):
        repos = [make_repo(1, "abc"), make_repo(2, "abcd"), make_repo(3, "xyz")]

        assert sorted(names(derive_repositories(repos, "ab", False))) == ["abc", "abcd"]
        assert sorted(names(derive_repositories(repos, "AB", False))) == ["abc", "abcd"]

    def test_name_filter_ignores_star_flag_for_matching(self):
        repos = [make_repo(1, "abc", 2), make_repo(2, "abcd", 1), make_repo(3, "xyz", 9)]

        assert names(derive_repositories(repos, "ab", True)) == ["abc", "abcd"]
        assert names(derive_repositories(repos, "ab", False)) == ["abc", "abcd"]

    def test_empty_query_matches_everything(self):
        repos = [make_repo(1, "abc"), make_repo(2, "xyz")]

        assert len(derive_repositories(repos, "", False)) == 2

    def test_star_only_removes_unstarred(self):
        repos = [make_repo(1, "a", 0), make_repo(2, "b", 3), make_repo(3, "c", 0), make_repo(4, "d", 5)]

        result = derive_repositories(repos, "", True)

        assert sorted(names(result)) == ["b", "d"]

    def test_star_only_composes_with_query(self):
        repos = [make_repo(1, "api-a", 0), make_repo(2, "api-b", 3), make_repo(3, "web", 0), make_repo(4, "web-x", 5)]

        assert names(derive_repositories(repos, "api", True)) == ["api-b"]

    def test_sorted_by_stars_descending_with_id_tie_break(self):
        repos = [make_repo(7, "seven", 5), make_repo(2, "two", 1), make_repo(3, "three", 5), make_repo(1, "one", 0)]

        result = derive_repositories(repos, "", False)

        assert [r.stargazers_count for r in result] == [5, 5, 1, 0]
        assert names(result) == ["three", "seven", "two", "one"]

    def test_does_not_mutate_source(self):
        repos = [make_repo(1, "low", 0), make_repo(2, "high", 9)]
        original = list(repos)

        derive_repositories(repos, "", False)

        assert repos == original

    def test_is_pure(self):
        repos = [make_repo(1, "abc", 1), make_repo(2, "abd", 4), make_repo(3, "zzz", 0)]

        first = derive_repositories(repos, "ab", True)
        second = derive_repositories(repos, "ab", True)

        assert first == second


class TestCountStarred:
    def test_counts_full_list(self):
        repos = [make_repo(1, "a", 0), make_repo(2, "b", 3), make_repo(3, "c", 1)]

        assert count_starred(repos) == 2
        assert count_starred([]) == 0


class TestRepoView:
    def test_recomputes_only_on_relevant_change(self):
        state = ExplorerState(repositories=(make_repo(1, "abc", 1), make_repo(2, "xyz", 0)), repos_version=1)
        view = RepoView()

        first = view.get(state)
        state.dark = False
        state.loading = True
        state.copied = True
        second = view.get(state)

        assert first is second
        assert view.computations == 1

        state.repo_query = "xy"
        assert names(view.get(state)) == ["xyz"]
        state.show_star_only = True
        assert names(view.get(state)) == []
        assert view.computations == 3

    def test_new_repository_version_recomputes(self):
        state = ExplorerState(repositories=(make_repo(1, "abc", 1),), repos_version=1)
        view = RepoView()
        view.get(state)

        state.repositories = (make_repo(5, "new", 0),)
        state.repos_version = 2

        assert names(view.get(state)) == ["new"]


def test_is_starred():
    assert make_repo(1, "a", 1).is_starred is True
    assert make_repo(2, "b", 0).is_starred is False
