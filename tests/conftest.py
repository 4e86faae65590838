from typing import Any, Dict, List, Optional

import pytest

from profile_explorer.config import Config
from profile_explorer.github_api import GitHubAPI
from profile_explorer.models import Repository

API_URL = "https://api.github.com"


def profile_payload(login: str = "octocat", **overrides) -> Dict[str, Any]:
    data = {
        "login": login,
        "name": "The Octocat",
        "avatar_url": f"https://avatars.githubusercontent.com/u/1?{login}",
        "bio": "Mascot",
        "public_repos": 8,
        "html_url": f"https://github.com/{login}",
    }
    data.update(overrides)
    return data


def repo_payload(id: int, name: str, stars: int = 0, **overrides) -> Dict[str, Any]:
    data = {
        "id": id,
        "name": name,
        "description": f"{name} description",
        "stargazers_count": stars,
        "forks_count": 1,
        "language": "Python",
        "html_url": f"https://github.com/octocat/{name}",
    }
    data.update(overrides)
    return data


def make_repo(id: int, name: str, stars: int = 0) -> Repository:
    return Repository.from_api(repo_payload(id, name, stars))


class FakeTimer:
    """Stands in for threading.Timer; fires only when told to."""

    created: List["FakeTimer"] = []

    def __init__(self, interval: float, function, args: Optional[tuple] = None):
        self.interval = interval
        self.function = function
        self.args = args or ()
        self.daemon = False
        self.started = False
        self.cancelled = False
        FakeTimer.created.append(self)

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        # threading.Timer still runs its function if cancel() came too late
        self.function(*self.args)


@pytest.fixture
def fake_timer():
    FakeTimer.created = []
    yield FakeTimer
    FakeTimer.created = []


@pytest.fixture
def config():
    return Config(api_url=API_URL, copy_feedback_seconds=1.5)


@pytest.fixture
def api():
    client = GitHubAPI(base_url=API_URL)
    yield client
    client.close()
