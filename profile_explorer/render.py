"""
Terminal rendering for the explorer using rich.
Builds the header, profile card, filter bar and repository grid from explorer state.
"""

from typing import Dict, List, Sequence

from rich.columns import Columns
from rich.console import Group, RenderableType
from rich.padding import Padding
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import Profile, Repository
from .state import ExplorerState

THEMES: Dict[str, Dict[str, str]] = {
    'dark': {
        'background': 'on grey7',
        'title': 'bold white',
        'text': 'white',
        'muted': 'grey62',
        'border': 'grey37',
        'accent': 'bold blue',
        'link': 'green',
        'error': 'bold red',
        'loading': 'blue',
        'toggle_on': 'bold black on yellow',
        'toggle_off': 'bold white on blue',
    },
    'light': {
        'background': 'on grey93',
        'title': 'bold black',
        'text': 'black',
        'muted': 'grey23',
        'border': 'grey50',
        'accent': 'bold blue',
        'link': 'dark_green',
        'error': 'red',
        'loading': 'blue',
        'toggle_on': 'bold black on yellow',
        'toggle_off': 'bold white on blue',
    },
}

CARD_WIDTH = 36


def theme_for(state: ExplorerState) -> Dict[str, str]:
    return THEMES['dark' if state.dark else 'light']


def render_header(state: ExplorerState) -> RenderableType:
    theme = theme_for(state)
    header = Table.grid(expand=True)
    header.add_column(justify="left")
    header.add_column(justify="right")
    header.add_row(
        Text("GitHub Profile Detective 🔍", style=theme['title']),
        Text("☀ light mode" if state.dark else "☾ dark mode", style=theme['accent'])
    )
    return header


def render_profile(profile: Profile, state: ExplorerState, starred_count: int) -> RenderableType:
    """Profile card: name, bio, stats, link and copy button."""
    theme = theme_for(state)

    body = Text()
    body.append(profile.display_name, style=theme['title'])
    body.append("   ")
    body.append(f"[ {'Copied!' if state.copied else 'Copy URL'} ]", style=theme['toggle_off'])
    body.append("\n")
    body.append(profile.bio or "No bio available", style=theme['muted'])
    body.append("\n\n")
    body.append(f"📦 Total Repos: {profile.public_repos}", style=theme['text'])
    body.append("   ")
    body.append(f"⭐ Star Repos: {starred_count}", style=theme['text'])
    body.append("\n\n")
    body.append("View Profile: ", style=theme['text'])
    body.append(profile.html_url, style=f"{theme['link']} link {profile.html_url}")
    if profile.avatar_url:
        body.append("\nAvatar: ", style=theme['muted'])
        body.append(profile.avatar_url, style=f"{theme['muted']} link {profile.avatar_url}")

    return Panel(body, title=profile.login, border_style=theme['border'])


def render_filter_bar(state: ExplorerState) -> RenderableType:
    theme = theme_for(state)
    bar = Text()
    bar.append("Search repository: ", style=theme['text'])
    bar.append(state.repo_query or "(all)", style=theme['accent'])
    bar.append("   ")
    bar.append(" ⭐ Star Repos ", style=theme['toggle_on'] if state.show_star_only else theme['toggle_off'])
    return bar


def render_repository(repo: Repository, state: ExplorerState) -> RenderableType:
    theme = theme_for(state)
    body = Text()
    body.append(repo.description or "No description", style=theme['muted'])
    body.append("\n\n")
    body.append(f"★ {repo.stargazers_count}", style=theme['text'])
    body.append("   ")
    body.append(f"⑂ {repo.forks_count}", style=theme['text'])
    if repo.language:
        body.append("   ")
        body.append(repo.language, style=theme['accent'])
    body.append("\n")
    body.append(repo.html_url, style=f"{theme['link']} link {repo.html_url}")

    return Panel(
        body,
        title=Text(repo.name, style=theme['title']),
        title_align="left",
        border_style=theme['border'],
        width=CARD_WIDTH
    )


def render_repositories(repositories: Sequence[Repository], state: ExplorerState) -> RenderableType:
    # Columns wraps cards to the console width
    return Columns([render_repository(repo, state) for repo in repositories], equal=True)


def render_explorer(state: ExplorerState, repositories: Sequence[Repository],
                    starred_count: int) -> RenderableType:
    """
    Build the full page for the current state.

    Args:
        state: Explorer state
        repositories: The derived (filtered and sorted) repository view
        starred_count: Repositories with at least one star in the full list

    Returns:
        A rich renderable
    """
    theme = theme_for(state)
    parts: List[RenderableType] = [render_header(state)]

    if state.loading:
        parts.append(Text("Loading...", style=theme['loading'], justify="center"))
    if state.error:
        parts.append(Text(state.error, style=theme['error'], justify="center"))

    if state.profile is not None:
        parts.append(render_profile(state.profile, state, starred_count))

    if state.repositories:
        parts.append(render_filter_bar(state))

    parts.append(render_repositories(repositories, state))
    return Padding(Group(*parts), (1, 2), style=theme['background'], expand=True)

