#!/usr/bin/env python3
"""
Main CLI entry point for the profile-explorer tool.
"""

import logging
import sys
from typing import Optional, Tuple

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt

from .config import Config
from .explorer import ProfileExplorer
from .render import render_explorer

# Load environment variables from .env file
load_dotenv()

console = Console()
logger = logging.getLogger(__name__)

HELP_TEXT = (
    "[bold]Commands[/bold]\n"
    "  <username> or /user <username>   search a GitHub user\n"
    "  /filter <text>                   filter repositories by name (empty clears)\n"
    "  /star                            toggle star repos only\n"
    "  /theme                           toggle light/dark mode\n"
    "  /copy                            copy the profile URL\n"
    "  /help                            show this help\n"
    "  /quit                            exit"
)

COMMANDS = {'user', 'filter', 'star', 'theme', 'copy', 'help', 'quit'}


def parse_command(line: str) -> Tuple[str, str]:
    """
    Split a prompt line into (command, argument).

    Plain text is a user search. Unknown slash commands come back as
    ('unknown', name).
    """
    line = line.strip()
    if not line:
        return 'noop', ''
    if not line.startswith('/'):
        return 'user', line

    name, _, arg = line[1:].partition(' ')
    name = name.lower()
    if name in ('q', 'exit'):
        name = 'quit'
    if name not in COMMANDS:
        return 'unknown', name
    return name, arg.strip()


def configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True
    )


def show(explorer: ProfileExplorer):
    console.print(render_explorer(explorer.state, explorer.visible_repositories,
                                  explorer.starred_count))


def run_command(explorer: ProfileExplorer, command: str, arg: str) -> bool:
    """Apply one command to the explorer. Returns False when the loop should stop."""
    if command == 'quit':
        return False
    if command == 'help':
        console.print(Panel(HELP_TEXT, title="Help", border_style="blue"))
        return True
    if command == 'unknown':
        console.print(f"[yellow]Unknown command: /{escape(arg)} (try /help)[/yellow]")
        return True
    if command == 'noop':
        return True

    if command == 'user':
        if arg:
            with console.status(f"Searching GitHub for '{escape(arg)}'..."):
                explorer.submit(arg)
    elif command == 'filter':
        explorer.set_repo_query(arg)
    elif command == 'star':
        explorer.toggle_star_only()
    elif command == 'theme':
        explorer.toggle_theme()
    elif command == 'copy':
        if explorer.state.profile is None:
            console.print("[yellow]Search for a user first[/yellow]")
            return True
        explorer.copy_profile_url()

    show(explorer)
    return True


@click.command()
@click.argument('username', required=False)
@click.option('--light', is_flag=True, help='Start in light mode')
@click.option('--query', '-q', default='', help='Initial repository name filter')
@click.option('--star-only', is_flag=True, help='Show only repositories with at least one star')
@click.option('--once', is_flag=True, help='Render once and exit instead of prompting')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def cli(username: Optional[str], light: bool, query: str, star_only: bool, once: bool, verbose: bool):
    """
    Explore a GitHub user's profile and repositories.

    USERNAME: GitHub login, @login or profile URL (optional)

    Examples:
      profile-explorer octocat
      profile-explorer octocat --query hello --star-only --once
    """
    configure_logging(verbose)

    try:
        config = Config.from_env(dotenv=False)
    except ValueError as e:
        console.print(Panel(f"[red]{e}[/red]", title="Configuration Error", border_style="red"))
        sys.exit(1)

    if light:
        config.dark = False
    logger.info("Using GitHub API at %s", config.api_url)

    explorer = ProfileExplorer(config=config)
    try:
        if username:
            with console.status(f"Searching GitHub for '{escape(username)}'..."):
                explorer.submit(username)
        if query:
            explorer.set_repo_query(query)
        # a fresh search resets the star filter, so apply the flag afterwards
        if star_only:
            explorer.toggle_star_only()

        show(explorer)
        if once:
            sys.exit(1 if explorer.state.error else 0)

        console.print("[blue]Type /help for commands[/blue]")
        while True:
            line = Prompt.ask("[bold blue]>[/bold blue]", console=console)
            command, arg = parse_command(line)
            if not run_command(explorer, command, arg):
                break

    except (KeyboardInterrupt, EOFError):
        console.print("\n[yellow]Bye![/yellow]")
    except Exception as e:
        console.print(Panel(
            f"[red]Unexpected error:[/red] {str(e)}",
            title="Error",
            border_style="red"
        ))
        if verbose:
            console.print_exception()
        sys.exit(1)
    finally:
        explorer.close()


if __name__ == "__main__":
    cli()
