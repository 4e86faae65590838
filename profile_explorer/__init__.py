"""
profile-explorer: browse a GitHub user's profile and repositories from the terminal.
"""

__version__ = "0.1.0"
