"""
System clipboard access.
"""

import logging

import pyperclip

logger = logging.getLogger(__name__)


class ClipboardUnavailable(Exception):
    """Raised when no clipboard backend can be used."""
    pass


def write_clipboard(text: str):
    """Copy text to the system clipboard."""
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        logger.warning("Clipboard write failed: %s", e)
        raise ClipboardUnavailable(str(e)) from e
