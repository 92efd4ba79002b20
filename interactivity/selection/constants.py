"""
Constants for the reaction selection system.
"""

import disnake

from interactivity import config

# Defaults
DEFAULT_TITLE = config.DEFAULT_SELECTION_TITLE
DEFAULT_CANCEL_EMOJI = config.DEFAULT_CANCEL_EMOJI
DEFAULT_PAGE_COLOR = disnake.Colour.blue()

# Timeout Values
SELECTION_TIMEOUT = config.SELECTION_TIMEOUT

# Default description
DESCRIPTION_LINE_FORMAT = "{emoji} - {text}\n"

# Events
REACTION_ADD_EVENT = "reaction_add"


class _AllUsers:
    """Sentinel for a selection anyone may answer."""

    _inst = None

    def __new__(cls):
        if cls._inst is None:
            cls._inst = super().__new__(cls)
        return cls._inst

    def __repr__(self):
        return "ALL_USERS"


ALL_USERS = _AllUsers()
