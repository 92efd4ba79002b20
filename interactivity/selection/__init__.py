"""
Reaction selection system.

This package builds and runs single-choice selections where users pick an option by reacting to a message with the
option's emoji.
"""

# Building
from .builder import ReactionSelectionBuilder
from .constants import ALL_USERS
from .selection import ReactionSelection, SelectionResult

# Running
from .runtime import SelectionState, run_selection

# Helpers
from .selection_helpers import to_trigger, user_id


__all__ = (
    # Building
    "ReactionSelectionBuilder",
    "ReactionSelection",
    "SelectionResult",
    "ALL_USERS",
    # Running
    "SelectionState",
    "run_selection",
    # Helpers
    "to_trigger",
    "user_id",
)
