from .enums import DeletionOptions, SelectionStatus
from .errors import *
from .page import Page, PageBuilder, PageField
from .selection import (
    ALL_USERS,
    ReactionSelection,
    ReactionSelectionBuilder,
    SelectionResult,
    SelectionState,
    run_selection,
)

__version__ = "1.0.0"
