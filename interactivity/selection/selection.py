"""
The immutable result of building a reaction selection, and the outcome of running one.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Generic, Mapping, Optional, Tuple, TypeVar

import disnake

from interactivity.enums import DeletionOptions, SelectionStatus
from interactivity.page import Page
from .constants import ALL_USERS
from .selection_helpers import to_trigger, trigger_key, user_id

__all__ = ("ReactionSelection", "SelectionResult")

T = TypeVar("T")


@dataclass(frozen=True)
class ReactionSelection(Generic[T]):
    """
    A validated selection, ready to be run. Created by :meth:`ReactionSelectionBuilder.build`.

    ``selectables`` is a read-only view over a mapping owned by this selection, and ``users`` is a tuple (or
    :data:`ALL_USERS`), so a selection can be shared between the reaction listener and the timeout freely.
    """

    selectables: Mapping[disnake.PartialEmoji, T]
    users: Tuple[Any, ...]  # or ALL_USERS
    selection_page: Page
    cancelled_page: Optional[Page]
    timed_out_page: Optional[Page]
    allow_cancel: bool
    cancel_emoji: Optional[disnake.PartialEmoji]
    deletion: DeletionOptions

    def __post_init__(self):
        if not isinstance(self.selectables, MappingProxyType):
            object.__setattr__(self, "selectables", MappingProxyType(dict(self.selectables)))
        if self.users is not ALL_USERS and not isinstance(self.users, tuple):
            object.__setattr__(self, "users", tuple(self.users))
        # lookups go through the emoji identity, since PartialEmoji hashes by name even when it compares by ID
        object.__setattr__(self, "_options", {trigger_key(emoji): value for emoji, value in self.selectables.items()})
        user_ids = None if self.users is ALL_USERS else frozenset(user_id(u) for u in self.users)
        object.__setattr__(self, "_user_ids", user_ids)

    @property
    def emojis(self) -> Tuple[disnake.PartialEmoji, ...]:
        """The emojis to react with, in order: every option, then the cancel emoji if cancelling is allowed."""
        emojis = tuple(self.selectables)
        if self.allow_cancel:
            emojis += (self.cancel_emoji,)
        return emojis

    @property
    def user_ids(self):
        """The IDs of the users who may answer, or None if anyone may."""
        return self._user_ids

    def is_eligible(self, user) -> bool:
        if self.users is ALL_USERS:
            return not getattr(user, "bot", False)
        return user_id(user) in self._user_ids

    def has_option(self, emoji) -> bool:
        return trigger_key(to_trigger(emoji)) in self._options

    def get_option(self, emoji) -> T:
        """Returns the value selected by *emoji*. Raises KeyError if it is not an option."""
        return self._options[trigger_key(to_trigger(emoji))]

    def is_cancel(self, emoji) -> bool:
        if not self.allow_cancel or self.cancel_emoji is None:
            return False
        return trigger_key(to_trigger(emoji)) == trigger_key(self.cancel_emoji)


@dataclass(frozen=True)
class SelectionResult(Generic[T]):
    """The terminal outcome of a selection."""

    value: Optional[T]
    status: SelectionStatus
    emoji: Optional[disnake.PartialEmoji] = None  # the reaction that ended the selection
    user: Optional[Any] = None

    @property
    def is_success(self):
        return self.status is SelectionStatus.RESOLVED

    @property
    def is_cancelled(self):
        return self.status is SelectionStatus.CANCELLED

    @property
    def is_timed_out(self):
        return self.status is SelectionStatus.TIMED_OUT
