"""
Builder for reaction selections.

The builder is plain mutable configuration: every ``with_*`` method just stores its argument and returns the builder,
so calls can be chained. Nothing is checked until :meth:`ReactionSelectionBuilder.build`, which validates everything at
once and hands back an immutable :class:`ReactionSelection`.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar

from interactivity.enums import DeletionOptions
from interactivity.errors import (
    DuplicateTrigger,
    InvalidPage,
    InvalidTrigger,
    MissingCancelTrigger,
    MissingContent,
    MissingOptions,
    MissingUsers,
)
from interactivity.page import PageBuilder
from . import constants
from .selection import ReactionSelection
from .selection_helpers import to_trigger, trigger_key

log = logging.getLogger(__name__)

T = TypeVar("T")


class ReactionSelectionBuilder(Generic[T]):
    """
    Accumulates the configuration of a reaction selection.

    Attributes:
        selectables: (emoji, value) pairs in display order, or None. Emojis are converted by :meth:`build`
        users: The users who may answer, or :data:`ALL_USERS`
        string_converter: Turns a value into the text shown next to its emoji
        title: Name of the field listing the options
        allow_cancel: Whether reacting with ``cancel_emoji`` cancels the selection
        cancel_emoji: The emoji used for cancelling
        selection_page: The page shown while waiting for a reaction
        cancelled_page: The page shown after cancelling, if any
        timed_out_page: The page shown after timing out, if any
        enable_default_description: Whether to list the options on the selection page
        deletion: What gets deleted while and after the selection runs
    """

    def __init__(self):
        self.selectables: Optional[List[Tuple[Any, T]]] = []
        self.users = None
        self.string_converter: Callable[[T], str] = str
        self.title: str = constants.DEFAULT_TITLE
        self.allow_cancel: bool = True
        self.cancel_emoji = to_trigger(constants.DEFAULT_CANCEL_EMOJI)
        self.selection_page: Optional[PageBuilder] = PageBuilder().with_color(constants.DEFAULT_PAGE_COLOR)
        self.cancelled_page: Optional[PageBuilder] = None
        self.timed_out_page: Optional[PageBuilder] = None
        self.enable_default_description: bool = True
        self.deletion: DeletionOptions = DeletionOptions.default()

    @classmethod
    def default(cls):
        """Creates a new builder with default values."""
        return cls()

    # ==== build ====
    def build(self) -> ReactionSelection[T]:
        """
        Validates this builder and assembles a :class:`ReactionSelection`.

        :raises MissingOptions: if there are no selectables.
        :raises InvalidTrigger: if an option key or the cancel emoji is not an emoji.
        :raises DuplicateTrigger: if two options, or an option and the cancel emoji, share an emoji.
        :raises MissingCancelTrigger: if cancelling is allowed but there is no cancel emoji.
        :raises MissingUsers: if no users were set.
        :raises MissingContent: if there is no selection page or it cannot be rendered.
        :raises InvalidPage: if the cancelled or timed out page cannot be rendered.
        """
        if self.selectables is None:
            raise MissingOptions("No selectables were set.")
        if len(self.selectables) == 0:
            raise MissingOptions()

        selectables = [(_convert(emoji), value) for emoji, value in self.selectables]
        cancel_emoji = _convert(self.cancel_emoji)

        # emojis are compared by identity: custom emojis by ID, whatever their name
        keys = [trigger_key(emoji) for emoji, _ in selectables]
        if self.allow_cancel and cancel_emoji is not None and trigger_key(cancel_emoji) in keys:
            raise DuplicateTrigger(cancel_emoji, f"Found duplicate emoji: {cancel_emoji} (cancel emoji)")

        seen = set()
        for key, (emoji, _) in zip(keys, selectables):
            if key in seen:
                raise DuplicateTrigger(emoji)
            seen.add(key)

        if self.allow_cancel and cancel_emoji is None:
            raise MissingCancelTrigger()

        # the listing is added to a copy so that building twice does not list the options twice
        selection_page = self.selection_page.copy() if self.selection_page is not None else None
        if self.enable_default_description and selection_page is not None:
            description = "".join(
                constants.DESCRIPTION_LINE_FORMAT.format(emoji=emoji, text=self.string_converter(value))
                for emoji, value in selectables
            )
            selection_page.add_field(self.title, description)

        if self.users is None:
            raise MissingUsers()
        if self.users is not constants.ALL_USERS:
            if len(self.users) == 0:
                raise MissingUsers()
            if any(u is None or u is constants.ALL_USERS for u in self.users):
                raise MissingUsers("Users cannot contain None or ALL_USERS.")

        if selection_page is None:
            raise MissingContent()
        try:
            rendered_selection_page = selection_page.build()
        except InvalidPage as e:
            raise MissingContent(f"The selection page could not be rendered: {e}") from e

        cancelled_page = self.cancelled_page.build() if self.cancelled_page is not None else None
        timed_out_page = self.timed_out_page.build() if self.timed_out_page is not None else None

        selection = ReactionSelection(
            selectables=dict(selectables),
            users=self.users if self.users is constants.ALL_USERS else tuple(self.users),
            selection_page=rendered_selection_page,
            cancelled_page=cancelled_page,
            timed_out_page=timed_out_page,
            allow_cancel=self.allow_cancel,
            cancel_emoji=cancel_emoji,
            deletion=self.deletion,
        )
        log.debug(f"Built reaction selection with {len(selection.selectables)} options: {selection.emojis}")
        return selection

    # ==== fluent setters ====
    def with_selectables(self, selectables):
        """
        Sets the values to select from.

        Args:
            selectables: A mapping (or iterable of pairs) of emoji to value. Keys may be anything
                :func:`to_trigger` accepts.
        """
        if selectables is None:
            self.selectables = None
            return self
        if isinstance(selectables, Mapping):
            selectables = selectables.items()
        self.selectables = list(selectables)
        return self

    def with_users(self, *users):
        """
        Sets the users who can interact with the selection.
        Accepts users as arguments, a single iterable of users, or :data:`ALL_USERS`. ``None`` unsets the users.
        """
        if len(users) == 1 and users[0] is None:
            self.users = None
        elif len(users) == 1 and users[0] is constants.ALL_USERS:
            self.users = constants.ALL_USERS
        elif len(users) == 1 and isinstance(users[0], Iterable):
            self.users = list(users[0])
        else:
            self.users = list(users)
        return self

    def with_deletion(self, deletion: DeletionOptions):
        self.deletion = deletion
        return self

    def with_selection_page(self, selection_page: Optional[PageBuilder]):
        """Sets the page sent into the channel while the selection is waiting."""
        self.selection_page = selection_page
        return self

    def with_cancelled_page(self, cancelled_page: Optional[PageBuilder]):
        """Sets the page the selection message is changed to after it is cancelled."""
        self.cancelled_page = cancelled_page
        return self

    def with_timed_out_page(self, timed_out_page: Optional[PageBuilder]):
        """Sets the page the selection message is changed to after it times out."""
        self.timed_out_page = timed_out_page
        return self

    def with_string_converter(self, string_converter: Callable[[T], str]):
        self.string_converter = string_converter
        return self

    def with_title(self, title: str):
        self.title = title
        return self

    def with_allow_cancel(self, allow_cancel: bool):
        self.allow_cancel = allow_cancel
        return self

    def with_cancel_emoji(self, cancel_emoji):
        self.cancel_emoji = cancel_emoji
        return self

    def with_enable_default_description(self, enable_default_description: bool):
        self.enable_default_description = enable_default_description
        return self


def _convert(emoji):
    try:
        return to_trigger(emoji)
    except TypeError as e:
        raise InvalidTrigger(emoji) from e
