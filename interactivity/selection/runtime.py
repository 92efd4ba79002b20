"""
Running a reaction selection.

:class:`SelectionState` is the synchronous state machine deciding what a reaction means for a selection.
:func:`run_selection` drives it over a disnake client: it posts the selection page, reacts with every option, feeds
reactions on that message through the state machine and cleans up once the selection resolves.
"""

import asyncio
import logging
from typing import Generic, Optional, TypeVar

import disnake

from interactivity.enums import DeletionOptions, SelectionStatus
from interactivity.errors import SelectionMessageUnavailable, SelectionPending
from . import constants
from .selection import ReactionSelection, SelectionResult
from .selection_helpers import to_trigger

log = logging.getLogger(__name__)

T = TypeVar("T")


class SelectionState(Generic[T]):
    """
    Tracks a single run of a selection. Starts awaiting; the first qualifying reaction, :meth:`time_out` or
    :meth:`abandon` moves it into a terminal state, after which every other event is ignored.
    """

    def __init__(self, selection: ReactionSelection[T]):
        self.selection = selection
        self.status = SelectionStatus.AWAITING
        self.value: Optional[T] = None
        self.emoji: Optional[disnake.PartialEmoji] = None
        self.user = None

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal

    def qualifies(self, emoji, user) -> bool:
        """Whether a reaction with *emoji* from *user* would end the selection right now."""
        if self.is_terminal:
            return False
        if not self.selection.is_eligible(user):
            return False
        trigger = to_trigger(emoji)
        return self.selection.has_option(trigger) or self.selection.is_cancel(trigger)

    def process(self, emoji, user) -> bool:
        """
        Handles a reaction.

        Returns:
            True if the reaction ended the selection, False if it was ignored
        """
        if not self.qualifies(emoji, user):
            log.debug(f"Ignoring reaction {emoji} (status: {self.status})")
            return False

        trigger = to_trigger(emoji)
        if self.selection.is_cancel(trigger):
            self.status = SelectionStatus.CANCELLED
        else:
            self.value = self.selection.get_option(trigger)
            self.status = SelectionStatus.RESOLVED
        self.emoji = trigger
        self.user = user
        log.debug(f"Selection {self.status} by reaction {trigger}")
        return True

    def time_out(self) -> bool:
        return self._end(SelectionStatus.TIMED_OUT)

    def abandon(self) -> bool:
        return self._end(SelectionStatus.ABANDONED)

    def _end(self, status: SelectionStatus) -> bool:
        if self.is_terminal:
            return False
        self.status = status
        log.debug(f"Selection {status}")
        return True

    def result(self) -> SelectionResult[T]:
        if not self.is_terminal:
            raise SelectionPending()
        return SelectionResult(value=self.value, status=self.status, emoji=self.emoji, user=self.user)


# ==== runner ====
async def run_selection(
    client: disnake.Client,
    channel: disnake.abc.Messageable,
    selection: ReactionSelection[T],
    *,
    timeout: float = constants.SELECTION_TIMEOUT,
    message: Optional[disnake.Message] = None,
) -> SelectionResult[T]:
    """
    Runs a selection in a channel until it resolves, is cancelled or times out.

    Args:
        client: The client to listen for reactions on
        channel: Where to send the selection page
        selection: The selection to run
        timeout: Seconds to wait for a qualifying reaction, counted from when the reactions are added
        message: An existing message to turn into the selection instead of sending a new one

    Returns:
        The result of the selection

    Raises:
        SelectionMessageUnavailable: If the selection message cannot be sent, edited or reacted to
    """
    state = SelectionState(selection)
    pending_cleanup = set()

    try:
        if message is None:
            message = await channel.send(embed=selection.selection_page.to_embed())
        else:
            await message.edit(content=None, embed=selection.selection_page.to_embed())
        for emoji in selection.emojis:
            await message.add_reaction(emoji)
    except (disnake.NotFound, disnake.Forbidden) as e:
        raise SelectionMessageUnavailable(f"Could not set up the selection message: {e}") from e

    def check(reaction, user):
        if reaction.message.id != message.id or user.id == client.user.id:
            return False
        if state.process(reaction.emoji, user):
            return True
        if selection.deletion & DeletionOptions.INVALIDS:
            task = asyncio.create_task(_remove_reaction(message, reaction.emoji, user))
            pending_cleanup.add(task)
            task.add_done_callback(pending_cleanup.discard)
        return False

    try:
        await client.wait_for(constants.REACTION_ADD_EVENT, check=check, timeout=timeout)
    except asyncio.TimeoutError:
        state.time_out()
    except asyncio.CancelledError:
        state.abandon()
        await _abandon(message, selection)
        raise

    result = state.result()
    await _finish(message, selection, result)
    return result


async def _finish(message: disnake.Message, selection: ReactionSelection, result: SelectionResult):
    """Swaps in the cancelled/timed out page and applies the deletion options."""
    page = None
    if result.is_cancelled:
        page = selection.cancelled_page
    elif result.is_timed_out:
        page = selection.timed_out_page

    if page is not None:
        try:
            await message.edit(embed=page.to_embed())
        except disnake.HTTPException as e:
            log.debug(f"HTTPException when swapping selection page: {e}")

    if selection.deletion & DeletionOptions.AFTER_CAPTURED_CONTEXT:
        try:
            await message.delete()
        except disnake.HTTPException as e:
            log.debug(f"HTTPException when deleting selection message: {e}")
        return

    if result.emoji is not None and selection.deletion & DeletionOptions.VALID:
        await _remove_reaction(message, result.emoji, result.user)


async def _abandon(message: disnake.Message, selection: ReactionSelection):
    """Leaves an abandoned selection showing the timed out page (if any) with no reactions to answer with."""
    if selection.timed_out_page is not None:
        try:
            await message.edit(embed=selection.timed_out_page.to_embed())
        except disnake.HTTPException as e:
            log.debug(f"HTTPException when swapping abandoned selection page: {e}")
    await _clear_reactions(message)


async def _remove_reaction(message: disnake.Message, emoji, user):
    try:
        await message.remove_reaction(emoji, user)
    except disnake.HTTPException as e:
        log.debug(f"HTTPException when removing reaction {emoji}: {e}")


async def _clear_reactions(message: disnake.Message):
    try:
        await message.clear_reactions()
    except disnake.HTTPException as e:
        # clearing needs manage messages, which the bot never has in DMs
        log.debug(f"HTTPException when clearing selection reactions: {e}")
