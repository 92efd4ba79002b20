"""
Helper utilities for the reaction selection system.
"""

from typing import Optional, Union

import disnake

EmojiLike = Union[str, disnake.Emoji, disnake.PartialEmoji]


def to_trigger(emoji: Optional[EmojiLike]) -> Optional[disnake.PartialEmoji]:
    """
    Converts anything usable as a reaction into the canonical trigger type.

    Args:
        emoji: A unicode emoji, a custom emoji string (``<:name:id>``), a guild emoji or a partial emoji

    Returns:
        The equivalent :class:`disnake.PartialEmoji`, or None if *emoji* is None
    """
    if emoji is None:
        return None
    if isinstance(emoji, disnake.PartialEmoji):
        return emoji
    if isinstance(emoji, disnake.Emoji):
        return disnake.PartialEmoji(name=emoji.name, id=emoji.id, animated=emoji.animated)
    if isinstance(emoji, str):
        return disnake.PartialEmoji.from_str(emoji)
    raise TypeError(f"Expected an emoji, got {type(emoji).__name__}")


def user_id(user) -> int:
    """Returns the ID of a user object, or the value itself if it is already an ID."""
    if isinstance(user, int):
        return user
    return user.id


def trigger_key(emoji: disnake.PartialEmoji):
    """
    Returns the identity of a trigger, matching :class:`disnake.PartialEmoji` equality: custom emojis by ID, unicode
    emojis by name. Reactions to a renamed custom emoji still match the option configured under its old name.
    """
    return emoji.id or emoji.name
