import disnake
import pytest
from unittest.mock import Mock

from interactivity import DeletionOptions, SelectionStatus
from interactivity.selection import to_trigger, user_id


def test_to_trigger_unicode():
    trigger = to_trigger("❌")
    assert isinstance(trigger, disnake.PartialEmoji)
    assert trigger.name == "❌"
    assert trigger.id is None
    assert str(trigger) == "❌"


def test_to_trigger_custom():
    trigger = to_trigger("<a:dance:123456789012345678>")
    assert trigger.name == "dance"
    assert trigger.id == 123456789012345678
    assert trigger.animated is True


def test_to_trigger_passthrough():
    emoji = disnake.PartialEmoji(name="❌")
    assert to_trigger(emoji) is emoji
    assert to_trigger(None) is None


def test_to_trigger_guild_emoji():
    emoji = Mock(spec=disnake.Emoji)
    emoji.name = "pog"
    emoji.id = 123456789012345678
    emoji.animated = False

    trigger = to_trigger(emoji)
    assert trigger == disnake.PartialEmoji(name="pog", id=123456789012345678)


def test_to_trigger_invalid():
    with pytest.raises(TypeError):
        to_trigger(12345)


def test_user_id():
    user = Mock()
    user.id = 42
    assert user_id(user) == 42
    assert user_id(42) == 42


def test_deletion_options():
    default = DeletionOptions.default()
    assert default & DeletionOptions.AFTER_CAPTURED_CONTEXT
    assert default & DeletionOptions.VALID
    assert not default & DeletionOptions.INVALIDS
    assert not DeletionOptions.NONE


def test_selection_status():
    assert not SelectionStatus.AWAITING.is_terminal
    for status in (SelectionStatus.RESOLVED, SelectionStatus.CANCELLED, SelectionStatus.TIMED_OUT):
        assert status.is_terminal
    assert str(SelectionStatus.TIMED_OUT) == "Timed Out"
