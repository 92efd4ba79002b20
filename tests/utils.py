"""
Shared emoji and Discord object stand-ins for the selection tests.
"""

from unittest.mock import Mock

RED = "\U0001f7e5"
BLUE = "\U0001f7e6"
GREEN = "\U0001f7e9"
CROSS = "❌"

BOT_ID = 111111111111111111
MESSAGE_ID = 123456789012345678


def make_user(user_id=42, bot=False):
    user = Mock()
    user.id = user_id
    user.bot = bot
    return user


def make_reaction(emoji, message_id=MESSAGE_ID):
    reaction = Mock()
    reaction.emoji = emoji
    reaction.message = Mock()
    reaction.message.id = message_id
    return reaction
