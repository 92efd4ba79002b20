class InteractivityException(Exception):
    """A base exception class."""

    def __init__(self, msg):
        super().__init__(msg)


# ==== configuration ====
class InvalidConfiguration(InteractivityException):
    """A base exception for selection misconfiguration to stem from. Raised only while building."""
    pass


class MissingOptions(InvalidConfiguration):
    """Raised when a selection is built without any options."""

    def __init__(self, msg=None):
        super().__init__(msg or "You need at least one selectable.")


class DuplicateTrigger(InvalidConfiguration):
    """Raised when two options, or an option and the cancel emoji, share an emoji."""

    def __init__(self, emoji, msg=None):
        super().__init__(msg or f"Found duplicate emoji: {emoji}")
        self.emoji = emoji


class InvalidTrigger(InvalidConfiguration):
    """Raised when an option key or the cancel emoji cannot be used as a reaction."""

    def __init__(self, emoji):
        super().__init__(f"{emoji!r} cannot be used as a reaction emoji.")
        self.emoji = emoji


class MissingCancelTrigger(InvalidConfiguration):
    """Raised when cancellation is enabled but no cancel emoji is set."""

    def __init__(self):
        super().__init__("Cancellation is enabled but no cancel emoji was set.")


class MissingUsers(InvalidConfiguration):
    """Raised when a selection is built without any eligible users."""

    def __init__(self, msg=None):
        super().__init__(msg or "No users were set to interact with the selection.")


class MissingContent(InvalidConfiguration):
    """Raised when the selection page is unset or cannot be rendered."""

    def __init__(self, msg=None):
        super().__init__(msg or "The selection page is missing.")


# ==== pages ====
class InvalidPage(InteractivityException):
    """Raised when a page breaks one of Discord's embed limits."""
    pass


# ==== runtime ====
class SelectionException(InteractivityException):
    """A base exception for reaction awaiting exceptions to stem from."""
    pass


class SelectionMessageUnavailable(SelectionException):
    """Raised when the selection message was deleted or the bot lacks permission to use it."""

    def __init__(self, msg=None):
        super().__init__(msg or "The selection message is unavailable.")


class SelectionPending(SelectionException):
    """Raised when a result is requested from a selection that has not finished."""

    def __init__(self):
        super().__init__("The selection has not finished yet.")
