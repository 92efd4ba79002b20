import enum


class DeletionOptions(enum.IntFlag):
    """What a selection removes while and after it runs. Combine with ``|``."""

    NONE = 0
    INVALIDS = 1  # reactions that do not resolve the selection
    VALID = 2  # the reaction that resolved it
    AFTER_CAPTURED_CONTEXT = 4  # the selection message itself, once resolved

    @classmethod
    def default(cls):
        return cls.AFTER_CAPTURED_CONTEXT | cls.VALID


class SelectionStatus(enum.Enum):
    AWAITING = "awaiting"
    RESOLVED = "resolved"
    CANCELLED = "cancelled"
    TIMED_OUT = "timed_out"
    ABANDONED = "abandoned"

    @property
    def is_terminal(self):
        return self is not SelectionStatus.AWAITING

    def __str__(self):
        match self:
            case SelectionStatus.AWAITING:
                return "Awaiting"
            case SelectionStatus.RESOLVED:
                return "Resolved"
            case SelectionStatus.CANCELLED:
                return "Cancelled"
            case SelectionStatus.TIMED_OUT:
                return "Timed Out"
            case SelectionStatus.ABANDONED:
                return "Abandoned"
