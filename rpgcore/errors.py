"""
Exceptions raised by the stat and progression engine.

Every error here marks a broken contract (bad construction, impossible
lookup, mixed modifier variants). Out-of-range `Stat.set_base` calls are
not errors and never raise.
"""


class ProgressionError(Exception):
    """Base exception for the stat and progression engine."""
    pass


class InvalidRangeError(ProgressionError, ValueError):
    """Exception raised when a level or experience value is out of range."""
    pass


class MismatchedModifierError(ProgressionError, TypeError):
    """Exception raised when modifiers of different variants are combined."""
    pass


class StatNotFoundError(ProgressionError, KeyError):
    """Exception raised when a stat name is missing from a Stats collection."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class DuplicateStatError(ProgressionError, ValueError):
    """Exception raised when a Stats collection holds the same name twice."""
    pass


class InvalidDiceExpressionError(ProgressionError, ValueError):
    """Exception raised when a dice expression cannot be parsed."""
    pass


class InvalidItemError(ProgressionError, ValueError):
    """Exception raised when a non-equipment item is used as equipment."""
    pass


class CapacityExceededError(ProgressionError, ValueError):
    """Exception raised when an equipment set or active party is full."""
    pass
