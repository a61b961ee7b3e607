"""Exception types raised by telestate.

Errors raised by caller-supplied functions (transforms, purpose functions,
organisation functions) are never wrapped: the original exception object
propagates to the caller unmodified.
"""

from __future__ import annotations


class TelestateError(Exception):
    """Base class for every error raised by telestate itself."""


class InvalidArgumentError(TelestateError, ValueError):
    """Raised when an operation receives an argument it cannot accept."""

    def __init__(self, argument: str, reason: str) -> None:
        super().__init__(f"Invalid argument '{argument}': {reason}")
        self.argument = argument
        self.reason = reason


class InvalidTransformResultError(TelestateError, TypeError):
    """Raised when a transform function returns a value that cannot become state."""

    def __init__(self, result: object) -> None:
        super().__init__(f"Transform returned an unusable state value: {result!r}")
        self.result = result


class HistoryEmptyError(TelestateError, LookupError):
    """Raised by revert() when no transition is retained."""


class CyclicStructureError(TelestateError, ValueError):
    """Raised when the delta engine meets a reference cycle."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Cyclic structure detected at path {path!r}")
        self.path = path
