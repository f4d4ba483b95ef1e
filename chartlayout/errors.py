"""Error types raised by the chart layout core.

Layout functions perform no I/O, so there is exactly one failure mode: the
caller supplied an argument that has no well-defined layout.
"""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when a layout input cannot produce a well-defined result."""

    def __init__(self, *, argument: str, reason: str) -> None:
        """Initialize the error.

        Args:
            argument: Name of the offending argument.
            reason: Short explanation of what is wrong with it.
        """

        super().__init__(f"Invalid {argument}: {reason}")
        self.argument = argument
        self.reason = reason


def check_progress(progress: float) -> None:
    """Raise InvalidArgumentError unless `progress` lies within [0, 1]."""

    if not 0.0 <= progress <= 1.0:
        raise InvalidArgumentError(argument="progress", reason=f"must be within [0, 1], got {progress}")
