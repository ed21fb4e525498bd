"""Error types raised by the combinators themselves.

Errors raised by a caller's function are never wrapped: they propagate
unchanged. The types here describe contract failures detected by the library.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple


class FunctionalError(Exception):
    """Base class for every error the library raises.

    Attributes:
    ----------
        index: position of the offending element, when one exists.

    """

    def __init__(self, message: str, index: Optional[int] = None) -> None:
        self.index = index
        super().__init__(message)


class ShapeMismatch(FunctionalError):
    """Results of an unsafe vector map could not be coalesced into one array."""

    def __init__(self, index: int, expected: Any, actual: Any) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"result {index} has shape/kind {actual}, expected {expected}", index
        )

    def __repr__(self) -> str:
        return (
            f"ShapeMismatch(index={self.index}, expected={self.expected!r}, "
            f"actual={self.actual!r})"
        )


class ContractViolation(FunctionalError):
    """A typed map result does not match the declared prototype."""

    def __init__(self, index: int, expected: Any, actual: Any) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"result {index} violates prototype: expected {expected}, got {actual}",
            index,
        )

    def __repr__(self) -> str:
        return (
            f"ContractViolation(index={self.index}, expected={self.expected!r}, "
            f"actual={self.actual!r})"
        )


class LengthMismatch(FunctionalError, ValueError):
    """Sequences that must be walked in lockstep have different lengths."""

    def __init__(self, lengths: Tuple[Any, ...]) -> None:
        self.lengths = tuple(lengths)
        super().__init__(f"sequences must have equal length, got {self.lengths}")

    def __repr__(self) -> str:
        return f"LengthMismatch(lengths={self.lengths!r})"


class EmptyReductionError(FunctionalError, ValueError):
    """Folding an empty sequence without an initial value."""

    def __init__(self) -> None:
        super().__init__("cannot fold an empty sequence without an initial value")
