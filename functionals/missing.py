"""The missing-value marker and the shared "skip missing" branch."""

from __future__ import annotations

from typing import Any, TypeVar

T = TypeVar("T")


class _Missing:
    """Singleton type of `NA`. Distinct from None, 0 and nan."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NA"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "NA"


NA = _Missing()


def is_na(x: Any) -> bool:
    """True only for the missing-value marker."""
    return x is NA


def resolve_missing(x: T, y: T, identity: T) -> T:
    """Result of a binary operator when at least one operand is missing.

    Args:
    ----
        x: left operand.
        y: right operand.
        identity: identity element of the operator.

    Returns:
    -------
        `identity` if both operands are missing, otherwise the one that is not.
        Must only be called when at least one of `x`, `y` is `NA`.

    """
    if is_na(x) and is_na(y):
        return identity
    if is_na(x):
        return y
    return x
