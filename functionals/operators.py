"""Collection of the elementary operators lifted by the combinators."""

# Implementation of a prelude of elementary functions.
#
# The binary ones (`add`, `mul`, `max`, `min`) are associative and have an
# identity, so they seed the ready-made `OperatorFamily` instances. All of
# them are plain Python arithmetic, which numba can also compile for
# `FastOps`.


def mul(x: float, y: float) -> float:
    """Multiplies two numbers.

    Args:
    ----
        x: The first number.
        y: The second number.

    Returns:
    -------
        The product of x and y.

    """
    return x * y


def add(x: float, y: float) -> float:
    """Adds two numbers.

    Args:
    ----
        x: The first number.
        y: The second number.

    Returns:
    -------
        The sum of x and y.

    """
    return x + y


def neg(x: float) -> float:
    """Negates a number."""
    return -x


def max(x: float, y: float) -> float:
    """Returns the larger of two numbers.

    Args:
    ----
        x: The first number.
        y: The second number.

    Returns:
    -------
        The larger of x and y.

    """
    return x if x > y else y


def min(x: float, y: float) -> float:
    """Returns the smaller of two numbers."""
    return x if x < y else y


def is_even(x: int) -> bool:
    """True when x is divisible by two."""
    return x % 2 == 0
