"""Reduction and search combinators."""

from __future__ import annotations

from typing import Any, Callable, Iterator, List, Optional, Sequence, TypeVar

from .errors import EmptyReductionError
from .logger import logger

A = TypeVar("A")


class _Omitted:
    def __repr__(self) -> str:
        return "<omitted>"


class _NotFound:
    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __bool__(self) -> bool:
        return False


_OMITTED: Any = _Omitted()

NOT_FOUND: Any = _NotFound()


def _ordered(ls: Sequence[A], right: bool) -> Iterator[A]:
    return iter(reversed(ls)) if right else iter(ls)


def fold(
    fn: Callable[[Any, Any], Any],
    ls: Sequence[Any],
    init: Any = _OMITTED,
    right: bool = False,
) -> Any:
    """Reduce a sequence to one value.

    Args:
    ----
        fn: binary function. Called as fn(acc, x) from the left, or
            fn(x, acc) when `right` is set.
        ls: input sequence.
        init: seed value. When omitted the first element (last, from the
            right) seeds the accumulator.
        right: fold from the right.

    Returns:
    -------
        The final accumulator. An empty sequence gives `init`.

    Raises:
    ------
        EmptyReductionError: `ls` is empty and no `init` was given.

    """
    items = _ordered(ls, right)
    if init is _OMITTED:
        acc = next(items, _OMITTED)
        if acc is _OMITTED:
            logger.debug("fold: empty sequence without init")
            raise EmptyReductionError()
    else:
        acc = init
    for x in items:
        acc = fn(x, acc) if right else fn(acc, x)
    return acc


def scan(
    fn: Callable[[Any, Any], Any],
    ls: Sequence[Any],
    init: Any = _OMITTED,
    right: bool = False,
) -> List[Any]:
    """Like `fold`, but keep every intermediate accumulator.

    Args:
    ----
        fn: binary function, called as in `fold`.
        ls: input sequence.
        init: seed value, included as the first accumulation.
        right: fold from the right. The result is then ordered so that
            position 0 holds the full reduction.

    Returns:
    -------
        List of accumulations, of length n+1 with `init`, n without.

    """
    items = _ordered(ls, right)
    if init is _OMITTED:
        acc = next(items, _OMITTED)
        if acc is _OMITTED:
            return []
    else:
        acc = init
    ret = [acc]
    for x in items:
        acc = fn(x, acc) if right else fn(acc, x)
        ret.append(acc)
    return ret[::-1] if right else ret


def find_index(
    pred: Callable[[Any], Any], ls: Sequence[Any], from_end: bool = False
) -> Optional[int]:
    """Position of the first element for which `pred` is truthy.

    Stops calling `pred` at the first match.

    Args:
    ----
        pred: predicate.
        ls: input sequence.
        from_end: search from the end, giving the last match.

    Returns:
    -------
        Index into `ls`, or None when nothing matches.

    """
    positions = range(len(ls) - 1, -1, -1) if from_end else range(len(ls))
    for i in positions:
        if pred(ls[i]):
            return i
    return None


def find(pred: Callable[[Any], Any], ls: Sequence[Any], from_end: bool = False) -> Any:
    """First element for which `pred` is truthy, or `NOT_FOUND`.

    Short-circuits like `find_index`.
    """
    i = find_index(pred, ls, from_end=from_end)
    if i is None:
        return NOT_FOUND
    return ls[i]


def filter(pred: Callable[[Any], Any], ls: Sequence[A]) -> List[A]:
    """Elements for which `pred` is truthy, in original order.

    `pred` is called on every element exactly once.
    """
    ret = []
    for x in ls:
        if pred(x):
            ret.append(x)
    return ret
