"""Iteration combinators: `map`, `indexed_map`, `named_map`.

Each walks its input once, left to right, calling the function exactly once
per element in the calling thread. An exception from the function stops the
walk and propagates unchanged.
"""

from __future__ import annotations

from typing import Callable, Hashable, List, Mapping, Optional, Sequence, TypeVar, Union

from .logger import logger
from .named import Named

A = TypeVar("A")
B = TypeVar("B")


def map(fn: Callable[[A], B], ls: Sequence[A]) -> List[B]:
    """Apply `fn` to every element.

    Args:
    ----
        fn: one-argument function.
        ls: input sequence.

    Returns:
    -------
        A new list, where position i holds fn(ls[i]).

    """
    ret = []
    for x in ls:
        ret.append(fn(x))
    return ret


def indexed_map(fn: Callable[[A, int], B], ls: Sequence[A]) -> List[B]:
    """Apply `fn` to every element and its 0-based position.

    Args:
    ----
        fn: function of (element, index).
        ls: input sequence.

    Returns:
    -------
        A new list, where position i holds fn(ls[i], i).

    """
    ret = []
    for i, x in enumerate(ls):
        ret.append(fn(x, i))
    return ret


def named_map(
    fn: Callable[[A, Hashable], B],
    x: Union[Named[A], Mapping[Hashable, A], Sequence[A]],
    names: Optional[Sequence[Hashable]] = None,
) -> Named[B]:
    """Apply `fn` to every element and its name.

    Args:
    ----
        fn: function of (element, name).
        x: a `Named`, a mapping, or a plain sequence paired with `names`.
        names: names for a plain sequence; must have the same length.

    Returns:
    -------
        A `Named` with the same names, holding fn(value, name) at each position.

    """
    if isinstance(x, Named):
        named = x
    elif isinstance(x, Mapping):
        named = Named.from_mapping(x)
    else:
        if names is None:
            logger.debug("named_map: plain sequence without names")
            raise TypeError("named_map needs names for a plain sequence")
        named = Named(x, names)

    ret = []
    for name, value in named.items():
        ret.append(fn(value, name))
    return Named(ret, named.names)
