"""Parallel and grouped combinators: `zip_map`, `partition_by_key`, `group_apply`."""

from __future__ import annotations

from typing import Any, Callable, Dict, Hashable, List, Sequence, TypeVar

from .errors import LengthMismatch
from .iteration import map
from .logger import logger

A = TypeVar("A")
B = TypeVar("B")
K = TypeVar("K", bound=Hashable)


def _check_lengths(*seqs: Sequence[Any]) -> int:
    lengths = tuple(len(s) for s in seqs)
    if len(set(lengths)) > 1:
        logger.debug("length mismatch: %s", lengths)
        raise LengthMismatch(lengths)
    return lengths[0] if lengths else 0


def zip_map(fn: Callable[..., B], /, *seqs: Sequence[Any], **const: Any) -> List[B]:
    """Apply `fn` across several sequences in lockstep.

    Lengths are checked before `fn` is first called; shorter inputs are never
    recycled. Keyword arguments are passed unchanged to every call, so fixed
    configuration is not split element-wise.

    Args:
    ----
        fn: function of as many positional arguments as there are sequences.
        *seqs: input sequences, all of the same length n.
        **const: keyword arguments given to every call.

    Returns:
    -------
        A list of length n where position i holds
        fn(seqs[0][i], ..., seqs[k][i], **const).

    """
    n = _check_lengths(*seqs)
    ret = []
    for i in range(n):
        ret.append(fn(*[s[i] for s in seqs], **const))
    return ret


def partition_by_key(
    x: Sequence[A], keys: Sequence[K], sort: bool = False
) -> Dict[K, List[A]]:
    """Split `x` into groups sharing the same key.

    Args:
    ----
        x: values.
        keys: group key of each value, same length as `x`.
        sort: order groups by key instead of first occurrence.

    Returns:
    -------
        Mapping from key to the values of that group, in original order.

    """
    _check_lengths(x, keys)
    groups: Dict[K, List[A]] = {}
    for value, key in zip(x, keys):
        groups.setdefault(key, []).append(value)
    if sort:
        groups = {k: groups[k] for k in sorted(groups)}
    logger.debug("partitioned %d values into %d groups", len(x), len(groups))
    return groups


def group_apply(
    x: Sequence[A],
    keys: Sequence[K],
    fn: Callable[[List[A]], B],
    sort: bool = False,
) -> Dict[K, B]:
    """Partition `x` by `keys` and apply `fn` to each group.

    Args:
    ----
        x: values.
        keys: group key of each value.
        fn: function applied to the list of values of each group.
        sort: order groups by key instead of first occurrence.

    Returns:
    -------
        Mapping from key to fn(group).

    """
    groups = partition_by_key(x, keys, sort=sort)
    return dict(zip(groups.keys(), map(fn, list(groups.values()))))
