"""Lifting one associative binary operator into a family of functions.

Given `op` with an identity element, the family provides an n-ary
reduction, an element-wise version over two sequences, a cumulative
version and an axis-wise version over arrays. Each one is the guarded
primitive combined with exactly one generic combinator:

    reduce      fold(op_guarded, [identity] + xs)
    zip         zip_map(op_guarded, xs, ys)
    cumulative  scan(op_guarded, xs)
    along_axis  reduce applied to every 1-D slice along an axis

Missing values (`NA`) propagate unless `skip_missing` is set, in which case
they are dropped by `resolve_missing`.
"""

from __future__ import annotations

from functools import partial
from typing import Any, Callable, List, Sequence

import numpy as np

from . import operators
from .grouping import zip_map
from .iteration import map
from .missing import NA, is_na, resolve_missing
from .reduction import fold, scan

BinaryOp = Callable[[Any, Any], Any]


def guarded(op: BinaryOp, identity: Any) -> Callable[..., Any]:
    """Wrap `op` with the missing-value policy.

    Args:
    ----
        op: associative binary operator.
        identity: its identity element.

    Returns:
    -------
        op_guarded(x, y, skip_missing=False). With `skip_missing` a missing
        operand is resolved by `resolve_missing`; without it the result is
        `NA`.

    """

    def op_guarded(x: Any, y: Any, skip_missing: bool = False) -> Any:
        if is_na(x) or is_na(y):
            if skip_missing:
                return resolve_missing(x, y, identity)
            return NA
        return op(x, y)

    return op_guarded


def with_identity(identity: Any, xs: Sequence[Any]) -> List[Any]:
    """Prepend `identity` to `xs`.

    Folding the result never hits the empty case and always applies the
    operator at least once, so single elements go through the missing-value
    policy too.
    """
    return [identity] + list(xs)


class OperatorFamily:
    """Reduce, zip, cumulative and axis-wise versions of one operator.

    Attributes:
    ----------
        op: the primitive binary operator.
        identity: its identity element.
        op_guarded: `op` wrapped by `guarded`.

    """

    def __init__(self, op: BinaryOp, identity: Any) -> None:
        self.op = op
        self.identity = identity
        self.op_guarded = guarded(op, identity)

    def _step(self, skip_missing: bool) -> BinaryOp:
        return partial(self.op_guarded, skip_missing=skip_missing)

    def reduce(self, xs: Sequence[Any], skip_missing: bool = False) -> Any:
        """Combine all of `xs`. Empty input gives the identity."""
        return fold(self._step(skip_missing), with_identity(self.identity, xs))

    def zip(
        self, xs: Sequence[Any], ys: Sequence[Any], skip_missing: bool = False
    ) -> List[Any]:
        """Element-wise op. Lengths must match, nothing is recycled."""
        return zip_map(self.op_guarded, xs, ys, skip_missing=skip_missing)

    def cumulative(self, xs: Sequence[Any], skip_missing: bool = False) -> List[Any]:
        """Running reduction, same length as `xs`."""
        return scan(self._step(skip_missing), xs)

    def along_axis(self, a: Any, axis: int, skip_missing: bool = False) -> np.ndarray:
        """Reduce every 1-D slice of `a` along `axis`.

        Args:
        ----
            a: array-like of any dimension.
            axis: axis to reduce away. Negative values count from the end.
            skip_missing: drop `NA` values instead of propagating them.

        Returns:
        -------
            Array with `axis` removed. Object dtype when any result is `NA`.

        """
        arr = np.asarray(a)
        slices = np.moveaxis(arr, axis, -1)
        out_shape = slices.shape[:-1]
        flat = slices.reshape(int(np.prod(out_shape)), slices.shape[-1])

        results = map(lambda row: self.reduce(list(row), skip_missing), flat)

        if any(is_na(r) for r in results):
            out = np.empty(len(results), dtype=object)
            out[:] = results
        else:
            out = np.array(results)
        return out.reshape(out_shape)

    def rows(self, m: Any, skip_missing: bool = False) -> np.ndarray:
        """One result per row of a matrix."""
        return self.along_axis(m, 1, skip_missing)

    def cols(self, m: Any, skip_missing: bool = False) -> np.ndarray:
        """One result per column of a matrix."""
        return self.along_axis(m, 0, skip_missing)

    def __repr__(self) -> str:
        name = getattr(self.op, "__name__", repr(self.op))
        return f"OperatorFamily({name}, identity={self.identity!r})"


add_family = OperatorFamily(operators.add, 0)
mul_family = OperatorFamily(operators.mul, 1)
max_family = OperatorFamily(operators.max, -float("inf"))
min_family = OperatorFamily(operators.min, float("inf"))


def total(xs: Sequence[Any], skip_missing: bool = False) -> Any:
    """Sum of all elements, 0 for an empty sequence."""
    return add_family.reduce(xs, skip_missing)


def product(xs: Sequence[Any], skip_missing: bool = False) -> Any:
    """Product of all elements, 1 for an empty sequence."""
    return mul_family.reduce(xs, skip_missing)


def add_vectors(
    xs: Sequence[Any], ys: Sequence[Any], skip_missing: bool = False
) -> List[Any]:
    return add_family.zip(xs, ys, skip_missing)


def cumulative_sum(xs: Sequence[Any], skip_missing: bool = False) -> List[Any]:
    return add_family.cumulative(xs, skip_missing)


def row_sums(m: Any, skip_missing: bool = False) -> np.ndarray:
    return add_family.rows(m, skip_missing)


def col_sums(m: Any, skip_missing: bool = False) -> np.ndarray:
    return add_family.cols(m, skip_missing)
