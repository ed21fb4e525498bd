from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

import numpy as np
from numba import njit as _njit
from numba import prange

from .errors import LengthMismatch
from .logger import logger

if TYPE_CHECKING:
    from typing import Callable, Optional

# TIP: Use `NUMBA_DISABLE_JIT=1 pytest tests/` to run these without JIT.
#
# This is the opt-in parallel backend. Elements are processed in parallel
# and in no particular order, so `fn` must be pure, must not depend on
# invocation order, and must be something numba can compile. Nothing checks
# this. Missing values are `nan` here, not `NA`.
Fn = TypeVar("Fn")


def njit(fn: Fn, **kwargs: Any) -> Fn:
    """Wrapper around numba njit decorator that enables inlining."""
    return _njit(inline="always", **kwargs)(fn)  # type: ignore


def _as_float(a: Any) -> np.ndarray:
    return np.ascontiguousarray(a, dtype=np.float64)


class FastOps:
    @staticmethod
    def map(fn: Callable[[float], float]) -> Callable[..., np.ndarray]:
        """Parallel element-wise map over a float array of any shape."""
        logger.debug("FastOps.map: compiling %s", getattr(fn, "__name__", fn))
        f = array_map(njit(fn))

        def ret(a: Any, out: Optional[np.ndarray] = None) -> np.ndarray:
            a = _as_float(a)
            if out is None:
                out = np.zeros(a.shape)
            elif out.shape != a.shape or not out.flags.c_contiguous:
                logger.debug("FastOps.map: bad out %s for input %s", out.shape, a.shape)
                raise ValueError("out must be a C-contiguous array shaped like a")
            f(out.reshape(-1), a.reshape(-1))
            return out

        return ret

    @staticmethod
    def zip(
        fn: Callable[[float, float], float],
    ) -> Callable[[Any, Any], np.ndarray]:
        """Parallel element-wise combination of two equally shaped float arrays."""
        logger.debug("FastOps.zip: compiling %s", getattr(fn, "__name__", fn))
        f = array_zip(njit(fn))

        def ret(a: Any, b: Any) -> np.ndarray:
            a = _as_float(a)
            b = _as_float(b)
            if a.shape != b.shape:
                logger.debug("FastOps.zip: shapes %s and %s differ", a.shape, b.shape)
                raise LengthMismatch((a.shape, b.shape))
            out = np.zeros(a.shape)
            f(out.reshape(-1), a.reshape(-1), b.reshape(-1))
            return out

        return ret

    @staticmethod
    def reduce(
        fn: Callable[[float, float], float], start: float = 0.0
    ) -> Callable[[Any, int], np.ndarray]:
        """Parallel reduction along one axis.

        Args:
        ----
            fn: associative binary operator.
            start: identity of `fn`, seeding every slice.

        Returns:
        -------
            Function of (array, axis) returning the array with `axis` removed.

        """
        logger.debug("FastOps.reduce: compiling %s", getattr(fn, "__name__", fn))
        f = array_reduce(njit(fn))

        def ret(a: Any, axis: int) -> np.ndarray:
            moved = np.moveaxis(np.asarray(a, dtype=np.float64), axis, -1)
            out_shape = moved.shape[:-1]
            rows = _as_float(moved.reshape(int(np.prod(out_shape)), moved.shape[-1]))

            out = np.full(rows.shape[0], start, dtype=np.float64)
            f(out, rows)
            return out.reshape(out_shape)

        return ret


# Implementations


def array_map(
    fn: Callable[[float], float],
) -> Callable[[np.ndarray, np.ndarray], None]:
    """NUMBA low level map over flat float storage.

    Args:
    ----
        fn: function mapping floats to floats.

    Returns:
    -------
        Kernel filling `out[i] = fn(in_storage[i])`.

    """

    def _map(out: np.ndarray, in_storage: np.ndarray) -> None:
        for i in prange(out.size):
            out[i] = fn(in_storage[i])

    return njit(_map, parallel=True)  # type: ignore


def array_zip(
    fn: Callable[[float, float], float],
) -> Callable[[np.ndarray, np.ndarray, np.ndarray], None]:
    """NUMBA low level zip over two flat float storages of equal size."""

    def _zip(out: np.ndarray, a_storage: np.ndarray, b_storage: np.ndarray) -> None:
        for i in prange(out.size):
            out[i] = fn(a_storage[i], b_storage[i])

    return njit(_zip, parallel=True)  # type: ignore


def array_reduce(
    fn: Callable[[float, float], float],
) -> Callable[[np.ndarray, np.ndarray], None]:
    """NUMBA low level row reduction.

    Rows are reduced in parallel, each one sequentially from the seed already
    stored in `out[i]`.

    Args:
    ----
        fn: reduction function mapping two floats to float.

    Returns:
    -------
        Kernel folding row `i` of a 2-D array into `out[i]`.

    """

    def _reduce(out: np.ndarray, a_storage: np.ndarray) -> None:
        reduce_size = a_storage.shape[1]
        for i in prange(out.size):
            acc = out[i]
            for j in range(reduce_size):
                acc = fn(acc, a_storage[i, j])
            out[i] = acc

    return njit(_reduce, parallel=True)  # type: ignore
