"""Shape-checked map variants.

Three tiers of map exist: `iteration.map` returns the untyped list,
`to_vector_map` coalesces the list into one array when every result agrees on
shape and kind, and `to_typed_vector_map` checks each result against a
declared prototype as it goes.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence, Tuple

import numpy as np

from .errors import ContractViolation, ShapeMismatch
from .iteration import map
from .logger import logger

Signature = Tuple[Tuple[int, ...], str]

# dtype kinds whose width must fit the prototype's
_NUMERIC = "biufc"


def _signature(value: Any) -> Signature | None:
    """(shape, kind) of a scalar or 1-D result, None for anything else."""
    try:
        arr = np.asarray(value)
    except ValueError:
        # ragged nested sequence
        return None
    if arr.ndim > 1:
        return None
    return arr.shape, arr.dtype.kind


def to_vector_map(fn: Callable[[Any], Any], ls: Sequence[Any]) -> np.ndarray:
    """Map, then coalesce the results into a homogeneous array.

    Args:
    ----
        fn: one-argument function.
        ls: input sequence.

    Returns:
    -------
        A 1-D array of length n when every result is a scalar, or an (n, k)
        matrix when every result is a 1-D sequence of length k. All results
        must share one dtype kind; signed and unsigned integers differ. Empty input gives an empty float array.

    Raises:
    ------
        ShapeMismatch: results disagree in shape or kind. Callers wanting the
            unstructured results fall back to `map`.

    """
    results = map(fn, ls)
    if not results:
        return np.empty(0)

    expected = _signature(results[0])
    if expected is None:
        logger.debug("to_vector_map: result 0 is not scalar or 1-D")
        raise ShapeMismatch(0, "scalar or 1-D", np.shape(results[0]))
    for i in range(1, len(results)):
        actual = _signature(results[i])
        if actual != expected:
            logger.debug("to_vector_map: result %d is %s, not %s", i, actual, expected)
            raise ShapeMismatch(i, expected, actual)

    shape, _ = expected
    if shape == ():
        return np.array(results)
    return np.array([np.asarray(r) for r in results])


def to_typed_vector_map(
    fn: Callable[[Any], Any], ls: Sequence[Any], prototype: Any
) -> np.ndarray:
    """Map with every result checked against a prototype.

    Each result is validated right after `fn` returns. The first one whose
    length or dtype kind differs from the prototype, or whose numeric dtype
    does not cast safely to the prototype's, stops the walk; later elements
    are never evaluated.

    Args:
    ----
        fn: one-argument function.
        ls: input sequence.
        prototype: scalar or 1-D example result. Only its length and dtype
            are used.

    Returns:
    -------
        An (n, k) row-major matrix with the prototype's dtype, k being the
        prototype's length (1 for a scalar). Empty input gives shape (0, k).

    Raises:
    ------
        ContractViolation: a result does not match the prototype. Carries
            the offending index.

    """
    proto = np.asarray(prototype)
    if proto.ndim > 1:
        logger.debug("to_typed_vector_map: prototype has shape %s", proto.shape)
        raise ValueError(f"prototype must be a scalar or 1-D, got shape {proto.shape}")
    k = 1 if proto.ndim == 0 else proto.shape[0]
    kind = proto.dtype.kind

    rows = []
    for i, x in enumerate(ls):
        result = fn(x)
        actual = _signature(result)
        if actual is None:
            logger.debug("to_typed_vector_map: result %d is not scalar or 1-D", i)
            raise ContractViolation(i, (k, kind), "not scalar or 1-D")
        shape, actual_kind = actual
        length = 1 if shape == () else shape[0]
        if length != k or actual_kind != kind:
            logger.debug(
                "to_typed_vector_map: result %d is %s, not %s",
                i,
                (length, actual_kind),
                (k, kind),
            )
            raise ContractViolation(i, (k, kind), (length, actual_kind))
        row = np.asarray(result).reshape(k)
        if kind in _NUMERIC and not np.can_cast(row.dtype, proto.dtype, "safe"):
            logger.debug(
                "to_typed_vector_map: result %d is %s, does not fit %s",
                i,
                row.dtype,
                proto.dtype,
            )
            raise ContractViolation(i, (k, str(proto.dtype)), (length, str(row.dtype)))
        rows.append(row)

    if not rows:
        return np.empty((0, k), dtype=proto.dtype)
    # Text widths vary per row, let numpy pick the widest.
    dtype = None if kind in "US" else proto.dtype
    return np.array(rows, dtype=dtype)
