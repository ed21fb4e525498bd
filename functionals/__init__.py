from . import operators  # noqa: F401
from .errors import (  # noqa: F401
    ContractViolation,
    EmptyReductionError,
    FunctionalError,
    LengthMismatch,
    ShapeMismatch,
)
from .family import (  # noqa: F401
    OperatorFamily,
    add_family,
    add_vectors,
    col_sums,
    cumulative_sum,
    guarded,
    max_family,
    min_family,
    mul_family,
    product,
    row_sums,
    total,
    with_identity,
)
from .fast_ops import FastOps  # noqa: F401
from .grouping import group_apply, partition_by_key, zip_map  # noqa: F401
from .iteration import indexed_map, map, named_map  # noqa: F401
from .missing import NA, is_na, resolve_missing  # noqa: F401
from .named import Named  # noqa: F401
from .reduction import NOT_FOUND, filter, find, find_index, fold, scan  # noqa: F401
from .shape import to_typed_vector_map, to_vector_map  # noqa: F401

version = "0.1.0"
