from typing import List

import numpy as np
import numpy.testing as npt
import pytest

from functionals import ContractViolation, ShapeMismatch, map, to_typed_vector_map, to_vector_map


def test_vector_map_scalars() -> None:
    out = to_vector_map(lambda x: x * 2.0, [1, 2, 3])
    assert out.shape == (3,)
    npt.assert_allclose(out, [2.0, 4.0, 6.0])


def test_vector_map_rows() -> None:
    out = to_vector_map(lambda x: [x, x * x], [1, 2, 3])
    assert out.shape == (3, 2)
    npt.assert_array_equal(out, [[1, 1], [2, 4], [3, 9]])


def test_vector_map_empty() -> None:
    out = to_vector_map(lambda x: x, [])
    assert out.shape == (0,)


def test_vector_map_length_mismatch() -> None:
    with pytest.raises(ShapeMismatch) as info:
        to_vector_map(lambda x: list(range(x)), [2, 2, 3])
    assert info.value.index == 2


def test_vector_map_kind_mismatch() -> None:
    with pytest.raises(ShapeMismatch) as info:
        to_vector_map(lambda x: "a" if x == 1 else x, [0, 1])
    assert info.value.index == 1


def test_vector_map_caller_degrades_to_list() -> None:
    fn = lambda x: list(range(x))  # noqa: E731
    try:
        out = to_vector_map(fn, [1, 2])
    except ShapeMismatch:
        out = map(fn, [1, 2])
    assert out == [[0], [0, 1]]


def test_typed_map_scalar_prototype() -> None:
    out = to_typed_vector_map(lambda x: x / 2, [2, 4], 0.0)
    assert out.shape == (2, 1)
    assert out.dtype == np.float64
    npt.assert_allclose(out, [[1.0], [2.0]])


def test_typed_map_vector_prototype() -> None:
    out = to_typed_vector_map(lambda x: [x, -x], [1, 2, 3], np.zeros(2, dtype=int))
    assert out.shape == (3, 2)
    npt.assert_array_equal(out, [[1, -1], [2, -2], [3, -3]])


def test_typed_map_empty_keeps_shape() -> None:
    out = to_typed_vector_map(lambda x: x, [], np.zeros(3))
    assert out.shape == (0, 3)


def test_typed_map_wrong_length_names_index() -> None:
    calls: List[int] = []

    def fn(x: int) -> List[float]:
        calls.append(x)
        return [1.0] * x

    with pytest.raises(ContractViolation) as info:
        to_typed_vector_map(fn, [2, 2, 3, 2], [0.0, 0.0])
    assert info.value.index == 2
    assert info.value.expected == (2, "f")
    assert info.value.actual == (3, "f")
    assert calls == [2, 2, 3]


def test_typed_map_wrong_type() -> None:
    with pytest.raises(ContractViolation) as info:
        to_typed_vector_map(lambda x: x, [1.0, 2], 0.0)
    assert info.value.index == 1


def test_typed_map_text() -> None:
    out = to_typed_vector_map(lambda s: s.upper(), ["a", "bcd"], "")
    npt.assert_array_equal(out, [["A"], ["BCD"]])


def test_typed_map_bad_prototype() -> None:
    with pytest.raises(ValueError):
        to_typed_vector_map(lambda x: x, [1], np.zeros((2, 2)))


def test_typed_map_rejects_unsigned_for_signed() -> None:
    with pytest.raises(ContractViolation) as info:
        to_typed_vector_map(lambda x: np.uint64(x), [2**63], 0)
    assert info.value.index == 0
    assert info.value.actual == (1, "u")


def test_typed_map_rejects_narrowing() -> None:
    with pytest.raises(ContractViolation) as info:
        to_typed_vector_map(lambda x: x, [1, 2**40], np.int32(0))
    assert info.value.index == 0
    assert info.value.expected == (1, "int32")
    assert info.value.actual == (1, "int64")


def test_typed_map_accepts_widening() -> None:
    out = to_typed_vector_map(lambda x: np.float32(x), [1, 2], 0.0)
    assert out.dtype == np.float64
    npt.assert_allclose(out, [[1.0], [2.0]])


def test_vector_map_rejects_mixed_signedness() -> None:
    with pytest.raises(ShapeMismatch) as info:
        to_vector_map(lambda x: x, [np.uint64(2**64 - 1), -1])
    assert info.value.index == 1


def test_vector_map_keeps_large_unsigned_exact() -> None:
    out = to_vector_map(lambda x: x, [np.uint64(2**64 - 1), np.uint64(1)])
    assert out.dtype == np.uint64
    assert int(out[0]) == 2**64 - 1


def test_typed_map_bad_prototype_is_logged(log_messages) -> None:
    with pytest.raises(ValueError):
        to_typed_vector_map(lambda x: x, [1], np.zeros((2, 2)))
    assert any("prototype has shape" in m for m in log_messages)
