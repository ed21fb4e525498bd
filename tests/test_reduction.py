from collections import deque
from typing import List

import pytest

from functionals import NOT_FOUND, EmptyReductionError, filter, find, find_index, fold, scan
from functionals.operators import add, is_even


def test_fold_single_element_unchanged() -> None:
    marker = object()
    assert fold(add, [7]) == 7
    assert fold(lambda a, b: 1 / 0, [marker]) is marker


def test_fold_sum() -> None:
    assert fold(add, [1, 2, 3, 4]) == 10
    assert fold(add, [1, 2, 3, 4], 100) == 110


def test_fold_empty() -> None:
    with pytest.raises(EmptyReductionError):
        fold(add, [])
    assert fold(add, [], 0) == 0


def test_fold_order() -> None:
    assert fold(lambda acc, x: f"({acc}{x})", ["a", "b", "c"]) == "((ab)c)"
    assert fold(lambda x, acc: f"({x}{acc})", ["a", "b", "c"], right=True) == "(a(bc))"


def test_scan() -> None:
    assert scan(add, [1, 2, 3, 4]) == [1, 3, 6, 10]
    assert scan(add, [1, 2, 3, 4], 0) == [0, 1, 3, 6, 10]
    assert scan(add, []) == []
    assert scan(add, [], 5) == [5]


def test_scan_right() -> None:
    assert scan(add, [1, 2, 3, 4], right=True) == [10, 9, 7, 4]
    assert scan(add, [1, 2], 0, right=True) == [3, 2, 0]


def test_find() -> None:
    assert find(is_even, [1, 3, 4, 5, 6]) == 4
    assert find(is_even, [1, 3, 4, 5, 6], from_end=True) == 6
    assert find(is_even, [1, 3]) is NOT_FOUND


def test_find_short_circuits() -> None:
    calls: List[int] = []

    def pred(x: int) -> bool:
        calls.append(x)
        if x == 99:
            raise AssertionError("evaluated past the match")
        return x > 2

    assert find(pred, [1, 3, 99]) == 3
    assert calls == [1, 3]


def test_find_from_end_short_circuits() -> None:
    calls: List[int] = []

    def pred(x: int) -> bool:
        calls.append(x)
        return x < 2

    assert find(pred, [0, 1, 5, 6], from_end=True) == 1
    assert calls == [6, 5, 1]


def test_find_index() -> None:
    assert find_index(is_even, [1, 2, 4]) == 1
    assert find_index(is_even, [1, 2, 4], from_end=True) == 2
    assert find_index(is_even, [1, 3]) is None
    assert find_index(is_even, []) is None


def test_filter_evaluates_every_element() -> None:
    calls: List[int] = []

    def pred(x: int) -> bool:
        calls.append(x)
        return is_even(x)

    assert filter(pred, [1, 2, 3, 4, 5, 6]) == [2, 4, 6]
    assert len(calls) == 6


def test_filter_no_matches() -> None:
    assert filter(is_even, [1, 3]) == []


def test_fold_and_scan_accept_deque() -> None:
    d = deque([1, 2, 3])
    assert fold(add, d) == 6
    assert fold(lambda x, acc: f"({x}{acc})", deque("abc"), right=True) == "(a(bc))"
    assert scan(add, d, right=True) == [6, 5, 3]
    assert scan(add, d, 0) == [0, 1, 3, 6]
    with pytest.raises(EmptyReductionError):
        fold(add, deque(), right=True)


def test_fold_does_not_consume_input() -> None:
    d = deque([1, 2])
    fold(add, d, right=True)
    assert list(d) == [1, 2]
