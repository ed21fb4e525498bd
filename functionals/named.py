from __future__ import annotations

from typing import Any, Generic, Hashable, Iterator, Mapping, Sequence, Tuple, TypeVar

from .errors import LengthMismatch
from .logger import logger

T = TypeVar("T")


class Named(Generic[T]):
    """An immutable sequence whose positions also carry names.

    Names are looked up by first occurrence. Name-based lookup assumes the
    names are unique; duplicates are kept but only the first is reachable
    through `lookup`.
    """

    __slots__ = ("_values", "_names", "_positions")

    def __init__(self, values: Sequence[T], names: Sequence[Hashable]) -> None:
        values = tuple(values)
        names = tuple(names)
        if len(values) != len(names):
            logger.debug("Named: %d values for %d names", len(values), len(names))
            raise LengthMismatch((len(values), len(names)))
        self._values = values
        self._names = names
        positions: dict = {}
        for i, name in enumerate(names):
            positions.setdefault(name, i)
        self._positions = positions

    @classmethod
    def from_mapping(cls, mapping: Mapping[Hashable, T]) -> "Named[T]":
        """Build from a mapping, keeping its iteration order."""
        return cls(list(mapping.values()), list(mapping.keys()))

    @property
    def values(self) -> Tuple[T, ...]:
        return self._values

    @property
    def names(self) -> Tuple[Hashable, ...]:
        return self._names

    def lookup(self, name: Hashable) -> T:
        """Value stored under `name`. Raises KeyError if absent."""
        return self._values[self._positions[name]]

    def items(self) -> Iterator[Tuple[Hashable, T]]:
        return zip(self._names, self._values)

    def to_dict(self) -> dict:
        return dict(self.items())

    def __getitem__(self, i: int) -> T:
        return self._values[i]

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[T]:
        return iter(self._values)

    def __contains__(self, name: Any) -> bool:
        return name in self._positions

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Named):
            return NotImplemented
        return self._values == other._values and self._names == other._names

    def __repr__(self) -> str:
        inner = ", ".join(f"{n!r}: {v!r}" for n, v in self.items())
        return f"Named({{{inner}}})"
