"""Selection of zero-based page indices scoped to one document."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Set

from .ranges import parse_range_spec
from .types import RangeParseResult


class SelectionSet:
    """A deduplicated, unordered set of zero-based page indices.

    The set does not remember a page count; every operation that needs one
    takes the document's current count, so the caller decides which document
    the selection refers to.
    """

    def __init__(self, indices: Iterable[int] = ()) -> None:
        self._indices: Set[int] = set(indices)

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------
    def select_all(self, page_count: int) -> None:
        self._indices = set(range(max(0, page_count)))

    def select_none(self) -> None:
        self._indices.clear()

    clear = select_none

    def invert(self, page_count: int) -> None:
        self._indices = set(range(max(0, page_count))) - self._indices

    def union_range(self, spec: str, page_count: int) -> RangeParseResult:
        """Add the pages named by *spec* and return the parse result."""

        result = parse_range_spec(spec, page_count)
        self._indices |= result.indices
        return result

    # ------------------------------------------------------------------
    # Single-page helpers
    # ------------------------------------------------------------------
    def add(self, index: int) -> None:
        self._indices.add(index)

    def discard(self, index: int) -> None:
        self._indices.discard(index)

    def toggle(self, index: int) -> bool:
        """Flip *index* in or out of the selection; return whether it is now selected."""

        if index in self._indices:
            self._indices.remove(index)
            return False
        self._indices.add(index)
        return True

    def sorted(self, *, reverse: bool = False) -> List[int]:
        return sorted(self._indices, reverse=reverse)

    def as_set(self) -> Set[int]:
        return set(self._indices)

    def __contains__(self, index: object) -> bool:
        return index in self._indices

    def __iter__(self) -> Iterator[int]:
        return iter(set(self._indices))

    def __len__(self) -> int:
        return len(self._indices)

    def __bool__(self) -> bool:
        return bool(self._indices)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SelectionSet):
            return self._indices == other._indices
        if isinstance(other, (set, frozenset)):
            return self._indices == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"SelectionSet({self.sorted()!r})"


__all__ = ["SelectionSet"]
