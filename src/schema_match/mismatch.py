"""Mismatch accumulator: ordered, path-qualified divergence reports.

A ``MismatchList`` is created fresh for each diagnostic evaluation and shared
by every matcher node in the tree.  Nodes append to it in traversal order
(record field order, then map/array child order), so the rendered report is
deterministic.

Rendering::

    age Expected: 21 but: was 20
    familyMembers.Sister Expected: "Jane" but: was null
    had additional indices: 2          <- root-level entry, no path prefix
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from schema_match.render import format_path

__all__ = ["FieldPath", "Mismatch", "MismatchList"]

FieldPath = tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Mismatch:
    """A single divergence.

    Attributes:
        path:    Segments from the comparison root to the divergent value.
                 Empty for root-level mismatches.
        message: What differs, e.g. ``Expected: 21 but: was 20``.
    """

    path: FieldPath
    message: str

    def __str__(self) -> str:
        if not self.path:
            return self.message
        return f"{format_path(self.path)} {self.message}"


class MismatchList:
    """Ordered collection of ``Mismatch`` entries for one comparison."""

    __slots__ = ("_mismatches",)

    def __init__(self) -> None:
        self._mismatches: list[Mismatch] = []

    def add(self, path: Iterable[str], message: str) -> MismatchList:
        self._mismatches.append(Mismatch(tuple(path), message))
        return self

    def extend_under(self, prefix: FieldPath, other: MismatchList) -> MismatchList:
        """Append every entry of ``other`` with ``prefix`` prepended to its path."""
        for mismatch in other:
            self.add(prefix + mismatch.path, mismatch.message)
        return self

    @property
    def paths(self) -> list[FieldPath]:
        return [m.path for m in self._mismatches]

    def render(self) -> str:
        return "\n".join(str(m) for m in self._mismatches)

    def __iter__(self) -> Iterator[Mismatch]:
        return iter(self._mismatches)

    def __len__(self) -> int:
        return len(self._mismatches)

    def __bool__(self) -> bool:
        return bool(self._mismatches)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"MismatchList({self._mismatches!r})"
