"""MatchOptions and exclusion rules for matcher construction.

MatchOptions is a frozen (immutable) dataclass holding the comparison policy.
Builder-style ``with_*`` / ``add_override`` methods return modified copies,
so a single instance can be shared across comparisons and threads.

Exclusion rules:
- ``exclude_fields(*names)`` excludes every record field whose *name* is
  listed, at any nesting depth.
- ``exclude_paths(*paths)`` excludes fields at exact locations only.
- Any ``(record, path) -> bool`` callable may be passed to ``with_excluder``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field, replace
from typing import Any

from schema_match.custom import matching
from schema_match.mismatch import FieldPath
from schema_match.protocols import Excluder, Renderer, ValueMatcher
from schema_match.record import Record
from schema_match.render import render_value

logger = logging.getLogger(__name__)

__all__ = [
    "FieldNameExcluder",
    "MatchOptions",
    "NeverExclude",
    "PathExcluder",
    "PredicateExcluder",
    "as_path",
    "exclude_fields",
    "exclude_paths",
]

PathLike = str | Sequence[str]


def as_path(path: PathLike) -> FieldPath:
    """Normalise a dotted string or a sequence of segments to a ``FieldPath``."""
    if isinstance(path, str):
        return tuple(path.split(".")) if path else ()
    return tuple(str(segment) for segment in path)


class NeverExclude:
    """Default excluder: every field takes part in the comparison."""

    __slots__ = ()

    def is_excluded(self, record: Any, path: FieldPath) -> bool:
        return False

    def __repr__(self) -> str:
        return "NeverExclude()"


_NEVER_EXCLUDE = NeverExclude()


class FieldNameExcluder:
    """Excludes record fields by their name, wherever they occur in the tree.

    Only the last path segment is inspected: excluding ``"id"`` prunes
    ``id``, ``address.id`` and ``telephoneNumbers.0.id`` alike.  Map keys and
    array indices are never excluded because their owner is not a record.
    """

    __slots__ = ("_names",)

    def __init__(self, names: Iterable[str]) -> None:
        self._names = frozenset(names)

    @property
    def names(self) -> frozenset[str]:
        return self._names

    def is_excluded(self, record: Any, path: FieldPath) -> bool:
        if not isinstance(record, Record) or not path:
            return False
        return path[-1] in self._names

    def __repr__(self) -> str:
        return f"FieldNameExcluder({sorted(self._names)!r})"


class PathExcluder:
    """Excludes record fields at exact paths from the comparison root."""

    __slots__ = ("_paths",)

    def __init__(self, paths: Iterable[PathLike]) -> None:
        self._paths = frozenset(as_path(p) for p in paths)

    def is_excluded(self, record: Any, path: FieldPath) -> bool:
        return tuple(path) in self._paths

    def __repr__(self) -> str:
        return f"PathExcluder({sorted(self._paths)!r})"


class PredicateExcluder:
    """Adapts a plain ``predicate(record, path) -> bool`` to the ``Excluder`` protocol."""

    __slots__ = ("_predicate",)

    def __init__(self, predicate: Callable[[Any, FieldPath], bool]) -> None:
        self._predicate = predicate

    def is_excluded(self, record: Any, path: FieldPath) -> bool:
        return bool(self._predicate(record, path))


def exclude_fields(*names: str) -> Excluder:
    """Return an excluder matching record fields by name at any depth."""
    if not names:
        return _NEVER_EXCLUDE
    return FieldNameExcluder(names)


def exclude_paths(*paths: PathLike) -> Excluder:
    """Return an excluder matching record fields by their full path."""
    if not paths:
        return _NEVER_EXCLUDE
    return PathExcluder(paths)


@dataclass(frozen=True, slots=True)
class MatchOptions:
    """Immutable comparison policy.

    Attributes:
        excluder: Decides which record fields are pruned from the matcher tree.
            Defaults to excluding nothing.
        overrides: Exact path -> matcher used instead of the schema-derived
            matcher at that path.  No wildcard or pattern matching.
        ignore_array_order: When True, every array is compared as a multiset
            (greedy first-fit) rather than positionally.  Default False.
        renderer: Turns whole values into text for descriptions and
            "Not matched" reports.  Never used for comparison.
    """

    excluder: Excluder = _NEVER_EXCLUDE
    overrides: Mapping[FieldPath, ValueMatcher] = field(default_factory=dict)
    ignore_array_order: bool = False
    renderer: Renderer = render_value

    def __post_init__(self) -> None:
        if not isinstance(self.excluder, Excluder):
            msg = f"excluder must implement is_excluded(record, path), got {self.excluder!r}"
            raise TypeError(msg)
        if not callable(self.renderer):
            msg = f"renderer must be callable, got {self.renderer!r}"
            raise TypeError(msg)

    def with_excluder(
        self, excluder: Excluder | Callable[[Any, FieldPath], bool]
    ) -> MatchOptions:
        if excluder is None:
            msg = "excluder is None"
            raise TypeError(msg)
        if not isinstance(excluder, Excluder):
            excluder = PredicateExcluder(excluder)
        return replace(self, excluder=excluder)

    def add_override(
        self, path: PathLike, matcher: ValueMatcher | Callable[[Any], bool]
    ) -> MatchOptions:
        """Return options that use ``matcher`` for the value at exactly ``path``.

        ``path`` is a sequence of segments or a dotted string.  A plain callable
        is treated as a predicate and wrapped with ``matching``.
        """
        if matcher is None:
            msg = "matcher is None"
            raise TypeError(msg)
        key = as_path(path)
        if not key:
            msg = "override path is empty"
            raise ValueError(msg)
        if not isinstance(matcher, ValueMatcher):
            if not callable(matcher):
                msg = f"matcher must implement matches()/describe() or be callable, got {matcher!r}"
                raise TypeError(msg)
            matcher = matching(matcher)
        logger.debug("registering override at %s: %r", ".".join(key), matcher)
        return replace(self, overrides={**self.overrides, key: matcher})

    def with_ignore_array_order(self, ignore_array_order: bool = True) -> MatchOptions:
        return replace(self, ignore_array_order=ignore_array_order)

    def with_renderer(self, renderer: Renderer) -> MatchOptions:
        return replace(self, renderer=renderer)

    def override_for(self, path: FieldPath) -> ValueMatcher | None:
        # exact paths only: no wildcard segments for array indices or map keys
        return self.overrides.get(tuple(path))
