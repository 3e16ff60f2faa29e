"""
Structural diff between two JSON values.

This module walks two parsed JSON documents side by side and classifies every
key path it visits into exactly one of four buckets.

Diff Types:
    - added: Key exists in the right document but not in the left
    - removed: Key exists in the left document but not in the right
    - modified: Key exists on both sides with different (non-container) values
    - same: Key exists on both sides with equal values

Paths are dot-joined keys from the root (``"address.city"``). Array indices
are treated exactly like object keys (``"hobbies.1"``), so arrays are compared
position by position: inserting an element in the middle of an array shows up
as a change at every following index.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from jsontoolbox.engine.parser import ParseFailure, is_blank, parse
from jsontoolbox.engine.values import JsonArray, JsonObject, Value, is_container

logger = logging.getLogger(__name__)


DIFF_BUCKETS = ("added", "removed", "modified", "same")


# Number of paths shown per bucket in a summary before "+N more"
SUMMARY_PREVIEW_LIMIT = 3


@dataclass(frozen=True)
class DiffReport:
    """Classified key paths produced by :func:`diff`.

    Each bucket is a tuple of paths in visit order. The buckets are pairwise
    disjoint.

    Attributes:
        added: Paths only present on the right.
        removed: Paths only present on the left.
        modified: Paths present on both sides with different values.
        same: Paths present on both sides with equal values.
    """

    added: tuple[str, ...] = ()
    removed: tuple[str, ...] = ()
    modified: tuple[str, ...] = ()
    same: tuple[str, ...] = ()

    def merge(self, other: DiffReport) -> DiffReport:
        """Return a new report holding the paths of both reports."""
        return DiffReport(
            added=self.added + other.added,
            removed=self.removed + other.removed,
            modified=self.modified + other.modified,
            same=self.same + other.same,
        )

    def bucket(self, name: str) -> tuple[str, ...]:
        """Return the paths of a bucket by name.

        Raises:
            ValueError: If ``name`` is not one of :data:`DIFF_BUCKETS`.
        """
        if name not in DIFF_BUCKETS:
            raise ValueError(
                f"Unknown diff bucket '{name}'. Expected one of: {', '.join(DIFF_BUCKETS)}"
            )
        return getattr(self, name)

    def as_sets(self) -> dict[str, frozenset[str]]:
        return {name: frozenset(self.bucket(name)) for name in DIFF_BUCKETS}

    def counts(self) -> dict[str, int]:
        """Return the number of paths in each bucket.

        Examples:
            >>> compare_json('{"a": 1}', '{"a": 2, "b": 3}').counts()
            {'added': 1, 'removed': 0, 'modified': 1, 'same': 0}
        """
        return {name: len(self.bucket(name)) for name in DIFF_BUCKETS}

    @property
    def has_differences(self) -> bool:
        return bool(self.added or self.removed or self.modified)


def _child_keys(value: Value | None) -> tuple[list[str], dict[str, Value]]:
    """Return the keys of a container and a key to child lookup.

    Null, a missing value and scalars behave like an empty object.
    """
    if isinstance(value, JsonObject):
        return value.keys(), dict(value.entries)
    if isinstance(value, JsonArray):
        keys = value.keys()
        return keys, dict(zip(keys, value.items))
    return [], {}


def _union_keys(left_keys: list[str], right_keys: list[str], left_children: dict[str, Value]) -> list[str]:
    """Left keys in order, then the right-only keys in right order."""
    keys = list(left_keys)
    keys.extend(key for key in right_keys if key not in left_children)
    return keys


def diff(
    left: Value | None,
    right: Value | None,
    path_prefix: str = "",
) -> DiffReport:
    """
    Compare two JSON values and classify every visited key path.

    Both values are walked key by key (array indices count as keys). For
    every key in the union of both sides:

        - missing on the left  -> ``added``
        - missing on the right -> ``removed``
        - both sides are containers -> descend, no path for the container
        - values differ -> ``modified``
        - otherwise -> ``same``

    Values are compared without coercion: the string ``"1"`` and the number
    ``1`` are different, as are ``true`` and ``1``.

    The walk keeps its own stack instead of recursing, so there is no depth
    limit: every leaf of any document that parses gets its full path.

    Args:
        left: The original value. None and ``null`` act as an empty object.
        right: The changed value. None and ``null`` act as an empty object.
        path_prefix: Path of ``left``/``right`` inside the enclosing documents.

    Returns:
        A new DiffReport with paths in visit order (depth first, left keys
        before right-only keys).

    Examples:
        >>> diff(parse('{"a": {"b": 1}}'), parse('{"a": {"b": 2}}')).modified
        ('a.b',)
    """
    buckets: dict[str, list[str]] = {name: [] for name in DIFF_BUCKETS}

    left_keys, left_children = _child_keys(left)
    right_keys, right_children = _child_keys(right)
    # Each frame: (pending keys, left lookup, right lookup, path prefix)
    stack = [
        (iter(_union_keys(left_keys, right_keys, left_children)), left_children, right_children, path_prefix)
    ]

    while stack:
        keys, left_children, right_children, prefix = stack[-1]
        key = next(keys, None)
        if key is None:
            stack.pop()
            continue

        child_path = f"{prefix}.{key}" if prefix else key

        if key not in left_children:
            buckets["added"].append(child_path)
        elif key not in right_children:
            buckets["removed"].append(child_path)
        else:
            left_value = left_children[key]
            right_value = right_children[key]
            if is_container(left_value) and is_container(right_value):
                child_left_keys, child_left = _child_keys(left_value)
                child_right_keys, child_right = _child_keys(right_value)
                stack.append(
                    (
                        iter(_union_keys(child_left_keys, child_right_keys, child_left)),
                        child_left,
                        child_right,
                        child_path,
                    )
                )
            elif left_value != right_value:
                buckets["modified"].append(child_path)
            else:
                buckets["same"].append(child_path)

    return DiffReport(**{name: tuple(paths) for name, paths in buckets.items()})


def compare_json(left_text: str | None, right_text: str | None) -> DiffReport | None:
    """Parse two JSON documents and diff them.

    Args:
        left_text: The original document.
        right_text: The changed document.

    Returns:
        The DiffReport, or None when either side is blank or not valid JSON.
        There is no partial report: a single bad side suppresses the diff.
    """
    if is_blank(left_text) or is_blank(right_text):
        return None

    try:
        left = parse(left_text)
        right = parse(right_text)
    except ParseFailure:
        return None

    report = diff(left, right)
    logger.debug("Structural diff counts: %s", report.counts())
    return report


def summarize_bucket(
    paths: tuple[str, ...] | list[str], limit: int = SUMMARY_PREVIEW_LIMIT
) -> tuple[list[str], int]:
    """Split a bucket into the paths to preview and the number left over.

    Examples:
        >>> summarize_bucket(("a", "b", "c", "d", "e"))
        (['a', 'b', 'c'], 2)
    """
    preview = list(paths[:limit])
    return preview, max(len(paths) - limit, 0)

