"""
Value kind statistics.

Counts how many values of each JSON kind a document contains, including the
containers themselves. The counts back the "JSON Statistics" panel of the
formatter view.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

from jsontoolbox.engine.values import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    Value,
)


@dataclass(frozen=True)
class Stats:
    """Number of values of each kind in a JSON tree."""

    objects: int = 0
    arrays: int = 0
    strings: int = 0
    numbers: int = 0
    booleans: int = 0
    nulls: int = 0

    def __add__(self, other: Stats) -> Stats:
        if not isinstance(other, Stats):
            return NotImplemented
        return Stats(
            **{f.name: getattr(self, f.name) + getattr(other, f.name) for f in fields(self)}
        )

    @property
    def total(self) -> int:
        return sum(getattr(self, f.name) for f in fields(self))

    def as_dict(self) -> dict[str, int]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def collect_stats(value: Value) -> Stats:
    """Count every node of a JSON tree by kind.

    Objects and arrays count once for themselves and then add the counts of
    their children. Nothing is deduplicated: two equal strings count twice.

    Args:
        value: The root value.

    Returns:
        The accumulated Stats.

    Examples:
        >>> collect_stats(parse('{"a": [1, "x", null]}'))
        Stats(objects=1, arrays=1, strings=1, numbers=1, booleans=0, nulls=1)
    """
    if isinstance(value, JsonObject):
        result = Stats(objects=1)
        for child in value.values():
            result = result + collect_stats(child)
        return result
    if isinstance(value, JsonArray):
        result = Stats(arrays=1)
        for child in value.items:
            result = result + collect_stats(child)
        return result
    if isinstance(value, JsonString):
        return Stats(strings=1)
    if isinstance(value, JsonNumber):
        return Stats(numbers=1)
    if isinstance(value, JsonBool):
        return Stats(booleans=1)
    if isinstance(value, JsonNull):
        return Stats(nulls=1)
    raise TypeError(f"Not a JSON value: {type(value).__name__}")
