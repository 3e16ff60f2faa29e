"""Recursive object key sorting for the "Sort Keys" formatting option."""

from __future__ import annotations

from jsontoolbox.engine.values import JsonArray, JsonObject, Value


def normalize_keys(value: Value) -> Value:
    """Return a copy of ``value`` with every object's keys sorted.

    Keys are ordered by code point (plain ``str`` comparison). Array element
    order is preserved and scalars are returned unchanged.

    Examples:
        >>> normalize_keys(parse('{"b": 1, "a": {"d": 2, "c": 3}}'))
        JsonObject(entries=(('a', JsonObject(...)), ('b', JsonNumber(value=1))))
    """
    if isinstance(value, JsonObject):
        return JsonObject(
            tuple((key, normalize_keys(child)) for key, child in sorted(value.entries, key=_entry_key))
        )
    if isinstance(value, JsonArray):
        return JsonArray(tuple(normalize_keys(item) for item in value.items))
    return value


def _entry_key(entry: tuple[str, Value]) -> str:
    return entry[0]
