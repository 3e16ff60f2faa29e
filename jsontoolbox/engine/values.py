"""
Tagged JSON value model.

Every engine component works on these immutable value classes instead of
raw ``dict``/``list`` objects, so that each consumer handles the six JSON
kinds explicitly and never has to guess what a Python value stands for
(``True == 1`` and ``isinstance(True, int)`` are the classic traps).

Value Kinds:
    - JsonNull: the ``null`` literal
    - JsonBool: ``true`` / ``false``
    - JsonNumber: integer or floating point number
    - JsonString: text
    - JsonArray: ordered sequence of values
    - JsonObject: insertion-ordered mapping of unique string keys to values
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterator, Union


@dataclass(frozen=True, slots=True)
class JsonNull:
    """The JSON ``null`` literal."""

    kind = "null"


@dataclass(frozen=True, slots=True)
class JsonBool:
    """A JSON boolean."""

    value: bool

    kind = "boolean"


@dataclass(frozen=True, slots=True)
class JsonNumber:
    """A JSON number.

    Integers are kept as ``int`` and everything else as ``float``. Two numbers
    are equal when their numeric values are equal, so ``1`` and ``1.0`` match.
    """

    value: int | float

    kind = "number"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonNumber):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)


@dataclass(frozen=True, slots=True)
class JsonString:
    """A JSON string."""

    value: str

    kind = "string"


@dataclass(frozen=True, slots=True)
class JsonArray:
    """An ordered sequence of JSON values."""

    items: tuple[Value, ...] = ()

    kind = "array"

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def keys(self) -> list[str]:
        """Return the element indices as strings (``"0"``, ``"1"``, ...)."""
        return [str(idx) for idx in range(len(self.items))]

    def get(self, key: str) -> Value | None:
        """Return the element at a stringified index, or None."""
        if not key.isdigit():
            return None
        idx = int(key)
        if idx >= len(self.items) or str(idx) != key:
            return None
        return self.items[idx]


@dataclass(frozen=True, slots=True)
class JsonObject:
    """An insertion-ordered mapping of string keys to JSON values.

    Entries are stored as a tuple of ``(key, value)`` pairs so the object stays
    hashable and immutable. Keys are unique; use :meth:`from_pairs` to build an
    object from raw pairs that may repeat a key.

    Examples:
        >>> obj = JsonObject.from_pairs([("a", JsonNumber(1)), ("b", JsonNull())])
        >>> obj.keys()
        ['a', 'b']
    """

    entries: tuple[tuple[str, Value], ...] = ()

    kind = "object"

    @classmethod
    def from_pairs(cls, pairs: list[tuple[str, Value]]) -> JsonObject:
        """Build an object, letting a repeated key overwrite the earlier value.

        The key keeps the position of its first occurrence.
        """
        merged: dict[str, Value] = {}
        for key, value in pairs:
            merged[key] = value
        return cls(tuple(merged.items()))

    def __len__(self) -> int:
        return len(self.entries)

    def keys(self) -> list[str]:
        """Return the keys in insertion order."""
        return [key for key, _ in self.entries]

    def values(self) -> list[Value]:
        """Return the values in insertion order."""
        return [value for _, value in self.entries]

    def items(self) -> tuple[tuple[str, Value], ...]:
        return self.entries

    def get(self, key: str) -> Value | None:
        for entry_key, value in self.entries:
            if entry_key == key:
                return value
        return None


Value = Union[JsonNull, JsonBool, JsonNumber, JsonString, JsonArray, JsonObject]
"""Any JSON value."""

Container = (JsonArray, JsonObject)


def is_container(value: Value | None) -> bool:
    """Return True for arrays and objects."""
    return isinstance(value, Container)


def from_python(data: Any) -> Value:
    """Convert a plain Python value (as produced by :mod:`json`) to a Value.

    Args:
        data: ``None``, ``bool``, ``int``, ``float``, ``str``, ``list``/``tuple``
            or ``dict`` with string keys, nested arbitrarily.

    Returns:
        The equivalent tagged value.

    Raises:
        TypeError: If ``data`` contains something that has no JSON equivalent.

    Examples:
        >>> from_python({"a": [1, True, None]})
        JsonObject(entries=(('a', JsonArray(items=(JsonNumber(value=1), JsonBool(value=True), JsonNull()))),))
    """
    # bool must be checked before int/float
    if data is None:
        return JsonNull()
    if isinstance(data, bool):
        return JsonBool(data)
    if isinstance(data, (int, float)):
        return JsonNumber(data)
    if isinstance(data, str):
        return JsonString(data)
    if isinstance(data, (list, tuple)):
        return JsonArray(tuple(from_python(item) for item in data))
    if isinstance(data, dict):
        return JsonObject(tuple((str(key), from_python(val)) for key, val in data.items()))
    raise TypeError(f"Cannot convert {type(data).__name__} to a JSON value")


def to_python(value: Value) -> Any:
    """Convert a Value back to plain Python data suitable for :func:`json.dumps`.

    A number that overflowed to infinity while parsing (``1e400``) has no JSON
    spelling and becomes ``None``, so it is written as ``null``.
    """
    if isinstance(value, JsonNull):
        return None
    if isinstance(value, JsonNumber):
        if isinstance(value.value, float) and not math.isfinite(value.value):
            return None
        return value.value
    if isinstance(value, (JsonBool, JsonString)):
        return value.value
    if isinstance(value, JsonArray):
        return [to_python(item) for item in value.items]
    if isinstance(value, JsonObject):
        return {key: to_python(item) for key, item in value.entries}
    raise TypeError(f"Not a JSON value: {type(value).__name__}")
