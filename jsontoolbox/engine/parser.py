"""
JSON parsing and validation.

This module turns raw text into the tagged value model. Parsing is strict
standard JSON: the non-standard ``NaN``/``Infinity`` literals that Python's
``json`` module accepts by default are rejected.

A failed parse raises :class:`ParseFailure`, which carries no position
information. Callers only ever show "Invalid JSON format".
"""

from __future__ import annotations

import json
import logging
from typing import Any

from jsontoolbox.engine.values import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    Value,
    from_python,
)

logger = logging.getLogger(__name__)

INVALID_JSON_MESSAGE = "Invalid JSON format"

_VALUE_TYPES = (JsonNull, JsonBool, JsonNumber, JsonString, JsonArray, JsonObject)


class ParseFailure(ValueError):
    """Raised when text is not valid JSON."""

    def __init__(self, message: str = INVALID_JSON_MESSAGE) -> None:
        super().__init__(message)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def _object_from_pairs(pairs: list[tuple[str, Any]]) -> JsonObject:
    return JsonObject.from_pairs([(key, _to_value(val)) for key, val in pairs])


def _to_value(data: Any) -> Value:
    # Objects are converted bottom-up by the pairs hook, arrays and scalars here
    if isinstance(data, _VALUE_TYPES):
        return data
    if isinstance(data, list):
        return JsonArray(tuple(_to_value(item) for item in data))
    return from_python(data)


def is_blank(text: str | None) -> bool:
    """Return True for empty or whitespace-only input ("no input")."""
    return text is None or not text.strip()


def parse(text: str) -> Value:
    """Parse JSON text into a tagged value.

    Args:
        text: The JSON document.

    Returns:
        The parsed value.

    Raises:
        ParseFailure: If the text is blank, malformed, uses non-standard
            constants or nests deeper than the interpreter can follow.

    Examples:
        >>> parse('{"a": [1, 2]}').keys()
        ['a']
        >>> parse('{"a": }')
        Traceback (most recent call last):
        ...
        jsontoolbox.engine.parser.ParseFailure: Invalid JSON format
    """
    try:
        raw = json.loads(
            text,
            object_pairs_hook=_object_from_pairs,
            parse_constant=_reject_constant,
        )
        return _to_value(raw)
    except (ValueError, TypeError, RecursionError) as e:
        logger.debug("Rejected JSON input: %s", e)
        raise ParseFailure() from e


def try_parse(text: str | None) -> Value | None:
    """Parse text, returning None for blank or invalid input."""
    if is_blank(text):
        return None
    try:
        return parse(text)
    except ParseFailure:
        return None


def validation_message(text: str | None) -> str | None:
    """Return the error badge text for an input box.

    Blank input is not an error, it is simply "no input yet".

    Returns:
        None when the text is blank or valid JSON, otherwise
        ``"Invalid JSON format"``.
    """
    if is_blank(text):
        return None
    try:
        parse(text)
    except ParseFailure as e:
        return str(e)
    return None
