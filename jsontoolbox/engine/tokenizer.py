"""
Line-oriented JSON tokenizer for syntax highlighting.

The tokenizer scans formatted JSON one line at a time and splits each line
into classified spans. It is lossless: joining the token texts of a line in
order gives back the line exactly.

Token Kinds:
    - key: a string immediately followed (after optional spaces) by ``:``
    - string: any other string literal
    - number: a run of ``-0-9.eE+`` starting with ``-`` or a digit
    - boolean: ``true`` or ``false``
    - null: ``null``
    - punctuation: any other single character (``{ } [ ] , :`` ...)
    - whitespace: a run of whitespace characters

Lines are independent. Serialized JSON always escapes newlines inside
strings, so no literal can span two lines; a hand-edited string that does is
tokenized as two unterminated strings.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

TOKEN_KINDS = ("key", "string", "number", "boolean", "null", "punctuation", "whitespace")

_WHITESPACE_RUN = re.compile(r"\s+")
_KEY_FOLLOWER = re.compile(r"\s*:")

_NUMBER_START = frozenset("-0123456789")
_NUMBER_CHARS = frozenset("-0123456789.eE+")

# Checked in this order at a position that could start a literal
_KEYWORDS = (
    ("true", "boolean"),
    ("false", "boolean"),
    ("null", "null"),
)


@dataclass(frozen=True)
class Token:
    """A classified span of one line.

    Attributes:
        kind: One of TOKEN_KINDS.
        text: The exact characters of the span.
        line: Zero-based line index.
        column: Zero-based column of the first character.
    """

    kind: str
    text: str
    line: int
    column: int

    @property
    def end(self) -> int:
        """Column just past the last character."""
        return self.column + len(self.text)


def _scan_string(line: str, start: int) -> int:
    """Return the index just past the string literal starting at ``start``.

    A backslash takes the following character with it. An unterminated
    literal runs to the end of the line.
    """
    pos = start + 1
    length = len(line)
    while pos < length and line[pos] != '"':
        if line[pos] == "\\":
            pos += 2
        else:
            pos += 1
    if pos < length:
        # closing quote
        pos += 1
    return min(pos, length)


def tokenize_line(line: str, line_index: int = 0) -> list[Token]:
    """Split a single line into tokens.

    Args:
        line: The line text, without its newline.
        line_index: Index stored in each token's ``line``.

    Returns:
        The tokens in column order. Never raises, whatever the line holds.

    Examples:
        >>> [(t.kind, t.text) for t in tokenize_line('  "a": 1,')]
        [('whitespace', '  '), ('key', '"a"'), ('punctuation', ':'), ('whitespace', ' '), ('number', '1'), ('punctuation', ',')]
    """
    tokens: list[Token] = []
    pos = 0
    length = len(line)

    while pos < length:
        char = line[pos]

        whitespace = _WHITESPACE_RUN.match(line, pos)
        if whitespace:
            end = whitespace.end()
            tokens.append(Token("whitespace", line[pos:end], line_index, pos))
            pos = end
            continue

        if char == '"':
            end = _scan_string(line, pos)
            kind = "key" if _KEY_FOLLOWER.match(line, end) else "string"
            tokens.append(Token(kind, line[pos:end], line_index, pos))
            pos = end
            continue

        if char in _NUMBER_START:
            end = pos
            while end < length and line[end] in _NUMBER_CHARS:
                end += 1
            tokens.append(Token("number", line[pos:end], line_index, pos))
            pos = end
            continue

        keyword = next(
            ((word, kind) for word, kind in _KEYWORDS if line.startswith(word, pos)),
            None,
        )
        if keyword is not None:
            word, kind = keyword
            tokens.append(Token(kind, word, line_index, pos))
            pos += len(word)
            continue

        tokens.append(Token("punctuation", char, line_index, pos))
        pos += 1

    return tokens


def tokenize(formatted_text: str) -> list[Token]:
    """Tokenize a whole document, line by line.

    Lines are split on ``"\\n"`` only. An empty document yields no tokens.
    """
    tokens: list[Token] = []
    for line_index, line in enumerate(formatted_text.split("\n")):
        tokens.extend(tokenize_line(line, line_index))
    return tokens


def tokens_by_line(formatted_text: str) -> list[list[Token]]:
    """Tokenize a document and group the tokens per line (empty lines give ``[]``)."""
    return [
        tokenize_line(line, line_index)
        for line_index, line in enumerate(formatted_text.split("\n"))
    ]
