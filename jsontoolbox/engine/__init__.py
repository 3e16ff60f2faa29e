"""
Algorithmic core of the JSON toolbox.

This package provides the pure functions behind the three views: structural
JSON comparison, JSON formatting with highlighting and search, and plain text
comparison. Nothing here touches the terminal, the clipboard or global state.

Usage:
    from jsontoolbox.engine import compare_json, format_json, tokenize, search

    report = compare_json('{"a": 1}', '{"a": 2, "b": 3}')
    print(report.added, report.modified)   # ('b',) ('a',)

    formatted = format_json('{"b":1,"a":2}', FormatOptions(indent=4, sort_keys=True))
    for token in tokenize(formatted):
        print(token.kind, token.text)

    matches = search("a", formatted, case_sensitive=False)
"""

from jsontoolbox.engine.formatter import (
    DEFAULT_INDENT,
    DEFAULT_SAVE_NAME,
    INDENT_CHOICES,
    FormatOptions,
    format_json,
    format_value,
    json_stats,
    minify_json,
    save_formatted,
)
from jsontoolbox.engine.json_compare import JsonLine, annotate_json_lines, only_differences
from jsontoolbox.engine.line_diff import (
    DiffLine,
    TextCompareOptions,
    TextDiff,
    TextDiffSummary,
    compare_texts,
    diff_lines,
    preprocess_text,
)
from jsontoolbox.engine.normalizer import normalize_keys
from jsontoolbox.engine.parser import (
    INVALID_JSON_MESSAGE,
    ParseFailure,
    is_blank,
    parse,
    try_parse,
    validation_message,
)
from jsontoolbox.engine.search import (
    SearchMatch,
    match_position_label,
    next_index,
    previous_index,
    search,
)
from jsontoolbox.engine.stats import Stats, collect_stats
from jsontoolbox.engine.structural_diff import (
    DIFF_BUCKETS,
    DiffReport,
    compare_json,
    diff,
    summarize_bucket,
)
from jsontoolbox.engine.tokenizer import TOKEN_KINDS, Token, tokenize, tokenize_line, tokens_by_line
from jsontoolbox.engine.values import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    Value,
    from_python,
    to_python,
)

__all__ = [
    # Value model
    "Value",
    "JsonNull",
    "JsonBool",
    "JsonNumber",
    "JsonString",
    "JsonArray",
    "JsonObject",
    "from_python",
    "to_python",
    # Parsing
    "parse",
    "try_parse",
    "is_blank",
    "validation_message",
    "ParseFailure",
    "INVALID_JSON_MESSAGE",
    # Structural diff
    "diff",
    "compare_json",
    "summarize_bucket",
    "DiffReport",
    "DIFF_BUCKETS",
    "annotate_json_lines",
    "only_differences",
    "JsonLine",
    # Formatting
    "format_json",
    "format_value",
    "minify_json",
    "json_stats",
    "save_formatted",
    "normalize_keys",
    "FormatOptions",
    "INDENT_CHOICES",
    "DEFAULT_INDENT",
    "DEFAULT_SAVE_NAME",
    # Statistics
    "collect_stats",
    "Stats",
    # Tokenizer
    "tokenize",
    "tokenize_line",
    "tokens_by_line",
    "Token",
    "TOKEN_KINDS",
    # Search
    "search",
    "next_index",
    "previous_index",
    "match_position_label",
    "SearchMatch",
    # Text comparison
    "diff_lines",
    "compare_texts",
    "preprocess_text",
    "DiffLine",
    "TextDiff",
    "TextDiffSummary",
    "TextCompareOptions",
]
