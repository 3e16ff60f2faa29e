"""
JSON Toolbox terminal UI.

A Textual-based terminal UI around the engine package with three views:
structural JSON comparison, JSON formatting with search, and plain text
comparison.

Usage:
    jsontoolbox --left old.json --right new.json
    jsontoolbox --view format --format-file data.json

Components:
    - JsonToolboxApp: Main application class, one mode per view
    - JsonCompareScreen: Side-by-side structural JSON comparison
    - FormatterScreen: Formatter with highlighting, search and statistics
    - TextCompareScreen: Side-by-side positional line comparison
"""
