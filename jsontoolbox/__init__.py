"""
JSON Toolbox.

Structural JSON comparison, JSON formatting with syntax highlighting and
search, and plain text comparison, with a Textual terminal UI.

Usage:
    uv run jsontoolbox --left original.json --right modified.json

Components:
    - jsontoolbox.engine: pure comparison, formatting, tokenizing and search
    - jsontoolbox.tui: the terminal application built on the engine
"""

__version__ = "0.1.0"
