# src/cli/__init__.py
"""Command-line entrypoints (see pathfind_demo)."""
