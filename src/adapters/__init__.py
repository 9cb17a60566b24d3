"""Adapters package for command-line and UI entry points."""

__all__: list[str] = []
