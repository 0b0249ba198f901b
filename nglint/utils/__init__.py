"""Utility helpers for the linter."""

from .fileio import iter_text_chunks, read_yaml_file

__all__ = [
    "iter_text_chunks",
    "read_yaml_file",
]
