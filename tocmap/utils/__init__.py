"""Utility functions for tocmap package."""

from .format import (
    toc_to_dicts,
    format_toc_markdown,
    format_toc_tree,
    count_items,
    max_depth,
)

__all__ = [
    "toc_to_dicts",
    "format_toc_markdown",
    "format_toc_tree",
    "count_items",
    "max_depth",
]
