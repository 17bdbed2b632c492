"""Data models for tocmap package."""

from .toc import HeadingNode, TOCItem

__all__ = ["HeadingNode", "TOCItem"]
