"""Core search index operations."""

from .manager import SearchIndexManager

__all__ = ['SearchIndexManager']
