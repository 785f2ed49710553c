"""Core document operations."""

from .manager import DocumentManager, run_command_cursor

__all__ = ['DocumentManager', 'run_command_cursor']
