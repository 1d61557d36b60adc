"""Utility modules for doctree."""

from doctree.utils.file import atomic_write_json, datasync

__all__ = [
    "atomic_write_json",
    "datasync",
]
