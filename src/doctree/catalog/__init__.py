"""
doctree Catalog module

Provides reading and writing of the autoindex catalog of registered projects.
"""

from .autoindex import AutoIndexCatalog, read_autoindex, write_autoindex

__all__ = [
    "AutoIndexCatalog",
    "read_autoindex",
    "write_autoindex",
]
