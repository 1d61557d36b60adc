"""
doctree - register project directories for automatic documentation indexing.

Examples:
    >>> from doctree import add_project
    >>> add_project(".", "my_project", "/home/user/.local/share/doctree/autoindex")
"""

from doctree.catalog import AutoIndexCatalog, read_autoindex, write_autoindex
from doctree.fingerprint import FINGERPRINT_UNAVAILABLE, compute_fingerprint
from doctree.models import AutoIndexedProject
from doctree.register import add_project

__version__ = "0.1.0"
__all__ = [
    "AutoIndexCatalog",
    "AutoIndexedProject",
    "FINGERPRINT_UNAVAILABLE",
    "add_project",
    "compute_fingerprint",
    "read_autoindex",
    "write_autoindex",
]
