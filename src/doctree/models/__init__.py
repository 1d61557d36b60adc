"""
doctree data models package.
"""

from doctree.models.project import AutoIndexedProject

__all__ = ["AutoIndexedProject"]
