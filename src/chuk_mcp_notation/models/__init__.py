"""
Pydantic models for notation data files.

This module provides:
- ChordCatalogFile: Schema of a chord-type catalog file
- ChordTypeEntry: One chord type within a catalog file
"""

from chuk_mcp_notation.models.catalog import ChordCatalogFile, ChordTypeEntry

__all__ = [
    "ChordCatalogFile",
    "ChordTypeEntry",
]
