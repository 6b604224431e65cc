"""
Chord catalogs - the chord vocabulary as data.

The shipped library holds the default catalog; a project directory can add
catalogs or override library ones by file name.
"""

from chuk_mcp_notation.catalog.loader import (
    ChordCatalogLoader,
    load_catalog_file,
    load_default_catalog,
)

__all__ = [
    "ChordCatalogLoader",
    "load_catalog_file",
    "load_default_catalog",
]
