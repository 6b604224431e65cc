"""
Catalog loader - discovers and loads chord-type catalogs.

Catalogs can come from:
1. Built-in library (shipped with package)
2. Project catalogs (user's project/catalogs directory)
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import ValidationError

from chuk_mcp_notation.constants import DEFAULT_CATALOG, ErrorMessages, SuccessMessages
from chuk_mcp_notation.core.chord import ChordCatalog
from chuk_mcp_notation.core.errors import CatalogError
from chuk_mcp_notation.models.catalog import ChordCatalogFile

logger = logging.getLogger(__name__)

LIBRARY_PATH = Path(__file__).parent / "library"


class ChordCatalogLoader:
    """
    Discovers and loads chord catalogs.

    Catalogs are loaded from YAML files in the library and project directories.
    Project catalogs override library catalogs with the same file name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the catalog loader.

        Args:
            library_path: Path to built-in catalog library
            project_path: Path to project catalogs directory
        """
        self.library_path = library_path or LIBRARY_PATH
        self.project_path = project_path
        self._cache: dict[str, ChordCatalog] = {}

    def list_catalogs(self) -> list[str]:
        """
        List the names of all available catalogs.

        Names are file stems; a project file shadows a library file.
        """
        names: set[str] = set()
        for directory in (self.library_path, self.project_path):
            if directory and directory.exists():
                names.update(path.stem for path in directory.glob("*.yaml"))
        return sorted(names)

    def find(self, name: str) -> Path | None:
        """Resolve a catalog name to a file, project first."""
        if self.project_path:
            project_file = self.project_path / f"{name}.yaml"
            if project_file.exists():
                return project_file

        library_file = self.library_path / f"{name}.yaml"
        if library_file.exists():
            return library_file

        return None

    def load(self, name: str = DEFAULT_CATALOG) -> ChordCatalog:
        """
        Load a catalog by name.

        Args:
            name: Catalog name (file stem)

        Returns:
            The loaded catalog

        Raises:
            CatalogError: if the catalog is missing or invalid
        """
        if name in self._cache:
            return self._cache[name]

        path = self.find(name)
        if path is None:
            raise CatalogError(ErrorMessages.CATALOG_NOT_FOUND.format(name=name))

        catalog = load_catalog_file(path)
        self._cache[name] = catalog
        logger.debug(SuccessMessages.CATALOG_LOADED.format(name=name, count=len(catalog)))
        return catalog

    def clear_cache(self) -> None:
        """Clear the catalog cache."""
        self._cache.clear()


def load_catalog_file(path: Path) -> ChordCatalog:
    """
    Load and validate a single catalog file.

    Raises:
        CatalogError: if the file cannot be read, parsed or validated
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise CatalogError(f"Cannot read catalog {path}: {e}") from e
    except yaml.YAMLError as e:
        raise CatalogError(f"Invalid YAML in catalog {path}: {e}") from e

    if not isinstance(data, dict):
        raise CatalogError(f"Catalog {path} must be a mapping")

    try:
        return ChordCatalogFile.model_validate(data).to_catalog()
    except ValidationError as e:
        raise CatalogError(f"Invalid catalog {path}: {e}") from e


@lru_cache(maxsize=1)
def load_default_catalog() -> ChordCatalog:
    """The catalog shipped with the package, loaded once."""
    return load_catalog_file(LIBRARY_PATH / f"{DEFAULT_CATALOG}.yaml")
