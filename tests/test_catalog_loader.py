"""
Tests for chord catalog models and the catalog loader.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from chuk_mcp_notation.catalog import ChordCatalogLoader, load_catalog_file
from chuk_mcp_notation.core import CatalogError, ChordFamily, Interval
from chuk_mcp_notation.models import ChordCatalogFile, ChordTypeEntry

POWER_CATALOG = """\
schema: chord-catalog/v1
name: power
description: Power chords only
chord_types:
  - id: power
    label: "5"
    intervals: [P5]
    family: triad
"""


def write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class TestCatalogModels:
    """Tests for the pydantic catalog schema."""

    def test_entry_to_chord_type(self) -> None:
        """Entries convert to core chord types."""
        entry = ChordTypeEntry(id="dom7", label="7", intervals=["M3", "P5", "m7"], family="seventh")
        chord_type = entry.to_chord_type()
        assert chord_type.identifier == "dom7"
        assert chord_type.intervals == (Interval.M3, Interval.P5, Interval.m7)
        assert chord_type.family is ChordFamily.SEVENTH

    def test_family_by_value(self) -> None:
        """Family accepts its numeric value."""
        entry = ChordTypeEntry(id="maj9", intervals=["M3", "P5", "M7", "M9"], family=9)
        assert entry.family is ChordFamily.NINTH

    def test_bad_interval(self) -> None:
        """Unknown interval names are rejected."""
        with pytest.raises(ValidationError):
            ChordTypeEntry(id="odd", intervals=["M3", "X9"], family="triad")

    def test_bad_family(self) -> None:
        """Unknown families are rejected."""
        with pytest.raises(ValidationError):
            ChordTypeEntry(id="odd", intervals=["M3"], family="fifteenth")

    def test_empty_intervals(self) -> None:
        """A chord type needs at least one interval."""
        with pytest.raises(ValidationError):
            ChordTypeEntry(id="odd", intervals=[], family="triad")

    def test_duplicate_ids(self) -> None:
        """Ids are unique within a file."""
        entry = {"id": "major", "intervals": ["M3", "P5"], "family": "triad"}
        with pytest.raises(ValidationError):
            ChordCatalogFile.model_validate({"name": "dup", "chord_types": [entry, entry]})

    def test_schema_version(self) -> None:
        """Only the v1 schema is accepted."""
        entry = {"id": "major", "intervals": ["M3", "P5"], "family": "triad"}
        with pytest.raises(ValidationError):
            ChordCatalogFile.model_validate(
                {"schema": "chord-catalog/v2", "name": "x", "chord_types": [entry]}
            )

        catalog_file = ChordCatalogFile.model_validate({"name": "x", "chord_types": [entry]})
        assert catalog_file.schema_version == "chord-catalog/v1"


class TestChordCatalogLoader:
    """Tests for library/project catalog loading."""

    def test_load_default(self) -> None:
        """The library ships the default catalog."""
        loader = ChordCatalogLoader()
        catalog = loader.load()
        assert catalog.name == "default"
        assert len(catalog) == 55
        assert "default" in loader.list_catalogs()

    def test_cache(self) -> None:
        """Loaded catalogs are cached until cleared."""
        loader = ChordCatalogLoader()
        first = loader.load("default")
        assert loader.load("default") is first
        loader.clear_cache()
        assert loader.load("default") is not first

    def test_project_catalog(self, temp_dir: Path) -> None:
        """Project catalogs are found by name."""
        write(temp_dir / "power.yaml", POWER_CATALOG)
        loader = ChordCatalogLoader(project_path=temp_dir)

        catalog = loader.load("power")
        assert [t.identifier for t in catalog] == ["power"]
        assert loader.list_catalogs() == ["default", "power"]

    def test_project_overrides_library(self, temp_dir: Path) -> None:
        """A project file shadows the library file of the same name."""
        write(temp_dir / "default.yaml", POWER_CATALOG)
        loader = ChordCatalogLoader(project_path=temp_dir)

        assert len(loader.load("default")) == 1
        assert loader.list_catalogs() == ["default"]

    def test_custom_library(self, temp_dir: Path) -> None:
        """The library path is configurable."""
        library = temp_dir / "library"
        write(library / "power.yaml", POWER_CATALOG)
        loader = ChordCatalogLoader(library_path=library)
        assert loader.list_catalogs() == ["power"]
        assert loader.find("default") is None

    def test_missing_catalog(self, temp_dir: Path) -> None:
        """Unknown names raise CatalogError."""
        loader = ChordCatalogLoader(project_path=temp_dir)
        with pytest.raises(CatalogError, match="not found"):
            loader.load("jazz")

    def test_invalid_yaml(self, temp_dir: Path) -> None:
        """YAML syntax errors raise CatalogError."""
        path = write(temp_dir / "broken.yaml", "chord_types: [\n")
        with pytest.raises(CatalogError, match="Invalid YAML"):
            load_catalog_file(path)

    def test_not_a_mapping(self, temp_dir: Path) -> None:
        """A catalog file must be a mapping."""
        path = write(temp_dir / "list.yaml", "- major\n- minor\n")
        with pytest.raises(CatalogError, match="mapping"):
            load_catalog_file(path)

    def test_schema_violation(self, temp_dir: Path) -> None:
        """Validation failures raise CatalogError."""
        path = write(temp_dir / "bad.yaml", POWER_CATALOG.replace("[P5]", "[Q5]"))
        loader = ChordCatalogLoader(project_path=temp_dir)
        with pytest.raises(CatalogError, match="Invalid catalog"):
            loader.load("bad")
        assert path.exists()

    def test_catalog_error_is_notation_error(self) -> None:
        """CatalogError shares the notation error base."""
        from chuk_mcp_notation.core import NotationError

        assert issubclass(CatalogError, NotationError)
