"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_notation.catalog import ChordCatalogLoader


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_midi_path(temp_dir: Path) -> Path:
    """Path for a temporary MIDI file."""
    return temp_dir / "input.mid"


@pytest.fixture
def catalog_loader(temp_dir: Path) -> ChordCatalogLoader:
    """Catalog loader with the shipped library and an empty project directory."""
    return ChordCatalogLoader(project_path=temp_dir / "catalogs")
