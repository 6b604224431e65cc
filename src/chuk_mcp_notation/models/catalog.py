"""
Catalog models - the on-disk schema of a chord-type catalog.

A catalog file is plain data: an ordered list of chord types, each with an
identifier, a printed label, interval names and a family. These models
validate the YAML and convert it into core ChordType values.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_notation.constants import CATALOG_SCHEMA_VERSION, SchemaVersion
from chuk_mcp_notation.core.chord import ChordCatalog, ChordFamily, ChordType
from chuk_mcp_notation.core.interval import Interval


class ChordTypeEntry(BaseModel):
    """One chord type as written in a catalog file."""

    id: str = Field(..., min_length=1, description="Stable identifier, e.g. 'dom7'")
    label: str = Field("", description="Printed suffix after the root, e.g. '7' or 'm'")
    intervals: list[str] = Field(
        ...,
        min_length=1,
        description="Interval names from the root, e.g. ['M3', 'P5', 'm7']",
    )
    family: ChordFamily = Field(..., description="Highest extension (triad .. thirteenth)")
    description: str = Field("", description="Human-readable name")

    model_config = {"frozen": True}

    @field_validator("intervals")
    @classmethod
    def validate_intervals(cls, v: list[str]) -> list[str]:
        """Every interval name must parse."""
        for name in v:
            Interval.parse(name)
        return v

    @field_validator("family", mode="before")
    @classmethod
    def parse_family(cls, v: Any) -> Any:
        """Accept family names ('ninth') as well as values (9)."""
        if isinstance(v, str):
            return ChordFamily.parse(v)
        return v

    def to_chord_type(self) -> ChordType:
        return ChordType(
            identifier=self.id,
            label=self.label,
            intervals=tuple(Interval.parse(name) for name in self.intervals),
            family=self.family,
            description=self.description,
        )


class ChordCatalogFile(BaseModel):
    """
    A complete catalog file.

    Entry order is preserved: it is the order chords are listed in for a key.
    """

    schema_version: SchemaVersion = Field(CATALOG_SCHEMA_VERSION, alias="schema")
    name: str = Field(..., description="Catalog name")
    description: str = Field("", description="Catalog description")
    chord_types: list[ChordTypeEntry] = Field(..., min_length=1)

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("chord_types")
    @classmethod
    def validate_unique_ids(cls, v: list[ChordTypeEntry]) -> list[ChordTypeEntry]:
        seen: set[str] = set()
        for entry in v:
            if entry.id in seen:
                raise ValueError(f"Duplicate chord type id: {entry.id}")
            seen.add(entry.id)
        return v

    def to_catalog(self) -> ChordCatalog:
        return ChordCatalog(
            chord_types=tuple(entry.to_chord_type() for entry in self.chord_types),
            name=self.name,
            version=self.schema_version,
        )
