"""
Key tools - MCP tools for keys, scales and chords.

Tools for listing a key's notes, its primary triads and in-key chords,
comparing two keys and browsing scales and chord catalogs.
"""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from chuk_mcp_notation.catalog import ChordCatalogLoader
from chuk_mcp_notation.constants import DEFAULT_CATALOG
from chuk_mcp_notation.core import (
    AccidentalBias,
    Chord,
    ChordFamily,
    Key,
    Note,
    NoteSet,
)
from chuk_mcp_notation.core.note import DEFAULT_OCTAVE
from chuk_mcp_notation.core.scale import SCALES

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _chord_dict(chord: Chord) -> dict[str, Any]:
    return {
        "name": str(chord),
        "root": str(chord.root),
        "type": chord.chord_type.identifier,
        "notes": [str(nc) for nc in chord.note_classes],
    }


def _class_set(key: Key) -> NoteSet:
    """The key's spellings, all placed in one octave for comparison."""
    return NoteSet(Note(nc, DEFAULT_OCTAVE) for nc in key.note_classes)


def _names(notes: NoteSet) -> list[str]:
    return [str(note.note_class) for note in notes]


def register_key_tools(mcp: ChukMCPServer, catalog_loader: ChordCatalogLoader) -> dict[str, Any]:
    """
    Register key and chord tools with the MCP server.

    Args:
        mcp: The MCP server instance
        catalog_loader: The chord catalog loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def notation_key_notes(key: str, bias: str | None = None) -> str:
        """
        List the spelled notes of a key.

        Args:
            key: Key like 'C_major', 'C#_major', 'Db_phrygian'
            bias: Optional accidental bias override ('sharp' or 'flat')

        Returns:
            JSON string with the scale notes and the key's accidental bias

        Example:
            notation_key_notes(key="Cb_major")
        """
        try:
            parsed_key = Key.parse(key)
            if bias is not None:
                parsed_key = replace(parsed_key, bias=AccidentalBias(bias))

            return json.dumps(
                {
                    "status": "success",
                    "key": str(parsed_key),
                    "notes": [str(note) for note in parsed_key.notes],
                    "note_classes": [str(note.note_class) for note in parsed_key.notes],
                    "preferred_accidental": parsed_key.preferred_accidental.value,
                }
            )
        except Exception as e:
            logger.exception("Failed to list key notes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["notation_key_notes"] = notation_key_notes

    @mcp.tool  # type: ignore[arg-type]
    async def notation_key_triads(key: str, catalog: str = DEFAULT_CATALOG) -> str:
        """
        Get the triad built on each degree of a key.

        Args:
            key: Key like 'G_major' or 'C_harmonic_minor'
            catalog: Chord catalog name

        Returns:
            JSON string with one triad per degree

        Example:
            notation_key_triads(key="C_harmonic_minor")
        """
        try:
            parsed_key = Key.parse(key)
            triads = parsed_key.get_primary_triads(catalog_loader.load(catalog))

            return json.dumps(
                {
                    "status": "success",
                    "key": str(parsed_key),
                    "triads": [_chord_dict(chord) for chord in triads],
                    "count": len(triads),
                }
            )
        except Exception as e:
            logger.exception("Failed to build key triads")
            return json.dumps({"status": "error", "message": str(e)})

    tools["notation_key_triads"] = notation_key_triads

    @mcp.tool  # type: ignore[arg-type]
    async def notation_key_chords(
        key: str,
        max_family: str = "ninth",
        catalog: str = DEFAULT_CATALOG,
    ) -> str:
        """
        List every catalog chord whose notes all lie in a key.

        Chords are grouped by scale-degree root, in catalog order.

        Args:
            key: Key like 'G_major'
            max_family: Largest chord family to include
                (triad, sixth, seventh, ninth, eleventh, thirteenth)
            catalog: Chord catalog name

        Returns:
            JSON string with the in-key chords

        Example:
            notation_key_chords(key="G_major", max_family="seventh")
        """
        try:
            parsed_key = Key.parse(key)
            family = ChordFamily.parse(max_family)
            chords = parsed_key.get_chords(catalog_loader.load(catalog), max_family=family)

            return json.dumps(
                {
                    "status": "success",
                    "key": str(parsed_key),
                    "max_family": family.name.lower(),
                    "chords": [_chord_dict(chord) for chord in chords],
                    "count": len(chords),
                }
            )
        except Exception as e:
            logger.exception("Failed to list key chords")
            return json.dumps({"status": "error", "message": str(e)})

    tools["notation_key_chords"] = notation_key_chords

    @mcp.tool  # type: ignore[arg-type]
    async def notation_compare_keys(key_a: str, key_b: str) -> str:
        """
        Compare the spellings of two keys.

        Spellings are compared exactly: E♭ and D♯ are different notes.

        Args:
            key_a: First key, e.g. 'C_major'
            key_b: Second key, e.g. 'C_minor'

        Returns:
            JSON string with shared, combined and differing spellings

        Example:
            notation_compare_keys(key_a="C_major", key_b="C_minor")
        """
        try:
            first = Key.parse(key_a)
            second = Key.parse(key_b)
            a = _class_set(first)
            b = _class_set(second)

            return json.dumps(
                {
                    "status": "success",
                    "key_a": str(first),
                    "key_b": str(second),
                    "common": _names(a & b),
                    "union": _names(a | b),
                    "only_a": _names(a - b),
                    "only_b": _names(b - a),
                    "symmetric_difference": _names(a ^ b),
                }
            )
        except Exception as e:
            logger.exception("Failed to compare keys")
            return json.dumps({"status": "error", "message": str(e)})

    tools["notation_compare_keys"] = notation_compare_keys

    @mcp.tool  # type: ignore[arg-type]
    async def notation_list_scales() -> str:
        """
        List the named scales a key can use.

        Returns:
            JSON string with scale names and their intervals

        Example:
            notation_list_scales()
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "scales": [
                        {
                            "name": name,
                            "intervals": [str(interval) for interval in scale.intervals],
                        }
                        for name, scale in SCALES.items()
                    ],
                    "count": len(SCALES),
                }
            )
        except Exception as e:
            logger.exception("Failed to list scales")
            return json.dumps({"status": "error", "message": str(e)})

    tools["notation_list_scales"] = notation_list_scales

    @mcp.tool  # type: ignore[arg-type]
    async def notation_list_chord_types(
        catalog: str = DEFAULT_CATALOG,
        family: str | None = None,
    ) -> str:
        """
        List the chord types in a catalog.

        Args:
            catalog: Chord catalog name
            family: Optional family filter (triad, sixth, seventh, ...)

        Returns:
            JSON string with chord type identifiers, labels and intervals

        Example:
            notation_list_chord_types(family="seventh")
        """
        try:
            chord_catalog = catalog_loader.load(catalog)
            wanted = ChordFamily.parse(family) if family else None
            chord_types = [t for t in chord_catalog if wanted is None or t.family == wanted]

            return json.dumps(
                {
                    "status": "success",
                    "catalog": chord_catalog.name,
                    "available_catalogs": catalog_loader.list_catalogs(),
                    "chord_types": [
                        {
                            "id": t.identifier,
                            "label": t.label,
                            "intervals": [str(i) for i in t.intervals],
                            "family": t.family.name.lower(),
                            "description": t.description,
                        }
                        for t in chord_types
                    ],
                    "count": len(chord_types),
                }
            )
        except Exception as e:
            logger.exception("Failed to list chord types")
            return json.dumps({"status": "error", "message": str(e)})

    tools["notation_list_chord_types"] = notation_list_chord_types

    return tools
