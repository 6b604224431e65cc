#!/usr/bin/env python3
"""
Async Notation MCP Server using chuk-mcp-server

This server provides MCP tools for spelling pitches the way a musician
writes them: C♯ in A major, D♭ in A♭ major, E♯ in C♯ major.

The server provides tools for:
- Spelling MIDI pitches in a key
- Shifting notes by intervals with correct letter names
- Listing a key's notes, primary triads and in-key chords
- Comparing keys by exact spelling
- Spelling whole MIDI files
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_notation.catalog import ChordCatalogLoader
from chuk_mcp_notation.tools import (
    register_key_tools,
    register_midi_tools,
    register_spelling_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-notation")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
CATALOGS_DIR = BASE_PATH / "catalogs"
LIBRARY_PATH = Path(__file__).parent / "catalog" / "library"

# Create loaders
catalog_loader = ChordCatalogLoader(
    library_path=LIBRARY_PATH,
    project_path=CATALOGS_DIR,
)

# Register all tools
spelling_tools = register_spelling_tools(mcp)
key_tools = register_key_tools(mcp, catalog_loader)
midi_tools = register_midi_tools(mcp)

# Export tool functions for direct access
notation_spell_pitch = spelling_tools["notation_spell_pitch"]
notation_spell_pitches = spelling_tools["notation_spell_pitches"]
notation_shift_note = spelling_tools["notation_shift_note"]
notation_describe_note = spelling_tools["notation_describe_note"]

notation_key_notes = key_tools["notation_key_notes"]
notation_key_triads = key_tools["notation_key_triads"]
notation_key_chords = key_tools["notation_key_chords"]
notation_compare_keys = key_tools["notation_compare_keys"]
notation_list_scales = key_tools["notation_list_scales"]
notation_list_chord_types = key_tools["notation_list_chord_types"]

notation_spell_midi_file = midi_tools["notation_spell_midi_file"]

logger.info("CHUK Notation MCP Server initialized")
logger.info(f"  Library path: {LIBRARY_PATH}")
logger.info(f"  Catalogs dir: {CATALOGS_DIR}")
