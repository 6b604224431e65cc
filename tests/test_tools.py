"""
Tests for MCP tools.

Tests the MCP tool implementations for spelling, keys and chords,
and MIDI files.
"""

import json
from pathlib import Path

import pytest
from mido import Message, MidiFile, MidiTrack

from chuk_mcp_notation.catalog import ChordCatalogLoader


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def spelling_tools():
    from chuk_mcp_notation.tools.spelling import register_spelling_tools

    return register_spelling_tools(MockMCPServer("test"))


@pytest.fixture
def key_tools(catalog_loader: ChordCatalogLoader):
    from chuk_mcp_notation.tools.keys import register_key_tools

    return register_key_tools(MockMCPServer("test"), catalog_loader)


@pytest.fixture
def midi_tools():
    from chuk_mcp_notation.tools.midi import register_midi_tools

    return register_midi_tools(MockMCPServer("test"))


class TestRegistration:
    """Tests for tool registration."""

    def test_tools_registered_on_server(self) -> None:
        """Every tool is registered with the server and returned."""
        from chuk_mcp_notation.tools import (
            register_key_tools,
            register_midi_tools,
            register_spelling_tools,
        )

        mcp = MockMCPServer("test")
        tools = {}
        tools.update(register_spelling_tools(mcp))
        tools.update(register_key_tools(mcp, ChordCatalogLoader()))
        tools.update(register_midi_tools(mcp))

        assert set(tools) == set(mcp.tools)
        assert set(tools) == {
            "notation_spell_pitch",
            "notation_spell_pitches",
            "notation_shift_note",
            "notation_describe_note",
            "notation_key_notes",
            "notation_key_triads",
            "notation_key_chords",
            "notation_compare_keys",
            "notation_list_scales",
            "notation_list_chord_types",
            "notation_spell_midi_file",
        }


class TestSpellingTools:
    """Tests for spelling tools."""

    @pytest.mark.asyncio
    async def test_spell_pitch(self, spelling_tools) -> None:
        """Spell a pitch in a key."""
        result = await spelling_tools["notation_spell_pitch"](pitch=61, key="Ab_major")
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["note"] == "D♭4"
        assert data["note_class"] == "D♭"
        assert data["degree"] == 4

    @pytest.mark.asyncio
    async def test_spell_chromatic_pitch(self, spelling_tools) -> None:
        """Chromatic pitches have no degree."""
        result = await spelling_tools["notation_spell_pitch"](pitch=61, key="C_major")
        data = json.loads(result)
        assert data["note"] == "C♯4"
        assert data["degree"] is None

    @pytest.mark.asyncio
    async def test_spell_pitch_out_of_range(self, spelling_tools) -> None:
        """Pitches outside 0-127 are errors."""
        result = await spelling_tools["notation_spell_pitch"](pitch=128)
        data = json.loads(result)
        assert data["status"] == "error"
        assert "128" in data["message"]

    @pytest.mark.asyncio
    async def test_spell_pitch_bad_key(self, spelling_tools) -> None:
        """Unparsable keys are errors."""
        result = await spelling_tools["notation_spell_pitch"](pitch=60, key="H_major")
        assert json.loads(result)["status"] == "error"

    @pytest.mark.asyncio
    async def test_spell_pitches(self, spelling_tools) -> None:
        """Spell a sequence of pitches."""
        result = await spelling_tools["notation_spell_pitches"](
            pitches=[60, 63, 67, 70], key="C_minor"
        )
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["count"] == 4
        assert [n["note"] for n in data["notes"]] == ["C4", "E♭4", "G4", "B♭4"]

    @pytest.mark.asyncio
    async def test_spell_pitches_out_of_range(self, spelling_tools) -> None:
        """One bad pitch fails the call."""
        result = await spelling_tools["notation_spell_pitches"](pitches=[60, -1])
        assert json.loads(result)["status"] == "error"

    @pytest.mark.asyncio
    async def test_shift_note(self, spelling_tools) -> None:
        """Shift by interval keeps letter arithmetic."""
        result = await spelling_tools["notation_shift_note"](note="C#4", interval="M7")
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["note"] == "B♯5"
        assert data["pitch"] == 72

        result = await spelling_tools["notation_shift_note"](
            note="C4", interval="m3", direction="down"
        )
        assert json.loads(result)["note"] == "A3"

    @pytest.mark.asyncio
    async def test_shift_note_errors(self, spelling_tools) -> None:
        """Bad direction and unspellable shifts are errors."""
        result = await spelling_tools["notation_shift_note"](
            note="C4", interval="M3", direction="sideways"
        )
        assert json.loads(result)["status"] == "error"

        result = await spelling_tools["notation_shift_note"](note="Gx4", interval="A4")
        assert json.loads(result)["status"] == "error"

    @pytest.mark.asyncio
    async def test_describe_note(self, spelling_tools) -> None:
        """Describe a spelled note."""
        result = await spelling_tools["notation_describe_note"](note="Cb4")
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["letter"] == "C"
        assert data["accidental"] == -1
        assert data["pitch"] == 71
        assert data["pitch_class"] == 11
        assert data["index"] == 176


class TestKeyTools:
    """Tests for key and chord tools."""

    @pytest.mark.asyncio
    async def test_key_notes(self, key_tools) -> None:
        """List a key's notes."""
        result = await key_tools["notation_key_notes"](key="Cb_major")
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["note_classes"] == ["C♭", "D♭", "E♭", "F♭", "G♭", "A♭", "B♭"]
        assert data["preferred_accidental"] == "flat"

    @pytest.mark.asyncio
    async def test_key_notes_bias_override(self, key_tools) -> None:
        """Bias can be overridden."""
        result = await key_tools["notation_key_notes"](key="C_major", bias="flat")
        assert json.loads(result)["preferred_accidental"] == "flat"

        result = await key_tools["notation_key_notes"](key="C_major", bias="neither")
        assert json.loads(result)["status"] == "error"

    @pytest.mark.asyncio
    async def test_key_triads(self, key_tools) -> None:
        """Primary triads of a key."""
        result = await key_tools["notation_key_triads"](key="C_harmonic_minor")
        data = json.loads(result)
        assert data["status"] == "success"
        assert [t["name"] for t in data["triads"]] == ["Cm", "D°", "E♭⁺", "Fm", "G", "A♭", "B°"]
        assert data["triads"][2]["notes"] == ["E♭", "G", "B"]

    @pytest.mark.asyncio
    async def test_key_chords(self, key_tools) -> None:
        """In-key chords, capped by family."""
        result = await key_tools["notation_key_chords"](key="G_major")
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["count"] == 60
        assert data["max_family"] == "ninth"

        result = await key_tools["notation_key_chords"](key="G_major", max_family="triad")
        assert json.loads(result)["count"] == 17

    @pytest.mark.asyncio
    async def test_key_chords_bad_family(self, key_tools) -> None:
        """Unknown families are errors."""
        result = await key_tools["notation_key_chords"](key="G_major", max_family="huge")
        assert json.loads(result)["status"] == "error"

    @pytest.mark.asyncio
    async def test_key_chords_missing_catalog(self, key_tools) -> None:
        """Unknown catalogs are errors."""
        result = await key_tools["notation_key_chords"](key="G_major", catalog="jazz")
        data = json.loads(result)
        assert data["status"] == "error"
        assert "jazz" in data["message"]

    @pytest.mark.asyncio
    async def test_compare_keys(self, key_tools) -> None:
        """Compare C major and C minor."""
        result = await key_tools["notation_compare_keys"](key_a="C_major", key_b="C_minor")
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["common"] == ["C", "D", "F", "G"]
        assert data["symmetric_difference"] == ["E♭", "E", "A♭", "A", "B♭", "B"]
        assert data["only_a"] == ["E", "A", "B"]
        assert data["only_b"] == ["E♭", "A♭", "B♭"]

    @pytest.mark.asyncio
    async def test_list_scales(self, key_tools) -> None:
        """List named scales."""
        data = json.loads(await key_tools["notation_list_scales"]())
        assert data["status"] == "success"
        names = [s["name"] for s in data["scales"]]
        assert "major" in names
        assert "harmonic_minor" in names
        major = next(s for s in data["scales"] if s["name"] == "major")
        assert major["intervals"] == ["P1", "M2", "M3", "P4", "P5", "M6", "M7"]

    @pytest.mark.asyncio
    async def test_list_chord_types(self, key_tools) -> None:
        """List chord types, optionally by family."""
        data = json.loads(await key_tools["notation_list_chord_types"]())
        assert data["status"] == "success"
        assert data["count"] == 55
        assert "default" in data["available_catalogs"]

        data = json.loads(await key_tools["notation_list_chord_types"](family="sixth"))
        assert [t["id"] for t in data["chord_types"]] == [
            "maj6",
            "min6",
            "sus2_add13",
            "sus4_add13",
        ]

    @pytest.mark.asyncio
    async def test_project_catalog(self, key_tools, catalog_loader: ChordCatalogLoader) -> None:
        """Project catalogs are available to key tools."""
        catalog_loader.project_path.mkdir(parents=True)
        (catalog_loader.project_path / "power.yaml").write_text(
            "schema: chord-catalog/v1\n"
            "name: power\n"
            "chord_types:\n"
            "  - id: power\n"
            '    label: "5"\n'
            "    intervals: [P5]\n"
            "    family: triad\n",
            encoding="utf-8",
        )
        result = await key_tools["notation_key_chords"](key="C_major", catalog="power")
        data = json.loads(result)
        assert [c["name"] for c in data["chords"]] == ["C5", "D5", "E5", "F5", "G5", "A5"]


class TestMidiTools:
    """Tests for MIDI tools."""

    @pytest.mark.asyncio
    async def test_spell_midi_file(self, midi_tools, temp_midi_path: Path) -> None:
        """Spell a MIDI file in a key."""
        mid = MidiFile()
        track = MidiTrack()
        track.append(Message("note_on", note=61, velocity=90, time=0))
        track.append(Message("note_off", note=61, velocity=0, time=480))
        track.append(Message("note_on", note=38, velocity=90, channel=9, time=0))
        track.append(Message("note_off", note=38, velocity=0, channel=9, time=240))
        mid.tracks.append(track)
        mid.save(str(temp_midi_path))

        result = await midi_tools["notation_spell_midi_file"](
            path=str(temp_midi_path), key="Db_major"
        )
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["count"] == 1
        assert data["notes"][0]["note"] == "D♭4"

        result = await midi_tools["notation_spell_midi_file"](
            path=str(temp_midi_path), key="Db_major", include_drums=True
        )
        assert json.loads(result)["count"] == 2

    @pytest.mark.asyncio
    async def test_missing_file(self, midi_tools, temp_dir: Path) -> None:
        """Missing files are errors."""
        result = await midi_tools["notation_spell_midi_file"](path=str(temp_dir / "none.mid"))
        data = json.loads(result)
        assert data["status"] == "error"
        assert "not found" in data["message"]
