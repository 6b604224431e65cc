"""
Constants for the notation system.

No magic strings - use constants and Literal types for constrained values.
"""

from typing import Literal

# MIDI pitch range
MIDI_MIN = 0
MIDI_MAX = 127

# GM drum channel (0-indexed, so 9 = channel 10); drums have no spelling
DRUM_CHANNEL = 9

# Schema versions - frozen for v1
CATALOG_SCHEMA_VERSION = "chord-catalog/v1"
SchemaVersion = Literal["chord-catalog/v1"]

# Name of the catalog shipped with the package
DEFAULT_CATALOG = "default"

# Direction of an interval shift
ShiftDirection = Literal["up", "down"]


class ErrorMessages:
    """Standardized error messages."""

    INVALID_PITCH = "Invalid pitch: {pitch}. Must be between 0 and 127."
    INVALID_DIRECTION = "Invalid direction: '{direction}'. Expected 'up' or 'down'."
    CATALOG_NOT_FOUND = "Chord catalog '{name}' not found."
    MIDI_FILE_NOT_FOUND = "MIDI file not found: {path}"


class SuccessMessages:
    """Standardized success messages."""

    CATALOG_LOADED = "Loaded chord catalog '{name}' ({count} chord types)."
    MIDI_SPELLED = "Spelled {count} notes from {path} in {key}."
