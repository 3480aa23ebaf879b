"""Shared type aliases for vdfsmith modules."""

from pathlib import Path

Source = str | Path | bytes | bytearray | memoryview
