"""Tolerant shortcut extraction straight from shortcuts.vdf bytes.

This is not a parser.  It scans for four key markers per record and reads
the value behind each, ignoring every other byte, so it keeps working on
files with unknown fields, odd key casing, or damage the strict decoder
rejects.  Key names are matched ignoring ASCII case; the marker's leading
tag byte is matched exactly and must not occur again inside the marker
(see ``SHORTCUT_MARKERS``).
"""

from ._constants import MARKER_APP_NAME, MARKER_APPID, MARKER_EXE, MARKER_START_DIR
from ._errors import DecodeError
from ._util import find_ci, read_cstring, read_u32
from .shortcut import Shortcut


def _read_text_after(data, lowered, marker, off):
    """Return ``(text, next_offset)`` for the value after *marker*, or None."""
    off = find_ci(lowered, marker, off)
    if off < 0:
        return None
    try:
        raw, off = read_cstring(data, off)
    except DecodeError:
        return None
    return raw.decode("utf-8", errors="replace"), off


def extract_shortcuts(data: bytes) -> list[Shortcut]:
    """Return every complete shortcut record found in *data*, in order.

    Never raises: scanning stops at the first missing marker or truncated
    value and the records found so far are returned.  A record cut short
    is dropped, never returned half-filled.
    """
    data = bytes(data)
    lowered = data.lower()
    shortcuts: list[Shortcut] = []
    off = 0

    while True:
        off = find_ci(lowered, MARKER_APPID, off)
        if off < 0:
            return shortcuts
        try:
            app_id, off = read_u32(data, off)
        except DecodeError:
            return shortcuts

        values = []
        for marker in (MARKER_APP_NAME, MARKER_EXE, MARKER_START_DIR):
            found = _read_text_after(data, lowered, marker, off)
            if found is None:
                return shortcuts
            text, off = found
            values.append(text)

        app_name, executable, start_dir = values
        shortcuts.append(Shortcut(app_id, app_name, executable, start_dir))
