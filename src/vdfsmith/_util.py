"""Byte-level readers shared by the decoder and the shortcut extractor."""

import struct

from ._errors import UnexpectedEndOfInput


def read_cstring(data: bytes, off: int) -> tuple[bytes, int]:
    """Read the NUL-terminated byte run at *off*.

    Returns ``(value, next_offset)`` where *value* excludes the terminator and
    *next_offset* points just past it.
    """
    end = data.find(b"\x00", off)
    if end < 0:
        raise UnexpectedEndOfInput("Unterminated string", len(data))
    return bytes(data[off:end]), end + 1


def read_u32(data: bytes, off: int) -> tuple[int, int]:
    """Read a little-endian uint32 at *off*, returning ``(value, off + 4)``."""
    if len(data) - off < 4:
        raise UnexpectedEndOfInput("Truncated 32-bit integer", len(data))
    return struct.unpack_from("<I", data, off)[0], off + 4


def find_ci(haystack_lower: bytes, needle: bytes, start: int = 0) -> int:
    """Find *needle* in an already lower-cased haystack, ignoring ASCII case.

    Returns the offset just past the match, or -1 if there is none.
    ``bytes.lower`` only folds ASCII letters, so tag and NUL bytes in the
    needle still match exactly.
    """
    pos = haystack_lower.find(needle.lower(), start)
    if pos < 0:
        return -1
    return pos + len(needle)
