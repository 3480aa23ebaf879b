"""Decode binary VDF buffers into ``VdfMap`` trees."""

from pathlib import Path

from ._constants import MAX_DEPTH, TYPE_END, TYPE_INT, TYPE_MAP, TYPE_STR
from ._errors import InvalidMapItemPrefix, NestingTooDeep, UnexpectedEndOfInput
from ._types import Source
from ._util import read_cstring, read_u32
from .model import Int32, Text, VdfMap


# ---------------------------------------------------------------------------
# Recursive descent
# ---------------------------------------------------------------------------
def _decode_map(data, off, depth, max_depth):
    """Decode map entries starting at *off*; return ``(VdfMap, next_offset)``.

    Depth 0 is the document root, which may run to the end of the buffer
    without a closing tag.  Nested maps must be closed by ``TYPE_END``.
    """
    result = VdfMap()
    end = len(data)

    while off < end:
        tag = data[off]
        tag_off = off
        off += 1

        if tag == TYPE_END:
            return result, off

        if tag == TYPE_MAP:
            raw_key, off = read_cstring(data, off)
            if depth + 1 > max_depth:
                raise NestingTooDeep(max_depth, tag_off)
            value, off = _decode_map(data, off, depth + 1, max_depth)
        elif tag == TYPE_STR:
            raw_key, off = read_cstring(data, off)
            raw_value, off = read_cstring(data, off)
            value = Text(raw_value)
        elif tag == TYPE_INT:
            raw_key, off = read_cstring(data, off)
            raw_int, off = read_u32(data, off)
            value = Int32(raw_int)
        else:
            raise InvalidMapItemPrefix(tag, tag_off)

        result[Text(raw_key)] = value

    if depth:
        raise UnexpectedEndOfInput("Map not closed before end of data", end)
    return result, off


def decode(source: Source, *, max_depth: int = MAX_DEPTH) -> VdfMap:
    """Decode a binary VDF document.

    *source* is raw bytes or a path to read.  Entries keep their on-disk
    order.  Raises ``UnexpectedEndOfInput`` for truncated data,
    ``InvalidMapItemPrefix`` for an unknown tag byte and ``NestingTooDeep``
    when maps nest more than *max_depth* levels below the root.
    """
    if isinstance(source, (str, Path)):
        data = Path(source).read_bytes()
    else:
        data = bytes(source)

    doc, _ = _decode_map(data, 0, 0, max_depth)
    return doc


# ---------------------------------------------------------------------------
# Human-readable formatter
# ---------------------------------------------------------------------------
def _format_map(vmap: VdfMap, indent: str, lines: list[str]) -> None:
    for key, value in vmap.items():
        name = key.text()
        if isinstance(value, VdfMap):
            lines.append(f'{indent}"{name}"')
            lines.append(f"{indent}{{")
            _format_map(value, indent + "    ", lines)
            lines.append(f"{indent}}}")
        elif isinstance(value, Text):
            lines.append(f'{indent}"{name}"  "{value.text()}"')
        else:
            lines.append(f'{indent}"{name}"  {int(value)} (0x{int(value):08X})')


def format_vdf(doc: VdfMap) -> str:
    """Return an indented, text-VDF-like rendering of *doc*."""
    lines: list[str] = []
    _format_map(doc, "", lines)
    return "\n".join(lines)
