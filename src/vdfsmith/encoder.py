"""Encode ``VdfMap`` trees as binary VDF -- pure struct packing."""

import struct
from collections.abc import Mapping
from pathlib import Path

from ._constants import TYPE_END, TYPE_INT, TYPE_MAP, TYPE_STR
from .model import Text, VdfMap


def _encode_map(vmap: VdfMap, out: bytearray) -> None:
    for key, value in vmap.items():
        if isinstance(value, VdfMap):
            out.append(TYPE_MAP)
            out += key
            out.append(0)
            _encode_map(value, out)
        elif isinstance(value, Text):
            out.append(TYPE_STR)
            out += key
            out.append(0)
            out += value
            out.append(0)
        else:
            out.append(TYPE_INT)
            out += key
            out.append(0)
            out += struct.pack("<I", value)
    out.append(TYPE_END)


def encode(doc: Mapping) -> bytes:
    """Serialize *doc* to binary VDF bytes.

    Every map, the root included, is closed with ``TYPE_END``.  A plain
    ``dict`` is accepted and coerced through ``VdfMap`` first, which raises
    ``ValueError``/``TypeError`` for values the format cannot hold.
    """
    if not isinstance(doc, VdfMap):
        doc = VdfMap(doc)
    out = bytearray()
    _encode_map(doc, out)
    return bytes(out)


def write_vdf(path: str | Path, doc: Mapping) -> int:
    """Encode *doc* and write it to *path*.

    Returns the number of bytes written.
    """
    data = encode(doc)
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_bytes(data)
    return len(data)
