"""vdfsmith -- read and write binary VDF (launcher shortcuts.vdf) files."""

__version__ = "0.1.0"

from ._errors import (
    DecodeError,
    InvalidMapItemPrefix,
    NestingTooDeep,
    UnexpectedEndOfInput,
)
from .decoder import decode, format_vdf
from .encoder import encode, write_vdf
from .extractor import extract_shortcuts
from .model import Int32, Text, VdfMap
from .shortcut import (
    Shortcut,
    derive_app_id,
    rungameid_url,
    shortcuts_from_document,
    steam_long_id,
    upsert_shortcut,
)

__all__ = [
    "decode",
    "encode",
    "write_vdf",
    "format_vdf",
    "extract_shortcuts",
    "VdfMap",
    "Text",
    "Int32",
    "Shortcut",
    "derive_app_id",
    "steam_long_id",
    "rungameid_url",
    "shortcuts_from_document",
    "upsert_shortcut",
    "DecodeError",
    "UnexpectedEndOfInput",
    "InvalidMapItemPrefix",
    "NestingTooDeep",
    "__version__",
]
