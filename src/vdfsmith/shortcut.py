"""Shortcut records, app id derivation, and shortcuts.vdf editing helpers."""

import zlib
from dataclasses import dataclass
from pathlib import PurePosixPath, PureWindowsPath

from ._constants import (
    ENTRY_DEFAULTS,
    LONG_ID_SUFFIX,
    RUNGAMEID_URL,
    SHORTCUT_ID_FLAG,
    SHORTCUTS_KEY,
)
from .model import Int32, Text, VdfMap


# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------
def derive_app_id(executable: str, app_name: str) -> int:
    """Return the 32-bit app id the launcher assigns to a new shortcut.

    CRC-32 (ISO-HDLC) over the executable followed by the name, with the
    high bit set to mark it as a shortcut rather than a catalog app.  The id
    does not change if the shortcut is later renamed or repointed.
    """
    crc = zlib.crc32(executable.encode("utf-8"))
    crc = zlib.crc32(app_name.encode("utf-8"), crc)
    return crc | SHORTCUT_ID_FLAG


def steam_long_id(app_id: int) -> int:
    """Return the 64-bit id used in ``steam://rungameid/`` URLs."""
    return (app_id << 32) | LONG_ID_SUFFIX


def rungameid_url(app_id: int) -> str:
    return RUNGAMEID_URL.format(steam_long_id(app_id))


def _parent_dir(executable: str) -> str:
    """Parent directory of *executable*, keeping surrounding quotes.

    Bare program names (``anki``) have no parent and give ``""``, while
    ``./anki`` gives ``.``.  A root path is its own parent.
    """
    quoted = len(executable) >= 2 and executable[0] == executable[-1] == '"'
    path = executable[1:-1] if quoted else executable
    if "/" not in path and "\\" not in path:
        return ""
    pure = PureWindowsPath if "\\" in path else PurePosixPath
    p = pure(path)
    parent = path if p.parent == p else str(p.parent)
    return f'"{parent}"' if quoted else parent


# ---------------------------------------------------------------------------
# Record
# ---------------------------------------------------------------------------
@dataclass(slots=True, frozen=True)
class Shortcut:
    """A user-added, non-catalog launcher entry."""

    app_id: int
    app_name: str
    executable: str
    start_dir: str

    @classmethod
    def new(cls, app_name: str, executable: str) -> "Shortcut":
        """Create a shortcut with the id the launcher itself would generate.

        ``start_dir`` defaults to the executable's parent directory.
        """
        return cls(
            app_id=derive_app_id(executable, app_name),
            app_name=app_name,
            executable=executable,
            start_dir=_parent_dir(executable),
        )

    @property
    def long_id(self) -> int:
        return steam_long_id(self.app_id)

    @property
    def url(self) -> str:
        return rungameid_url(self.app_id)

    def to_entry(self, /, **extra: object) -> VdfMap:
        """Build a shortcuts.vdf entry for this shortcut.

        Fields follow the launcher's own order; *extra* overrides defaults or
        appends new fields (matched case-insensitively).
        """
        entry = VdfMap()
        entry["appid"] = Int32(self.app_id)
        entry["AppName"] = self.app_name
        entry["Exe"] = self.executable
        entry["StartDir"] = self.start_dir
        for key, value in ENTRY_DEFAULTS.items():
            entry[key] = value
        for key, value in extra.items():
            _set_ci(entry, key, value)
        return entry


# ---------------------------------------------------------------------------
# Document helpers
# ---------------------------------------------------------------------------
def _set_ci(vmap: VdfMap, key: str, value: object) -> None:
    """Assign to an existing key matching *key* in any case, else append."""
    wanted = key.lower().encode("utf-8")
    for existing in vmap:
        if existing.lower() == wanted:
            vmap[existing] = value
            return
    vmap[key] = value


def _entry_to_shortcut(entry: VdfMap) -> Shortcut | None:
    app_id = entry.get_ci("appid")
    fields = [entry.get_ci(k) for k in ("AppName", "Exe", "StartDir")]
    if not isinstance(app_id, Int32):
        return None
    if not all(isinstance(f, Text) for f in fields):
        return None
    app_name, executable, start_dir = (f.text() for f in fields)
    return Shortcut(int(app_id), app_name, executable, start_dir)


def shortcuts_from_document(doc: VdfMap) -> list[Shortcut]:
    """Collect shortcuts from a strictly decoded shortcuts.vdf document.

    Entries lacking any of ``appid``/``AppName``/``Exe``/``StartDir`` (or
    holding the wrong kind of value) are skipped.
    """
    shortcuts = doc.get_ci(SHORTCUTS_KEY)
    if not isinstance(shortcuts, VdfMap):
        return []
    result = []
    for entry in shortcuts.values():
        if not isinstance(entry, VdfMap):
            continue
        shortcut = _entry_to_shortcut(entry)
        if shortcut is not None:
            result.append(shortcut)
    return result


def upsert_shortcut(doc: VdfMap, shortcut: Shortcut, /, **extra: object) -> str:
    """Insert *shortcut* into ``doc["shortcuts"]`` or update it in place.

    An existing entry with the same ``appid`` keeps its index and any fields
    not being set; otherwise a new entry is appended under the next decimal
    index.  Returns the index key used.
    """
    shortcuts = doc.get_ci(SHORTCUTS_KEY)
    if shortcuts is None:
        doc[SHORTCUTS_KEY] = VdfMap()
        shortcuts = doc[SHORTCUTS_KEY]
    elif not isinstance(shortcuts, VdfMap):
        raise TypeError(f"{SHORTCUTS_KEY!r} is not a map")

    for index, entry in shortcuts.items():
        if isinstance(entry, VdfMap) and entry.get_ci("appid") == shortcut.app_id:
            _set_ci(entry, "AppName", shortcut.app_name)
            _set_ci(entry, "Exe", shortcut.executable)
            _set_ci(entry, "StartDir", shortcut.start_dir)
            for key, value in extra.items():
                _set_ci(entry, key, value)
            return index.text()

    indices = [int(k) for k in shortcuts if k.isdigit()]
    index = str(max(indices, default=-1) + 1)
    shortcuts[index] = shortcut.to_entry(**extra)
    return index
