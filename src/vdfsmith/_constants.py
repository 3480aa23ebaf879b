"""Binary VDF wire constants and shortcut lookup tables."""

# ---------------------------------------------------------------------------
# Tag bytes
# ---------------------------------------------------------------------------
TYPE_MAP = 0x00
TYPE_STR = 0x01
TYPE_INT = 0x02
TYPE_END = 0x08

# ---------------------------------------------------------------------------
# Limits
# ---------------------------------------------------------------------------
# Real shortcuts.vdf files nest three levels deep (root -> shortcuts -> entry
# -> tags).  Anything past this is treated as corrupt input.
MAX_DEPTH = 64

INT32_MAX = 0xFFFFFFFF

# ---------------------------------------------------------------------------
# Shortcut identity
# ---------------------------------------------------------------------------
SHORTCUT_ID_FLAG = 0x80000000
LONG_ID_SUFFIX = 0x02000000
RUNGAMEID_URL = "steam://rungameid/{}"

# ---------------------------------------------------------------------------
# Extractor markers
# ---------------------------------------------------------------------------
# Each marker is <tag byte><key><NUL>.  The tag byte is compared exactly and
# must not reappear among the remaining marker bytes, otherwise the scanner
# can skip over a real match.
MARKER_APPID = b"\x02appid\x00"
MARKER_APP_NAME = b"\x01AppName\x00"
MARKER_EXE = b"\x01Exe\x00"
MARKER_START_DIR = b"\x01StartDir\x00"

SHORTCUT_MARKERS = (MARKER_APPID, MARKER_APP_NAME, MARKER_EXE, MARKER_START_DIR)

# ---------------------------------------------------------------------------
# shortcuts.vdf entry layout, in the order the launcher writes it
# ---------------------------------------------------------------------------
SHORTCUTS_KEY = "shortcuts"

ENTRY_DEFAULTS = {
    "icon": "",
    "ShortcutPath": "",
    "LaunchOptions": "",
    "IsHidden": 0,
    "AllowDesktopConfig": 1,
    "AllowOverlay": 1,
    "OpenVR": 0,
    "Devkit": 0,
    "DevkitGameID": "",
    "DevkitOverrideAppID": 0,
    "LastPlayTime": 0,
    "FlatpakAppID": "",
    "tags": {},
}
