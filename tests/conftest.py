"""Shared fixtures for vdfsmith tests.

Buffers are assembled byte by byte here rather than with the encoder, so the
codec is always checked against independently written input.
"""

import struct

import pytest


class VdfWriter:
    """Hand-assembles binary VDF and remembers where each field landed.

    ``tags`` holds the offset of every tag byte (end tags included),
    ``ints`` the first byte of every 4-byte integer payload, and
    ``cstrings`` a ``(start, nul_offset)`` pair for every key and text value.
    """

    def __init__(self):
        self.buf = bytearray()
        self.tags: list[int] = []
        self.ints: list[int] = []
        self.cstrings: list[tuple[int, int]] = []

    @property
    def data(self) -> bytes:
        return bytes(self.buf)

    def _tag(self, tag):
        self.tags.append(len(self.buf))
        self.buf.append(tag)

    def _cstr(self, raw):
        start = len(self.buf)
        self.buf += raw + b"\x00"
        self.cstrings.append((start, len(self.buf) - 1))

    def text(self, key, value):
        self._tag(0x01)
        self._cstr(key)
        self._cstr(value)
        return self

    def int(self, key, value):
        self._tag(0x02)
        self._cstr(key)
        self.ints.append(len(self.buf))
        self.buf += struct.pack("<I", value)
        return self

    def open(self, key):
        self._tag(0x00)
        self._cstr(key)
        return self

    def close(self):
        self._tag(0x08)
        return self

    def shortcut(
        self,
        index,
        app_id,
        name,
        exe,
        start_dir,
        keys=(b"appid", b"AppName", b"Exe", b"StartDir"),
        last_play_time=0,
        tags=(),
    ):
        """Write one shortcuts.vdf entry with the launcher's full field set."""
        appid_key, name_key, exe_key, start_key = keys
        self.open(str(index).encode())
        self.int(appid_key, app_id)
        self.text(name_key, name)
        self.text(exe_key, exe)
        self.text(start_key, start_dir)
        self.text(b"icon", b"")
        self.text(b"ShortcutPath", b"")
        self.text(b"LaunchOptions", b"")
        self.int(b"IsHidden", 0)
        self.int(b"AllowDesktopConfig", 1)
        self.int(b"AllowOverlay", 1)
        self.int(b"OpenVR", 0)
        self.int(b"Devkit", 0)
        self.text(b"DevkitGameID", b"")
        self.int(b"DevkitOverrideAppID", 0)
        self.int(b"LastPlayTime", last_play_time)
        self.text(b"FlatpakAppID", b"")
        self.open(b"tags")
        for i, tag in enumerate(tags):
            self.text(str(i).encode(), tag)
        self.close()
        self.close()
        return self


SAMPLE_SHORTCUTS = [
    (2786274309, "Anki", '"anki"', '"./"'),
    (2492174738, "LibreOffice Calc", '"libreoffice"', '"./"'),
    (3703025501, "foo.sh", '"/usr/local/bin/foo.sh"', '"/usr/local/bin/"'),
]


@pytest.fixture
def writer():
    return VdfWriter()


@pytest.fixture
def shortcuts_vdf():
    """A canonical shortcuts.vdf with three shortcuts (the VdfWriter)."""
    w = VdfWriter()
    w.open(b"shortcuts")
    for i, (app_id, name, exe, start_dir) in enumerate(SAMPLE_SHORTCUTS):
        w.shortcut(
            i,
            app_id,
            name.encode(),
            exe.encode(),
            start_dir.encode(),
            last_play_time=1690000000 + i,
            tags=(b"favorite",) if i == 0 else (),
        )
    w.close()
    w.close()
    return w


@pytest.fixture
def shortcuts_vdf_bytes(shortcuts_vdf):
    return shortcuts_vdf.data


@pytest.fixture
def upper_case_vdf_bytes():
    """A shortcuts.vdf written with upper-case key names."""
    w = VdfWriter()
    w.open(b"SHORTCUTS")
    w.shortcut(
        0,
        2931025216,
        b"Second Life",
        b'"/Applications/Second Life Viewer.app"',
        b'"/Applications/"',
        keys=(b"APPID", b"APPNAME", b"EXE", b"STARTDIR"),
    )
    w.close()
    w.close()
    return w.data


@pytest.fixture
def nested_vdf():
    """A small document exercising every value kind and an empty map."""
    w = VdfWriter()
    w.text(b"name", b"root text")
    w.int(b"count", 0xDEADBEEF)
    w.open(b"outer")
    w.open(b"inner")
    w.int(b"zero", 0)
    w.text(b"", b"empty key")
    w.close()
    w.open(b"empty")
    w.close()
    w.text(b"after", b"")
    w.close()
    w.close()
    return w
