"""Tests for vdfsmith.encoder."""

import pytest

from vdfsmith.decoder import decode
from vdfsmith.encoder import encode, write_vdf
from vdfsmith.model import Int32, VdfMap


class TestEncodeLayout:
    """Verify the exact bytes produced for each value kind."""

    def test_empty_document(self):
        assert encode(VdfMap()) == b"\x08"

    def test_text_entry(self):
        assert encode(VdfMap({"k": "v"})) == b"\x01k\x00v\x00\x08"

    def test_int_entry_little_endian(self):
        assert encode(VdfMap({"n": 0x04030201})) == b"\x02n\x00\x01\x02\x03\x04\x08"

    def test_nested_map_closed(self):
        assert encode(VdfMap({"m": {}})) == b"\x00m\x00\x08\x08"

    def test_nested_entries(self):
        doc = VdfMap({"m": {"a": 1, "b": "x"}})
        assert encode(doc) == (
            b"\x00m\x00" b"\x02a\x00\x01\x00\x00\x00" b"\x01b\x00x\x00" b"\x08" b"\x08"
        )

    def test_empty_key_and_value(self):
        assert encode(VdfMap({"": ""})) == b"\x01\x00\x00\x08"

    def test_int32_bounds(self):
        data = encode(VdfMap({"n": Int32(0xFFFFFFFF)}))
        assert data == b"\x02n\x00\xff\xff\xff\xff\x08"

    def test_follows_insertion_order(self):
        m = VdfMap()
        m["z"] = 1
        m["a"] = 2
        assert encode(m).index(b"z") < encode(m).index(b"a")

    def test_utf8_text(self):
        assert encode(VdfMap({"k": "é"})) == b"\x01k\x00\xc3\xa9\x00\x08"


class TestEncodePlainMappings:
    def test_dict_accepted(self):
        assert encode({"k": "v"}) == encode(VdfMap({"k": "v"}))

    def test_nul_rejected_before_encoding(self):
        with pytest.raises(ValueError):
            encode({"k": "v\x00"})

    def test_bad_type_rejected(self):
        with pytest.raises(TypeError):
            encode({"k": 1.0})


class TestWriteVdf:
    def test_writes_and_returns_size(self, tmp_path):
        p = tmp_path / "sub" / "shortcuts.vdf"
        doc = VdfMap({"shortcuts": {}})
        size = write_vdf(p, doc)
        assert p.read_bytes() == encode(doc)
        assert size == len(encode(doc))

    def test_readable_by_decoder(self, tmp_path):
        p = tmp_path / "out.vdf"
        doc = VdfMap({"a": {"b": 3}})
        write_vdf(str(p), doc)
        assert decode(p) == doc
