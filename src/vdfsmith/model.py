"""In-memory tree for binary VDF documents."""

from collections.abc import Iterator, Mapping, MutableMapping

from ._constants import INT32_MAX


class Text(bytes):
    """A NUL-free byte string, as stored for keys and text values.

    ``str`` input is encoded as UTF-8.  Any embedded NUL raises
    ``ValueError`` since the wire format terminates text with NUL.
    """

    def __new__(cls, value: bytes | str = b"") -> "Text":
        if isinstance(value, str):
            value = value.encode("utf-8")
        elif isinstance(value, (bytearray, memoryview)):
            value = bytes(value)
        elif not isinstance(value, bytes):
            raise TypeError(f"Expected bytes or str, got {type(value).__name__}")
        if b"\x00" in value:
            raise ValueError(f"Text may not contain NUL bytes: {bytes(value)!r}")
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"Text({bytes(self)!r})"

    def text(self) -> str:
        """Decode as UTF-8, replacing undecodable bytes."""
        return self.decode("utf-8", errors="replace")


class Int32(int):
    """An unsigned 32-bit integer value."""

    def __new__(cls, value: int = 0) -> "Int32":
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Expected int, got {type(value).__name__}")
        if not 0 <= value <= INT32_MAX:
            raise ValueError(f"Int32 out of range 0..0x{INT32_MAX:08X}: {value}")
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"Int32({int(self)})"


def to_value(value: object) -> "VdfMap | Text | Int32":
    """Coerce a Python value to its VDF counterpart.

    ``bool`` becomes the 0/1 integer flag the launcher stores.
    """
    if isinstance(value, (VdfMap, Text, Int32)):
        return value
    if isinstance(value, (str, bytes, bytearray, memoryview)):
        return Text(value)
    if isinstance(value, bool):
        return Int32(int(value))
    if isinstance(value, int):
        return Int32(value)
    if isinstance(value, Mapping):
        return VdfMap(value)
    raise TypeError(f"Cannot store {type(value).__name__} in a VDF map")


def _to_key(key: object) -> Text:
    if isinstance(key, Text):
        return key
    if isinstance(key, (str, bytes, bytearray, memoryview)):
        return Text(key)
    raise TypeError(f"VDF keys must be bytes or str, got {type(key).__name__}")


class VdfMap(MutableMapping):
    """Ordered map of ``Text`` keys to values.

    Re-assigning an existing key replaces its value in place; the key keeps
    its original position.  Keys and values are coerced on the way in, so
    ``m["AppName"] = "Anki"`` stores ``Text(b"AppName") -> Text(b"Anki")``.
    """

    __slots__ = ("_items",)

    def __init__(self, items=None, **kwargs: object) -> None:
        self._items: dict[Text, VdfMap | Text | Int32] = {}
        if items is not None:
            self.update(items)
        if kwargs:
            self.update(kwargs)

    def __getitem__(self, key: object) -> "VdfMap | Text | Int32":
        return self._items[_to_key(key)]

    def __setitem__(self, key: object, value: object) -> None:
        self._items[_to_key(key)] = to_value(value)

    def __delitem__(self, key: object) -> None:
        del self._items[_to_key(key)]

    def __iter__(self) -> Iterator[Text]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        try:
            return _to_key(key) in self._items
        except (TypeError, ValueError):
            return False

    def __eq__(self, other: object) -> bool:
        if isinstance(other, VdfMap):
            return list(self._items.items()) == list(other._items.items())
        if isinstance(other, Mapping):
            try:
                other = VdfMap(other)
            except (TypeError, ValueError):
                return False
            return self._items == other._items
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self._items.items())
        return f"VdfMap({{{body}}})"

    def get_ci(self, key: bytes | str, default=None):
        """Look up *key* ignoring ASCII letter case; first match wins."""
        wanted = _to_key(key).lower()
        for k, v in self._items.items():
            if k.lower() == wanted:
                return v
        return default

    def to_python(self) -> dict:
        """Return a plain nested ``dict`` with ``str`` keys and text."""
        out = {}
        for k, v in self._items.items():
            if isinstance(v, VdfMap):
                out[k.text()] = v.to_python()
            elif isinstance(v, Text):
                out[k.text()] = v.text()
            else:
                out[k.text()] = int(v)
        return out
