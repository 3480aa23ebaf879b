"""Exceptions raised by the binary VDF decoder."""


class DecodeError(Exception):
    """Raised when data does not conform to the binary VDF format.

    The ``offset`` attribute is the byte position the problem was detected at.
    """

    def __init__(self, msg: str, offset: int) -> None:
        super().__init__(f"{msg} (at offset {offset})")
        self.offset = offset


class UnexpectedEndOfInput(DecodeError):
    """Raised when the buffer ends inside a key, value or nested map."""


class InvalidMapItemPrefix(DecodeError):
    """Raised when a byte in tag position is not a known tag."""

    def __init__(self, tag: int, offset: int) -> None:
        super().__init__(f"Invalid map item prefix 0x{tag:02X}", offset)
        self.tag = tag


class NestingTooDeep(DecodeError):
    """Raised when nested maps exceed the decoder's depth limit."""

    def __init__(self, max_depth: int, offset: int) -> None:
        super().__init__(f"Maps nested deeper than {max_depth} levels", offset)
        self.max_depth = max_depth
