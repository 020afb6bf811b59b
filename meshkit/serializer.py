"""Length-prefixed string encoding for binary asset files."""

from __future__ import annotations

import struct
from typing import BinaryIO

_LENGTH = struct.Struct("<I")
_WIDE_ENCODING = "utf-16-le"
_WIDE_UNIT = 2


class SerializationError(ValueError):
    """Raised when a string cannot be written or read."""


def _write_length(stream: BinaryIO, length: int) -> None:
    if length > 0xFFFFFFFF:
        raise SerializationError(f"string too long: {length}")
    stream.write(_LENGTH.pack(length))


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise SerializationError(f"expected {size} bytes, got {len(data)}")
    return data


def _read_length(stream: BinaryIO) -> int:
    (length,) = _LENGTH.unpack(_read_exact(stream, _LENGTH.size))
    return length


def _until_nul(text: str) -> str:
    return text.split("\0", 1)[0]


def write_string(stream: BinaryIO, text: str) -> None:
    """Write a byte-length prefix and the UTF-8 bytes of text."""
    data = text.encode("utf-8")
    _write_length(stream, len(data))
    stream.write(data)


def read_string(stream: BinaryIO) -> str:
    """Read a string written by write_string; text stops at the first NUL."""
    length = _read_length(stream)
    data = _read_exact(stream, length)
    return _until_nul(data.decode("utf-8", errors="replace"))


def write_wide_string(stream: BinaryIO, text: str) -> None:
    """Write a code-unit count prefix and the UTF-16LE units of text."""
    data = text.encode(_WIDE_ENCODING, errors="surrogatepass")
    _write_length(stream, len(data) // _WIDE_UNIT)
    stream.write(data)


def read_wide_string(stream: BinaryIO) -> str:
    """Read a string written by write_wide_string; text stops at the first NUL."""
    length = _read_length(stream)
    data = _read_exact(stream, length * _WIDE_UNIT)
    return _until_nul(data.decode(_WIDE_ENCODING, errors="surrogatepass"))