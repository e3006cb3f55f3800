"""
Strict conversion between raw bytes and lowercase hexadecimal text.
"""

from __future__ import annotations

__all__ = ["to_hex", "from_hex", "is_hex"]

import re

from rc4kit.errors import AllocationFailure, MalformedHex

_NON_HEX_PATTERN = re.compile(r"[^0-9a-fA-F]")


def to_hex(data: bytes | bytearray | memoryview) -> str:
    """Render bytes as lowercase hex, two digits per byte, high nibble first.

    Args:
        data: Bytes to render. May be empty.

    Returns:
        A string exactly twice as long as ``data``.

    Raises:
        AllocationFailure: If the hex string cannot be allocated.
    """
    try:
        return bytes(data).hex()
    except MemoryError as e:
        raise AllocationFailure(f"Cannot render {len(data)} bytes as hex") from e


def is_hex(text: str) -> bool:
    """Return True if ``text`` is a well-formed even-length hex string."""
    return len(text) % 2 == 0 and _NON_HEX_PATTERN.search(text) is None


def from_hex(text: str | bytes | bytearray | memoryview) -> bytes:
    """Parse a hex string into bytes.

    Upper- and lower-case digits are both accepted. Unlike
    :meth:`bytes.fromhex`, whitespace is rejected.

    Args:
        text: Hex text, or ASCII bytes holding hex text.

    Returns:
        The decoded bytes, ``len(text) // 2`` long.

    Raises:
        MalformedHex: If the length is odd or a non-hex character is present.
        AllocationFailure: If the output cannot be allocated.
    """
    if not isinstance(text, str):
        try:
            text = bytes(text).decode("ascii")
        except UnicodeDecodeError as e:
            raise MalformedHex(f"Non-ASCII byte at position {e.start}") from None

    m = _NON_HEX_PATTERN.search(text)
    if m:
        raise MalformedHex(
            f"Invalid hex character {m.group()!r} at position {m.start()}"
        )
    if len(text) % 2:
        raise MalformedHex(f"Hex string has odd length {len(text)}")

    try:
        return bytes.fromhex(text)
    except MemoryError as e:
        raise AllocationFailure(f"Cannot allocate {len(text) // 2} bytes") from e
