"""
Value-returning entry points.

Every function returns a new object owned by the caller; inputs are never
modified.
"""

from __future__ import annotations

__all__ = [
    "encrypt_or_decrypt",
    "encrypt_to_hex",
    "decrypt_from_hex",
    "decrypt_text_from_hex",
    "to_hex",
    "from_hex",
]

import logging

from rc4kit.errors import AllocationFailure
from rc4kit.libs.crypto.rc4 import ksa, prga
from rc4kit.libs.encoding.hexcodec import from_hex, to_hex

logger = logging.getLogger(__name__)

TextOrBytes = str | bytes | bytearray | memoryview


def _as_bytes(value: TextOrBytes, encoding: str) -> bytes | bytearray | memoryview:
    if isinstance(value, str):
        return value.encode(encoding)
    return value


def encrypt_or_decrypt(
    data: TextOrBytes,
    key: TextOrBytes,
    *,
    encoding: str = "utf-8",
) -> bytes:
    """Apply RC4 to ``data`` under ``key``.

    RC4 is symmetric: the same call encrypts plaintext and decrypts
    ciphertext.

    Args:
        data: Input content. ``str`` is encoded with ``encoding``.
        key: Cipher key (must not be empty). ``str`` is encoded with
            ``encoding``.
        encoding: Text codec for ``str`` arguments.

    Returns:
        A new buffer of the same length as the encoded input.

    Raises:
        InvalidKey: If ``key`` is empty.
        AllocationFailure: If the output buffer cannot be allocated.
    """
    try:
        raw = _as_bytes(data, encoding)
        S = ksa(_as_bytes(key, encoding))
        out = bytearray(raw)
        prga(S, out)
        result = bytes(out)
    except MemoryError as e:
        raise AllocationFailure(
            f"Out of memory transforming input of length {len(data)}"
        ) from e

    logger.debug("RC4 transformed %d bytes", len(result))
    return result


def encrypt_to_hex(
    plaintext: TextOrBytes,
    key: TextOrBytes,
    *,
    encoding: str = "utf-8",
) -> str:
    """Encrypt ``plaintext`` and render the ciphertext as lowercase hex."""
    return to_hex(encrypt_or_decrypt(plaintext, key, encoding=encoding))


def decrypt_from_hex(
    hex_text: str,
    key: TextOrBytes,
    *,
    encoding: str = "utf-8",
) -> bytes:
    """Decode hex ciphertext and decrypt it.

    Surrounding whitespace is ignored; anything else that is not a hex
    digit is an error.

    Raises:
        MalformedHex: If ``hex_text`` is not well-formed hex.
        InvalidKey: If ``key`` is empty.
    """
    return encrypt_or_decrypt(from_hex(hex_text.strip()), key, encoding=encoding)


def decrypt_text_from_hex(
    hex_text: str,
    key: TextOrBytes,
    *,
    encoding: str = "utf-8",
    errors: str = "strict",
) -> str:
    """Decrypt hex ciphertext and decode the plaintext as text.

    Args:
        hex_text: Hex-encoded ciphertext.
        key: Cipher key (must not be empty).
        encoding: Codec for the key (if ``str``) and for the plaintext.
        errors: Error policy passed to :meth:`bytes.decode`.

    Returns:
        The decrypted text.

    Raises:
        MalformedHex: If ``hex_text`` is not well-formed hex.
        InvalidKey: If ``key`` is empty.
        UnicodeDecodeError: If the plaintext is not valid text and
            ``errors`` is ``"strict"``.
    """
    plain = decrypt_from_hex(hex_text, key, encoding=encoding)
    return plain.decode(encoding, errors)
