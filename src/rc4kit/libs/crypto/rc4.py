"""
RC4 stream cipher (also known as ARC4 / Arcfour).

RC4 is cryptographically broken and is provided for compatibility with
existing data only.
"""

from __future__ import annotations

__all__ = ["RC4", "ksa", "prga", "keystream"]

from rc4kit.errors import InvalidKey

BytesLike = bytes | bytearray | memoryview


def ksa(key: BytesLike) -> list[int]:
    """Perform the RC4 Key-Scheduling Algorithm (KSA).

    Args:
        key: RC4 key bytes (must not be empty).

    Returns:
        A fresh 256-entry permutation of ``0..255``.

    Raises:
        InvalidKey: If ``key`` is empty.
    """
    klen = len(key)
    if klen == 0:
        raise InvalidKey("Key must not be empty")

    S = list(range(256))
    j = 0
    for i in range(256):
        j = (j + S[i] + key[i % klen]) & 0xFF
        S[i], S[j] = S[j], S[i]
    return S


def prga(S: list[int], data: bytearray) -> None:
    """XOR the RC4 keystream into ``data`` in place.

    This is the RC4 Pseudo-Random Generation Algorithm (PRGA). The state
    ``S`` is consumed: it is mutated in place and must not be reused for
    another message.

    Args:
        S: Permutation state produced by :func:`ksa`.
        data: Buffer to transform in place.
    """
    i = 0
    j = 0
    for idx in range(len(data)):
        i = (i + 1) & 0xFF
        j = (j + S[i]) & 0xFF
        S[i], S[j] = S[j], S[i]
        data[idx] ^= S[(S[i] + S[j]) & 0xFF]


def keystream(key: BytesLike, length: int) -> bytes:
    """Return the first ``length`` bytes of the RC4 keystream for ``key``."""
    if length < 0:
        raise ValueError("length must not be negative")
    buf = bytearray(length)
    prga(ksa(key), buf)
    return bytes(buf)


class RC4:
    """Minimal RC4 cipher implementation."""

    __slots__ = ("_S0",)

    def __init__(self, key: BytesLike) -> None:
        """
        Args:
            key: RC4 key bytes (must not be empty).

        Raises:
            InvalidKey: If ``key`` is empty.
        """
        self._S0 = ksa(key)

    def crypt(self, data: BytesLike) -> bytes:
        """Encrypts/Decrypts data

        Every call starts from the freshly scheduled state, so the same
        object can be used for any number of independent messages.

        Args:
            data: Input bytes, either plaintext or ciphertext.

        Returns:
            Output bytes after XOR with the RC4 keystream.
        """
        if not data:
            return b""

        out = bytearray(data)
        prga(self._S0.copy(), out)
        return bytes(out)

    encrypt = decrypt = crypt
