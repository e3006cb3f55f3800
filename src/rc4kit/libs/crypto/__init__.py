"""
RC4 stream cipher primitives.
"""

__all__ = [
    "RC4",
    "keystream",
    "ksa",
    "prga",
]

from .rc4 import RC4, keystream, ksa, prga
