"""
Byte/text encoding helpers.
"""

__all__ = [
    "from_hex",
    "is_hex",
    "to_hex",
]

from .hexcodec import from_hex, is_hex, to_hex
