"""
Data contracts and type definitions.
"""

__all__ = [
    "CipherConfig",
    "HostConfig",
]

from .config import CipherConfig, HostConfig
