"""
Handle-based bindings for embedding hosts.

Results are kept in a :class:`~rc4kit.infra.buffers.BufferArena` and the
host receives integer handles. The host owns each handle until it calls
:meth:`HostBindings.release`.
"""

from __future__ import annotations

__all__ = ["HostBindings"]

import logging
from pathlib import Path
from types import TracebackType

from rc4kit.api import encrypt_or_decrypt
from rc4kit.infra.buffers import BufferArena
from rc4kit.infra.config import ConfigAdapter, load_config
from rc4kit.libs.encoding.hexcodec import from_hex, to_hex
from rc4kit.schemas import CipherConfig, HostConfig

logger = logging.getLogger(__name__)


class HostBindings:
    """Exported RC4 surface returning buffer handles.

    A failing call raises before anything is allocated, so the arena never
    holds partial results.
    """

    def __init__(
        self,
        arena: BufferArena | None = None,
        cipher_cfg: CipherConfig | None = None,
    ) -> None:
        """
        Args:
            arena: Arena that owns result buffers. A private unbounded arena
                is created if omitted.
            cipher_cfg: Text handling for ``str`` arguments.
        """
        self.arena = arena if arena is not None else BufferArena()
        self.cipher_cfg = cipher_cfg or CipherConfig()

    @classmethod
    def from_config(cls, cfg: HostConfig) -> HostBindings:
        """Create bindings with an arena sized by ``cfg``."""
        return cls(BufferArena(cfg.max_buffers), cfg.cipher_cfg)

    @classmethod
    def from_settings(cls, config_path: str | Path | None = None) -> HostBindings:
        """Create bindings from a settings file.

        The file is located the same way as :func:`load_config`.

        Raises:
            FileNotFoundError: If no settings file is found.
            ValueError: If the settings are invalid.
        """
        cfg = ConfigAdapter(load_config(config_path)).get_host_config()
        logger.debug(
            "Host bindings: max_buffers=%s, text_encoding=%s",
            cfg.max_buffers,
            cfg.cipher_cfg.text_encoding,
        )
        return cls.from_config(cfg)

    def rc4_crypt(
        self,
        data: str | bytes | bytearray | memoryview,
        key: str | bytes | bytearray | memoryview,
    ) -> int:
        """Encrypt or decrypt ``data`` and return a handle to the result.

        Raises:
            InvalidKey: If ``key`` is empty.
            AllocationFailure: If the result cannot be stored.
        """
        out = encrypt_or_decrypt(data, key, encoding=self.cipher_cfg.text_encoding)
        handle = self.arena.allocate(out)
        logger.debug("rc4_crypt -> handle %d (%d bytes)", handle, len(out))
        return handle

    def to_hex(self, handle: int) -> int:
        """Render the buffer at ``handle`` as hex into a new ASCII buffer.

        The source handle stays owned by the caller. Read the result with
        :meth:`read_hex`.

        Raises:
            InvalidHandle: If ``handle`` is unknown or released.
            AllocationFailure: If the result cannot be stored.
        """
        text = to_hex(self.arena.get(handle))
        hex_handle = self.arena.allocate(text.encode("ascii"))
        logger.debug("to_hex handle %d -> handle %d", handle, hex_handle)
        return hex_handle

    def from_hex(self, hex_text: str | bytes) -> int:
        """Parse hex text into a new buffer.

        Raises:
            MalformedHex: If ``hex_text`` is not well-formed hex.
            AllocationFailure: If the result cannot be stored.
        """
        handle = self.arena.allocate(from_hex(hex_text))
        logger.debug("from_hex -> handle %d", handle)
        return handle

    def read(self, handle: int) -> bytes:
        """Return a copy of the bytes owned by ``handle``."""
        return self.arena.get(handle)

    def read_text(self, handle: int) -> str:
        """Return the buffer at ``handle`` decoded with the configured codec.

        Use :meth:`read_hex` for buffers produced by :meth:`to_hex`.
        """
        cfg = self.cipher_cfg
        return self.arena.get(handle).decode(cfg.text_encoding, cfg.text_errors)

    def read_hex(self, handle: int) -> str:
        """Return the ASCII hex text held by a :meth:`to_hex` buffer."""
        return self.arena.get(handle).decode("ascii")

    def release(self, handle: int) -> None:
        """Reclaim the buffer owned by ``handle``.

        Raises:
            InvalidHandle: If ``handle`` is unknown or already released.
        """
        self.arena.release(handle)

    free_memory = release

    def __enter__(self) -> HostBindings:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.arena.__exit__(exc_type, exc, tb)
