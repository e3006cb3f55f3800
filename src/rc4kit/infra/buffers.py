"""
Handle-based ownership of result buffers.

Hosts that cannot hold Python objects directly receive integer handles
instead. Each handle owns exactly one buffer until it is released.
"""

from __future__ import annotations

__all__ = ["BufferArena"]

import itertools
import logging
import threading
from types import TracebackType

from rc4kit.errors import AllocationFailure, InvalidHandle

logger = logging.getLogger(__name__)


class BufferArena:
    """Registry of owned byte buffers addressed by integer handles.

    Handles are positive, increase monotonically and are never reused
    within one arena, so a stale handle can never alias a newer buffer.

    Attributes:
        max_buffers: Maximum number of live buffers, or ``None`` for no limit.
    """

    __slots__ = ("max_buffers", "_buffers", "_counter", "_lock")

    def __init__(self, max_buffers: int | None = None) -> None:
        """
        Args:
            max_buffers: Maximum number of live buffers, or ``None``.

        Raises:
            ValueError: If ``max_buffers`` is less than 1.
        """
        if max_buffers is not None and max_buffers < 1:
            raise ValueError("max_buffers must be at least 1")
        self.max_buffers = max_buffers
        self._buffers: dict[int, bytearray] = {}
        self._counter = itertools.count(1)
        self._lock = threading.Lock()

    def allocate(self, data: bytes | bytearray | memoryview) -> int:
        """Copy ``data`` into a new owned buffer.

        Args:
            data: Contents of the new buffer.

        Returns:
            The handle that now owns the buffer.

        Raises:
            AllocationFailure: If the arena is full or memory is exhausted.
        """
        try:
            buf = bytearray(data)
        except MemoryError as e:
            raise AllocationFailure(
                f"Cannot allocate buffer of {len(data)} bytes"
            ) from e

        with self._lock:
            if (
                self.max_buffers is not None
                and len(self._buffers) >= self.max_buffers
            ):
                raise AllocationFailure(
                    f"Buffer limit reached ({self.max_buffers} live buffers)"
                )
            handle = next(self._counter)
            self._buffers[handle] = buf

        logger.debug("Allocated handle %d (%d bytes)", handle, len(buf))
        return handle

    def get(self, handle: int) -> bytes:
        """Return a snapshot of the buffer owned by ``handle``.

        Raises:
            InvalidHandle: If the handle is unknown or released.
        """
        with self._lock:
            try:
                return bytes(self._buffers[handle])
            except KeyError:
                raise InvalidHandle(f"Unknown buffer handle: {handle}") from None

    def release(self, handle: int) -> None:
        """Reclaim the buffer owned by ``handle``.

        Raises:
            InvalidHandle: If the handle is unknown or was already released.
        """
        with self._lock:
            buf = self._buffers.pop(handle, None)
        if buf is None:
            raise InvalidHandle(f"Unknown or already released handle: {handle}")
        logger.debug("Released handle %d", handle)

    def release_all(self) -> int:
        """Release every live buffer.

        Returns:
            The number of buffers that were still live.
        """
        with self._lock:
            count = len(self._buffers)
            self._buffers.clear()
        return count

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffers)

    def __contains__(self, handle: object) -> bool:
        with self._lock:
            return handle in self._buffers

    def __enter__(self) -> BufferArena:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        leaked = self.release_all()
        if leaked:
            logger.warning("Released %d buffer(s) left open at arena close", leaked)
