from __future__ import annotations

from pathlib import Path
from typing import Any

from rc4kit.schemas import CipherConfig, HostConfig


class ConfigAdapter:
    """Typed accessor over a loaded rc4kit configuration mapping.

    Settings are read from the ``general`` table; anything missing falls
    back to the dataclass defaults.

    Args:
        config (dict[str, Any]): Loaded configuration mapping.
    """

    def __init__(self, config: dict[str, Any]) -> None:
        self._config: dict[str, Any] = dict(config)

    def get_config(self) -> dict[str, Any]:
        """Return the full raw configuration mapping."""
        return self._config

    def get_cipher_config(self) -> CipherConfig:
        """Build a CipherConfig from the ``general`` table.

        Returns:
            CipherConfig: Resolved text handling settings.
        """
        cfg = self._gen_cfg()
        return CipherConfig(
            text_encoding=cfg.get("text_encoding") or "utf-8",
            text_errors=cfg.get("text_errors") or "strict",
        )

    def get_host_config(self) -> HostConfig:
        """Build a HostConfig from the ``general`` table.

        A ``max_buffers`` of 0 or a missing value means no limit.

        Returns:
            HostConfig: Resolved host binding settings.

        Raises:
            ValueError: If ``max_buffers`` is negative.
        """
        max_buffers = int(self._gen_cfg().get("max_buffers") or 0)
        if max_buffers < 0:
            raise ValueError(f"max_buffers must be >= 0, got {max_buffers}")

        return HostConfig(
            max_buffers=max_buffers or None,
            cipher_cfg=self.get_cipher_config(),
        )

    def get_log_level(self) -> str:
        """Return the configured logging level.

        Returns:
            str: Logging level or ``"INFO"`` if missing.
        """
        debug_cfg = self._gen_cfg().get("debug", {})
        return debug_cfg.get("log_level") or "INFO"

    def get_log_dir(self) -> Path | None:
        """Return directory for log files, or None if file logging is off.

        Returns:
            Path | None: Absolute log directory path.
        """
        log_dir = self._gen_cfg().get("debug", {}).get("log_dir")
        if not log_dir:
            return None
        return Path(log_dir).expanduser().resolve()

    def _gen_cfg(self) -> dict[str, Any]:
        return self._config.get("general") or {}
