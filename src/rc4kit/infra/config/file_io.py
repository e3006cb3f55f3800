from __future__ import annotations

import json
import logging
import tomllib
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any, BinaryIO

from rc4kit.infra.paths import DEFAULT_CONFIG_FILE, SETTING_PATH

logger = logging.getLogger(__name__)

LOCAL_SETTING_NAMES = ("settings.toml", "settings.json")

_PARSERS: dict[str, tuple[str, Callable[[BinaryIO], Any]]] = {
    ".toml": ("TOML", tomllib.load),
    ".json": ("JSON", json.load),
}


def _candidate_paths(config_path: str | Path | None) -> Iterator[Path]:
    """Yield settings locations in lookup order.

    An explicit ``config_path`` comes first, then the local settings files
    in the working directory, then the per-user settings file.
    """
    if config_path:
        yield Path(config_path).expanduser().resolve()
    cwd = Path.cwd()
    for name in LOCAL_SETTING_NAMES:
        yield (cwd / name).resolve()
    yield SETTING_PATH


def _read_settings(path: Path) -> dict[str, Any]:
    """
    Parse one settings file, choosing the parser by suffix.

    Raises:
        ValueError: If the suffix is unsupported, the file does not parse,
            or its top level is not a table/object.
    """
    try:
        kind, parse = _PARSERS[path.suffix.lower()]
    except KeyError:
        raise ValueError(
            f"Unsupported config file extension: {path.suffix}"
        ) from None

    try:
        with path.open("rb") as f:
            data = parse(f)
    except (OSError, ValueError) as e:
        raise ValueError(f"Invalid {kind} in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a dict, got {type(data)} in {path}")
    return data


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """
    Load rc4kit settings from the first settings file that exists.

    A missing explicit ``config_path`` is logged and the lookup continues
    with the local and per-user files.

    Args:
        config_path: Optional explicit configuration file path.

    Returns:
        Parsed configuration as a dictionary.

    Raises:
        FileNotFoundError: If no configuration file is found.
        ValueError: If the file cannot be parsed or has an invalid structure.
    """
    for i, path in enumerate(_candidate_paths(config_path)):
        if path.is_file():
            logger.debug("Loading configuration from: %s", path)
            return _read_settings(path)
        if i == 0 and config_path:
            logger.warning("Specified config file not found: %s", path)

    raise FileNotFoundError("No valid config file found.")


def copy_default_config(target: Path) -> None:
    """
    Write the bundled sample settings to ``target``.

    Args:
        target: Destination path; parent directories are created.
    """
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(DEFAULT_CONFIG_FILE.read_bytes())
    logger.info("Default configuration written to: %s", target)
