# topmark:header:start
#
#   project      : NullMeta
#   file         : io.py
#   file_relpath : src/nullmeta/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load NullMeta configuration from TOML sources.

Resolution order (first hit wins):

1. an explicit file passed by the caller (``--config``);
2. ``nullmeta.toml`` in the working directory;
3. ``[tool.nullmeta]`` in ``pyproject.toml`` in the working directory;
4. runtime defaults (`Config.from_defaults`).

Parsing is done with `tomlkit` and unwrapped to plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from nullmeta.config.logging import get_logger
from nullmeta.config.model import Config
from nullmeta.constants import NULLMETA_TOML_NAME, PYPROJECT_TOML_NAME, PYPROJECT_TOOL_SECTION
from nullmeta.core.errors import NullmetaConfigError

if TYPE_CHECKING:
    from nullmeta.config.logging import NullmetaLogger

logger: NullmetaLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> dict[str, Any]:
    """Load and parse a TOML file.

    Args:
        path (Path): TOML document to read (UTF-8).

    Returns:
        dict[str, Any]: The parsed top-level table.

    Raises:
        NullmetaConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as exc:
        raise NullmetaConfigError(f"Cannot read config file {path}: {exc}") from exc
    except TomlkitParseError as exc:
        raise NullmetaConfigError(f"Invalid TOML in {path}: {exc}") from exc
    data_any: Any = doc.unwrap()
    return cast("dict[str, Any]", data_any) if isinstance(data_any, dict) else {}


def _pyproject_section(data: dict[str, Any]) -> dict[str, Any] | None:
    current: Any = data
    for part in PYPROJECT_TOOL_SECTION.split("."):
        if not isinstance(current, dict) or part not in current:
            return None
        current = cast("dict[str, Any]", current)[part]
    return cast("dict[str, Any]", current) if isinstance(current, dict) else None


def load_config(config_file: Path | None = None, *, cwd: Path | None = None) -> Config:
    """Resolve and load the effective configuration.

    Args:
        config_file (Path | None): Explicit config file. Its top-level table is
            the NullMeta table (no ``[tool.nullmeta]`` nesting), unless the file
            is named ``pyproject.toml``.
        cwd (Path | None): Directory searched for ``nullmeta.toml`` /
            ``pyproject.toml``. Defaults to the process working directory.

    Returns:
        Config: The frozen configuration.

    Raises:
        NullmetaConfigError: If the explicit file is missing or any source is invalid.
    """
    if config_file is not None:
        if not config_file.is_file():
            raise NullmetaConfigError(f"Config file not found: {config_file}")
        data = load_toml_dict(config_file)
        if config_file.name == PYPROJECT_TOML_NAME:
            data = _pyproject_section(data) or {}
        logger.info("Using config file %s", config_file)
        return Config.from_toml_dict(data)

    base: Path = cwd if cwd is not None else Path.cwd()

    local = base / NULLMETA_TOML_NAME
    if local.is_file():
        logger.info("Using config file %s", local)
        return Config.from_toml_dict(load_toml_dict(local))

    pyproject = base / PYPROJECT_TOML_NAME
    if pyproject.is_file():
        section = _pyproject_section(load_toml_dict(pyproject))
        if section is not None:
            logger.info("Using [%s] from %s", PYPROJECT_TOOL_SECTION, pyproject)
            return Config.from_toml_dict(section)

    logger.debug("No config file found in %s; using defaults", base)
    return Config.from_defaults()
