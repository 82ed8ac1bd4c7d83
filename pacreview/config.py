"""Configuration file loader for pacreview.

Handles discovery, loading, parsing, and validation of configuration files.
Supports two formats:

- ``pacreview.toml``: settings under ``[pacreview]`` table
- ``pyproject.toml``: settings under ``[tool.pacreview]`` table

Discovery order:

1. Explicit path from ``--config`` or ``PACREVIEW_CONFIG``
2. ``pacreview.toml`` in current directory
3. ``pyproject.toml`` with ``[tool.pacreview]`` section

Example (``pacreview.toml``)::

    [pacreview.groups]
    base = ["git", "extra/vim"]
    desktop = ["firefox"]

    [pacreview.backends.pacman]
    unmanaged = ["pacreview-unmanaged-pacman"]
    info = ["pacman", "-Qi", "{package}"]
    remove = ["sudo", "pacman", "-Rns", "{packages}"]
    as_dependency = ["sudo", "pacman", "-D", "--asdeps", "{packages}"]
    assign_group = ["sh", "-c", "echo {package} >> ~/groups/{group}"]

Backends are reviewed in the order their tables appear in the file.
"""

from __future__ import annotations

import tomli as tomllib
from pathlib import Path
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from pacreview.exceptions import ConfigError
from pacreview.models import Group
from pacreview.utils.logger import get_logger
from pacreview.constants import (
    CONFIG_FILE_NAME,
    CONFIG_SECTION,
    GROUP_PLACEHOLDER,
    PACKAGE_PLACEHOLDER,
    PACKAGES_PLACEHOLDER,
    PYPROJECT_FILE_NAME,
)

logger = get_logger("config")

_REQUIRED_COMMANDS = ("unmanaged", "info", "remove")
_OPTIONAL_COMMANDS = ("as_dependency", "assign_group")

# Placeholders that must appear inside an argument of the template.
_INLINE_PLACEHOLDERS = {
    "info": (PACKAGE_PLACEHOLDER,),
    "assign_group": (PACKAGE_PLACEHOLDER, GROUP_PLACEHOLDER),
}

# Commands that need a whole argument expanding to all package names.
_BATCH_COMMANDS = ("remove", "as_dependency")


@dataclass(frozen=True)
class BackendConfig:
    """Command templates of one ``[pacreview.backends.<name>]`` table.

    Attributes:
        name: Table name, used as the backend section name.
        unmanaged: Lists packages needing review, one per line.
        info: Shows information about ``{package}``.
        remove: Removes ``{packages}``.
        as_dependency: Marks ``{packages}`` as dependencies, if supported.
        assign_group: Adds ``{package}`` to ``{group}``, if supported.
    """

    name: str
    unmanaged: Tuple[str, ...]
    info: Tuple[str, ...]
    remove: Tuple[str, ...]
    as_dependency: Optional[Tuple[str, ...]] = None
    assign_group: Optional[Tuple[str, ...]] = None


@dataclass
class PacReviewConfig:
    """Parsed and validated pacreview configuration.

    All fields have defaults, so empty config files are valid.

    Attributes:
        groups: Declared groups, in file order.
        backends: Configured backends, in file order.
        source_path: Path to loaded config file, or ``None`` if using defaults.
    """

    groups: List[Group] = field(default_factory=list)
    backends: List[BackendConfig] = field(default_factory=list)

    # Metadata (not a user-facing option)
    source_path: Optional[Path] = field(default=None, repr=False)

    def get_backend(self, name: str) -> Optional[BackendConfig]:
        """Return the backend configured under ``name``, if any."""
        for backend in self.backends:
            if backend.name == name:
                return backend
        return None

    def to_log_dict(self) -> Dict[str, Any]:
        """Return configuration as dictionary for debug logging."""
        return {
            "groups": [group.name for group in self.groups],
            "backends": [backend.name for backend in self.backends],
        }


def discover_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file to load.

    Args:
        explicit_path: Explicit config path. If provided, must exist.

    Returns:
        Resolved path to config file, or ``None`` if not found.

    Raises:
        ConfigError: Explicit path provided but does not exist.
    """
    if explicit_path is not None:
        resolved = explicit_path.resolve()
        if not resolved.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        logger.debug("Using explicit config: %s", resolved)
        return resolved

    cwd = Path.cwd()

    dedicated = cwd / CONFIG_FILE_NAME
    if dedicated.is_file():
        logger.debug("Found %s: %s", CONFIG_FILE_NAME, dedicated)
        return dedicated

    pyproject = cwd / PYPROJECT_FILE_NAME
    if pyproject.is_file() and _pyproject_has_pacreview_section(pyproject):
        logger.debug("Found [tool.%s] in %s", CONFIG_SECTION, pyproject)
        return pyproject

    logger.debug("No configuration file found")
    return None


def _pyproject_has_pacreview_section(path: Path) -> bool:
    """Check if pyproject.toml contains a ``[tool.pacreview]`` section.

    Unreadable or invalid files count as "no section".
    """
    try:
        raw = _read_toml(path)
    except ConfigError:
        return False
    tool = raw.get("tool", {})
    return isinstance(tool, dict) and CONFIG_SECTION in tool


def load_config(config_path: Optional[Path] = None) -> PacReviewConfig:
    """Load and validate pacreview configuration.

    Args:
        config_path: Explicit path to config file. If ``None``, uses
            auto-discovery (see :func:`discover_config_file`).

    Returns:
        Validated :class:`PacReviewConfig` with values from file or defaults.

    Raises:
        ConfigError: File cannot be parsed, has unknown keys, or invalid values.
    """
    resolved = discover_config_file(config_path)

    if resolved is None:
        logger.debug("No config file found, using defaults")
        return PacReviewConfig()

    logger.info("Loading configuration from %s", resolved)
    raw = _read_toml(resolved)

    if resolved.name == PYPROJECT_FILE_NAME:
        section = raw.get("tool", {}).get(CONFIG_SECTION, {})
    else:
        section = raw.get(CONFIG_SECTION, {})

    if not section:
        logger.debug("Config file found but no pacreview section, using defaults")
        return PacReviewConfig(source_path=resolved)

    config = _parse_section(section, config_path=str(resolved))
    config.source_path = resolved

    logger.debug("Loaded configuration: %s", config.to_log_dict())
    return config


def _read_toml(path: Path) -> Dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigError: File cannot be read or is not valid TOML.
    """
    try:
        with open(path, "rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid TOML in {path.name}: {exc}",
            config_path=str(path),
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {path}: {exc}",
            config_path=str(path),
        ) from exc


def _parse_section(
    section: Dict[str, Any],
    *,
    config_path: str,
) -> PacReviewConfig:
    """Parse and validate the ``[pacreview]`` table.

    Raises:
        ConfigError: Unknown keys or values of the wrong shape.
    """
    if not isinstance(section, dict):
        raise ConfigError(
            f"{CONFIG_SECTION} must be a table",
            config_path=config_path,
        )

    unknown_top = set(section.keys()) - {"groups", "backends"}
    if unknown_top:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(sorted(unknown_top))}",
            config_path=config_path,
        )

    config = PacReviewConfig()

    groups = _expect_table(section.get("groups", {}), "groups", config_path)
    for name, members in groups.items():
        config.groups.append(_parse_group(name, members, config_path))

    backends = _expect_table(section.get("backends", {}), "backends", config_path)
    for name, table in backends.items():
        config.backends.append(_parse_backend(name, table, config_path))

    return config


def _expect_table(value: Any, option: str, config_path: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise ConfigError(
            f"{option} must be a table, got {type(value).__name__}",
            config_path=config_path,
            option=option,
        )
    return value


def _parse_group(name: str, members: Any, config_path: str) -> Group:
    option = f"groups.{name}"
    if not isinstance(members, list) or not all(isinstance(m, str) for m in members):
        raise ConfigError(
            f"{option} must be a list of package names",
            config_path=config_path,
            option=option,
        )
    try:
        return Group.from_names(name, members)
    except ValueError as exc:
        raise ConfigError(
            f"{option} contains an invalid package: {exc}",
            config_path=config_path,
            option=option,
        ) from exc


def _parse_backend(name: str, table: Any, config_path: str) -> BackendConfig:
    option = f"backends.{name}"
    table = _expect_table(table, option, config_path)

    unknown = set(table.keys()) - set(_REQUIRED_COMMANDS) - set(_OPTIONAL_COMMANDS)
    if unknown:
        raise ConfigError(
            f"Unknown keys in {option}: {', '.join(sorted(unknown))}",
            config_path=config_path,
            option=option,
        )

    missing = [key for key in _REQUIRED_COMMANDS if key not in table]
    if missing:
        raise ConfigError(
            f"Missing commands in {option}: {', '.join(missing)}",
            config_path=config_path,
            option=option,
        )

    commands: Dict[str, Tuple[str, ...]] = {}
    for key in _REQUIRED_COMMANDS + _OPTIONAL_COMMANDS:
        if key in table:
            commands[key] = _parse_command(
                key, table[key], f"{option}.{key}", config_path
            )

    return BackendConfig(name=name, **commands)


def _parse_command(
    key: str, value: Any, option: str, config_path: str
) -> Tuple[str, ...]:
    """Validate a command template: a non-empty list of strings.

    Templates that act on packages must reference them.
    """
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(
            f"{option} must be a list of strings",
            config_path=config_path,
            option=option,
        )
    if not value:
        raise ConfigError(
            f"{option} must not be empty",
            config_path=config_path,
            option=option,
        )

    if key in _BATCH_COMMANDS and PACKAGES_PLACEHOLDER not in value:
        raise ConfigError(
            f"{option} needs a {PACKAGES_PLACEHOLDER} argument",
            config_path=config_path,
            option=option,
        )

    for placeholder in _INLINE_PLACEHOLDERS.get(key, ()):
        if not any(placeholder in arg for arg in value):
            raise ConfigError(
                f"{option} must contain {placeholder}",
                config_path=config_path,
                option=option,
            )

    return tuple(value)
