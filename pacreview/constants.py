"""
Centralized constants for pacreview.

This module defines immutable values used across pacreview, including
configuration file names, command template placeholders, review prompt
keys, and logging formats. All values are intended to be treated as
read-only.
"""

from typing import Final

# ---------------------------------------------------------------------------
# Configuration discovery
# ---------------------------------------------------------------------------

#: Dedicated configuration file looked up in the current directory.
CONFIG_FILE_NAME: Final[str] = "pacreview.toml"

#: Project file that may carry a ``[tool.pacreview]`` table.
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"

#: Name of the configuration table.
CONFIG_SECTION: Final[str] = "pacreview"

# ---------------------------------------------------------------------------
# Command templates
# ---------------------------------------------------------------------------

#: Placeholder replaced by a single package name inside an argument.
PACKAGE_PLACEHOLDER: Final[str] = "{package}"

#: Argument expanded into all package names of a batch operation.
PACKAGES_PLACEHOLDER: Final[str] = "{packages}"

#: Placeholder replaced by a group name inside an argument.
GROUP_PLACEHOLDER: Final[str] = "{group}"

# ---------------------------------------------------------------------------
# Review prompt
# ---------------------------------------------------------------------------

#: Message printed when no backend has anything left to decide.
NOTHING_TO_DO: Final[str] = "nothing to do"

#: Question asked once before executing all strategies.
CONFIRMATION_QUESTION: Final[str] = "Continue?"

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
