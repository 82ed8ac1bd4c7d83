"""
Command-line interface for pacreview.

This module provides the main CLI entry point and handles global options,
configuration loading, and command registration.
"""

from __future__ import annotations

import os
import sys
import logging
from pathlib import Path
from typing import Optional

import click

from pacreview.config import load_config
from pacreview.__version__ import __version__
from pacreview.context import PacReviewContext
from pacreview.exceptions import ConfigError, PacReviewError
from pacreview.utils.console import print_error, print_warning, reconfigure_console
from pacreview.utils.logger import get_logger, setup_logging

logger = get_logger("cli")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file.",
    envvar="PACREVIEW_CONFIG",
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (can be repeated: -v, -vv).",
)
@click.option(
    "--color/--no-color",
    default=True,
    help="Enable or disable colored output.",
    envvar="PACREVIEW_COLOR",
)
@click.version_option(
    version=__version__,
    prog_name="pacreview",
    message="%(prog)s %(version)s",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: int,
    color: bool,
) -> None:
    """pacreview: review installed packages that no group declares.

    \b
    Available commands:
      pacreview review             Decide what to do with unmanaged packages
      pacreview groups             List the configured groups

    \b
    Examples:
      pacreview review
      pacreview review --dry-run -b pacman
      pacreview -v review

    Use ``pacreview COMMAND --help`` for command-specific options.
    """
    # Respect NO_COLOR for Rich and the log formatter
    if color:
        os.environ.pop("NO_COLOR", None)
    else:
        os.environ["NO_COLOR"] = "1"
    reconfigure_console()

    _configure_logging(verbose, color)

    try:
        loaded_config = load_config(config)
    except ConfigError as exc:
        print_error(str(exc))
        raise SystemExit(1) from exc

    pacreview_ctx = PacReviewContext()
    pacreview_ctx.config_path = loaded_config.source_path
    pacreview_ctx.color = color
    pacreview_ctx.verbose = verbose
    pacreview_ctx.config = loaded_config
    ctx.obj = pacreview_ctx

    logger.debug("pacreview v%s", __version__)
    logger.debug("Config path: %s", pacreview_ctx.config_path)
    logger.debug("Loaded configuration: %s", loaded_config.to_log_dict())
    logger.debug("Verbosity: %s | Color: %s", verbose, color)


def _configure_logging(verbose: int, color: bool) -> None:
    """Configure logging level based on verbosity flags."""
    if verbose <= 0:
        level = logging.WARNING
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    setup_logging(level=level, verbose=verbose >= 2, color=color)
    logger.debug("Logging initialized at %s level", logging.getLevelName(level))


# Register CLI subcommands
from pacreview.commands.groups import groups  # noqa: E402
from pacreview.commands.review import review  # noqa: E402

cli.add_command(groups)
cli.add_command(review)


def main() -> int:
    """Main entry point for the pacreview CLI.

    Returns:
        Exit code:
            0   Success
            1   Unhandled or application error
            2   Usage error (Click)
            130 Interrupted by user (Ctrl+C)
    """
    try:
        result = cli(standalone_mode=False)
        return result if isinstance(result, int) else 0

    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    except PacReviewError as exc:
        print_error(str(exc))
        logger.debug(
            "PacReviewError details: %s",
            exc.details or "<none>",
            exc_info=True,
        )
        return 1

    except (KeyboardInterrupt, click.Abort):
        print_warning("\nOperation cancelled by user")
        return 130

    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 1

    except Exception as exc:
        print_error(f"Unexpected error: {exc}")
        logger.exception("Unhandled exception in CLI")
        return 1


if __name__ == "__main__":
    sys.exit(main())
