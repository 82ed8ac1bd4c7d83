"""
Executable module for pacreview.

Running:
    python -m pacreview

is equivalent to:
    pacreview

This module simply forwards execution to the CLI entrypoint defined in
`pacreview.cli`.
"""

from __future__ import annotations

import sys


def _print_startup_error(exc: ImportError) -> None:
    """Explain on stderr why the CLI could not be loaded."""
    sys.stderr.write("pacreview CLI could not be loaded.\n")
    sys.stderr.write(f"Python version : {sys.version}\n")
    try:
        from pacreview.__version__ import __version__

        sys.stderr.write(f"pacreview version: {__version__}\n")
    except ImportError:
        sys.stderr.write("pacreview version: <unknown>\n")
    sys.stderr.write("\n")
    sys.stderr.write(f"ImportError: {exc}\n")


def main() -> int:
    """
    Main entrypoint when executing `python -m pacreview`.

    Returns:
        Exit code returned by the CLI.
    """
    try:
        # Import lazily so dependencies are only loaded during CLI use
        from pacreview.cli import main as cli_main
    except ImportError as exc:
        _print_startup_error(exc)
        return 1

    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
