"""
pacreview: interactive review of undeclared packages

pacreview walks through the packages that are installed on a system but
not declared in any group, asks what should happen to each of them, and
applies the decisions as one batch per package-manager backend.

For every package the user can:
    • assign it to one of the declared groups
    • delete it
    • mark it as a dependency (where the backend supports it)
    • skip it, or show backend information about it
"""

from __future__ import annotations

from pacreview.__version__ import __version__

# ---------------------------------------------------------------------------
# Package Metadata
# ---------------------------------------------------------------------------

__author__ = "pacreview Contributors"
__license__ = "Apache-2.0"
__description__ = "Interactive review of installed but undeclared packages."

__all__ = [
    "__version__",
]
