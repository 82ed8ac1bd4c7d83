"""
Unified data model exports for pacreview.

Example:
    >>> from pacreview.models import Package, Group
"""

from __future__ import annotations

from pacreview.models.package import Group, Package

__all__ = [
    "Group",
    "Package",
]
