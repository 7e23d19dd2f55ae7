"""Storage modules for brand data.

This package provides the in-memory brand registry that owns the brand list,
the owner identity and the current year.
"""

from .registry import BrandRegistry

__all__ = ["BrandRegistry"]
