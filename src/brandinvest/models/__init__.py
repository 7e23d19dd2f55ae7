"""Data models for brandinvest."""

from brandinvest.models.brand import (
    BestInvestment,
    Brand,
    BrandPerformance,
)

__all__ = [
    "Brand",
    "BestInvestment",
    "BrandPerformance",
]
