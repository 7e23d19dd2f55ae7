"""Investment analysis modules for brand evaluation.

This package provides tools for calculating ROI and annualized
appreciation, and for finding and ranking the best investments.
"""

from .calculator import InvestmentCalculator
from .ranker import BrandRanker

__all__ = ["InvestmentCalculator", "BrandRanker"]
