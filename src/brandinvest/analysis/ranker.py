"""Brand ranking and best-investment search.

This module provides tools for finding the best investment in a registry
and ranking brands by ROI or annualized appreciation.
"""

import logging
from typing import Optional

from ..errors import DivideByZeroError
from ..models.brand import BestInvestment, BrandPerformance
from ..storage.registry import BrandRegistry
from .calculator import InvestmentCalculator

logger = logging.getLogger(__name__)


class BrandRanker:
    """Rank registry brands by investment performance.

    Example:
        ranker = BrandRanker(registry)

        best = ranker.find_best_investment()
        print(f"{best.best_name}: {best.best_roi}%")

        for perf in ranker.rank_by_roi():
            print(f"{perf.name}: {perf.roi}%")
    """

    def __init__(
        self,
        registry: BrandRegistry,
        calculator: Optional[InvestmentCalculator] = None,
    ):
        """Initialize ranker.

        Args:
            registry: Registry to read brands from
            calculator: Optional InvestmentCalculator instance.
                       Creates new instance if not provided.
        """
        self.registry = registry
        self.calc = calculator or InvestmentCalculator(registry)

    # =========================================================================
    # Best Investment
    # =========================================================================

    def find_best_investment(self) -> BestInvestment:
        """Find the brand with the highest ROI.

        Brands with a zero initial value are skipped. A brand only replaces
        the current best when its ROI is strictly greater, so the first brand
        wins ties and a registry with no positive ROI yields no best brand.

        Returns:
            BestInvestment with best_name None and best_roi 0 if nothing beats 0%
        """
        best_name: Optional[str] = None
        best_roi = 0

        for brand in self.registry.get_all_brands():
            if brand.initial_value == 0:
                continue
            roi = self.calc.roi(brand.initial_value, brand.current_value)
            if roi > best_roi:
                best_name = brand.name
                best_roi = roi

        return BestInvestment(best_name=best_name, best_roi=best_roi)

    # =========================================================================
    # Batch Analysis
    # =========================================================================

    def analyze_all(self) -> list[BrandPerformance]:
        """Compute ROI and annual appreciation for every brand.

        Returns:
            BrandPerformance list in insertion order. annual_appreciation is
            None for brands bought in the current year.
        """
        results = []
        for brand in self.registry.get_all_brands():
            years = self.calc.years_owned(brand)
            try:
                annual = self.calc.annual_appreciation(
                    brand.initial_value, brand.current_value, years
                )
            except DivideByZeroError:
                logger.debug(f"No annual appreciation for {brand.name!r}: bought this year")
                annual = None

            results.append(
                BrandPerformance(
                    name=brand.name,
                    initial_value=brand.initial_value,
                    current_value=brand.current_value,
                    purchase_year=brand.purchase_year,
                    roi=self.calc.roi(brand.initial_value, brand.current_value),
                    annual_appreciation=annual,
                )
            )
        return results

    # =========================================================================
    # Ranking Methods
    # =========================================================================

    def rank_by_roi(self) -> list[BrandPerformance]:
        """Rank brands by ROI (highest first, insertion order on ties)."""
        return sorted(self.analyze_all(), key=lambda p: p.roi, reverse=True)

    def rank_by_annual_appreciation(self) -> list[BrandPerformance]:
        """Rank brands by annual appreciation (highest first).

        Brands bought in the current year are left out.
        """
        analyzed = [p for p in self.analyze_all() if p.annual_appreciation is not None]
        return sorted(analyzed, key=lambda p: p.annual_appreciation, reverse=True)
