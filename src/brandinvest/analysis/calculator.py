"""Investment metrics calculator for registered brands.

All arithmetic is integer arithmetic with floor division, so negative
results round toward negative infinity (-20.5 becomes -21).
"""

import logging

from ..errors import DivideByZeroError
from ..models.brand import Brand
from ..storage.registry import BrandRegistry

logger = logging.getLogger(__name__)


class InvestmentCalculator:
    """Calculate ROI and annualized appreciation for registry brands.

    The static methods work on raw values; the ``calculate_*`` methods look
    the brand up in the registry first.

    Example:
        calc = InvestmentCalculator(registry)

        # Quick ROI calculation
        roi = calc.roi(initial_value=100000, current_value=120000)  # 20

        # Registry lookup
        annual = calc.calculate_annual_appreciation("Buffet R13")
    """

    def __init__(self, registry: BrandRegistry):
        """Initialize calculator.

        Args:
            registry: Registry the calculate_* methods read from
        """
        self.registry = registry

    # =========================================================================
    # Core Investment Metrics
    # =========================================================================

    @staticmethod
    def roi(initial_value: int, current_value: int) -> int:
        """Calculate return on investment as an integer percentage.

        ROI = floor((current - initial) × 100 / initial)

        Args:
            initial_value: Value at acquisition
            current_value: Current value

        Returns:
            ROI percentage (e.g., 20 for 20%), 0 when initial_value is 0
        """
        if initial_value == 0:
            return 0
        return ((current_value - initial_value) * 100) // initial_value

    @staticmethod
    def annual_appreciation(
        initial_value: int,
        current_value: int,
        years_owned: int,
    ) -> int:
        """Calculate annualized appreciation as an integer percentage.

        Annual = floor(ROI / years_owned), where ROI is already floored.
        Flooring twice can differ from a single combined division.

        Args:
            initial_value: Value at acquisition
            current_value: Current value
            years_owned: Current year minus purchase year

        Returns:
            Annual appreciation percentage, 0 when initial_value is 0

        Raises:
            DivideByZeroError: If years_owned is 0
        """
        if years_owned == 0:
            raise DivideByZeroError()
        if initial_value == 0:
            return 0
        return InvestmentCalculator.roi(initial_value, current_value) // years_owned

    def years_owned(self, brand: Brand) -> int:
        """Years between the brand's purchase and the registry's current year."""
        return self.registry.get_current_year() - brand.purchase_year

    # =========================================================================
    # Registry Lookups
    # =========================================================================

    def calculate_roi(self, name: str) -> int:
        """Calculate ROI for a registered brand.

        Raises:
            BrandNotFoundError: If the brand is not registered
        """
        brand = self.registry.get_brand(name)
        return self.roi(brand.initial_value, brand.current_value)

    def calculate_annual_appreciation(self, name: str) -> int:
        """Calculate annualized appreciation for a registered brand.

        Raises:
            BrandNotFoundError: If the brand is not registered
            DivideByZeroError: If the brand was bought in the current year
        """
        brand = self.registry.get_brand(name)
        years = self.years_owned(brand)
        if years == 0:
            raise DivideByZeroError(name)
        return self.annual_appreciation(brand.initial_value, brand.current_value, years)
