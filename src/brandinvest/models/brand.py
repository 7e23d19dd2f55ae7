"""Brand and investment result data models."""

from pydantic import BaseModel, Field, computed_field


class Brand(BaseModel):
    """A tracked investment item.

    The name, initial value and purchase year are fixed when the brand is
    registered. Only the current value changes afterwards, and only through
    the registry's update operation.
    """

    name: str = Field(..., min_length=1, frozen=True, description="Unique brand name")
    initial_value: int = Field(
        ..., ge=0, frozen=True, description="Value at acquisition"
    )
    current_value: int = Field(..., ge=0, description="Most recently recorded value")
    purchase_year: int = Field(..., ge=0, frozen=True, description="Year of acquisition")

    model_config = {
        "strict": True,
        "validate_assignment": True,
    }

    @computed_field
    @property
    def value_change(self) -> int:
        """Absolute change since acquisition (can be negative)."""
        return self.current_value - self.initial_value


class BestInvestment(BaseModel):
    """Outcome of the best-investment scan."""

    best_name: str | None = Field(
        default=None, description="Brand with the highest ROI, None if no positive ROI"
    )
    best_roi: int = Field(default=0, description="ROI percentage of best_name")


class BrandPerformance(BaseModel):
    """Derived metrics for one brand."""

    name: str
    initial_value: int
    current_value: int
    purchase_year: int
    roi: int
    # None when the brand was bought in the current year
    annual_appreciation: int | None = None
