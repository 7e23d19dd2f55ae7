"""In-memory brand registry.

The registry is an ordered, capacity-bounded collection of brands keyed by
name, administered by a single owner identity. Reads are open to everyone;
adding brands, updating values and changing the current year require the
caller to be the owner.
"""

import logging
from typing import Annotated, Optional

from pydantic import Field, TypeAdapter

from ..config import Settings, config
from ..errors import (
    BrandExistsError,
    BrandNotFoundError,
    CapacityExceededError,
    UnauthorizedError,
)
from ..models.brand import Brand

logger = logging.getLogger(__name__)

# Years are strict non-negative integers, like every Brand value
_year_adapter = TypeAdapter(Annotated[int, Field(strict=True, ge=0)])


class BrandRegistry:
    """Ordered registry of brands with owner-only mutation.

    Brands are kept in insertion order and never removed individually.
    Every value handed out is a copy, so callers cannot change registry
    state except through the owner-checked operations.

    Example:
        registry = BrandRegistry(owner="alice")
        registry.add_brand("alice", "Buffet R13", 350000, 410000, 2018)

        brand = registry.get_brand("Buffet R13")
        print(f"{brand.name}: {brand.current_value}")

        registry.update_value("alice", "Buffet R13", 420000)
    """

    def __init__(
        self,
        owner: Optional[str] = None,
        current_year: Optional[int] = None,
        capacity: Optional[int] = None,
        settings: Optional[Settings] = None,
    ):
        """Initialize an empty registry.

        Args:
            owner: Identity allowed to mutate the registry.
                   Defaults to the configured owner.
            current_year: Starting current year (default from settings, 2023)
            capacity: Maximum number of brands (default from settings, 100)
            settings: Optional Settings instance. Uses the module config if
                      not provided.
        """
        settings = settings or config
        self._owner = owner if owner is not None else settings.owner
        self._default_year = (
            current_year if current_year is not None else settings.default_current_year
        )
        self._capacity = capacity if capacity is not None else settings.max_brands

        if not self._owner:
            raise ValueError("owner must be a non-empty identity")
        self._default_year = _year_adapter.validate_python(self._default_year)
        if self._capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {self._capacity}")

        self._current_year = self._default_year
        self._brands: dict[str, Brand] = {}

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def current_year(self) -> int:
        return self._current_year

    @property
    def is_full(self) -> bool:
        return len(self._brands) >= self._capacity

    def __len__(self) -> int:
        return len(self._brands)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.brand_exists(name)

    def __repr__(self) -> str:
        return (
            f"BrandRegistry(owner={self._owner!r}, brands={len(self._brands)}, "
            f"current_year={self._current_year})"
        )

    def _require_owner(self, caller: Optional[str], action: str) -> None:
        """Raise UnauthorizedError unless caller is the owner."""
        if caller != self._owner:
            logger.warning(f"Rejected {action} by non-owner {caller!r}")
            raise UnauthorizedError(caller, action)

    # =========================================================================
    # Administration
    # =========================================================================

    def set_current_year(self, caller: Optional[str], year: int) -> None:
        """Set the reference year used for years-owned calculations.

        Args:
            caller: Identity performing the change (must be the owner)
            year: New current year

        Raises:
            UnauthorizedError: If caller is not the owner
            pydantic.ValidationError: If year is negative or not an integer
        """
        self._require_owner(caller, "set the current year")
        year = _year_adapter.validate_python(year)

        logger.info(f"Current year changed {self._current_year} -> {year}")
        self._current_year = year

    def get_current_year(self) -> int:
        """Return the reference year used for years-owned calculations."""
        return self._current_year

    def reset(self) -> None:
        """Clear all brands and restore the starting current year.

        The owner is kept.
        """
        logger.info(f"Resetting registry ({len(self._brands)} brands dropped)")
        self._brands.clear()
        self._current_year = self._default_year

    # =========================================================================
    # Brand Lifecycle
    # =========================================================================

    def brand_exists(self, name: str) -> bool:
        """Check whether a brand with exactly this name is registered."""
        return name in self._brands

    def add_brand(
        self,
        caller: Optional[str],
        name: str,
        initial_value: int,
        current_value: int,
        purchase_year: int,
    ) -> Brand:
        """Register a new brand at the end of the registry.

        Args:
            caller: Identity performing the change (must be the owner)
            name: Unique brand name (case-sensitive)
            initial_value: Value at acquisition
            current_value: Current value
            purchase_year: Year of acquisition

        Returns:
            Copy of the registered Brand

        Raises:
            UnauthorizedError: If caller is not the owner
            BrandExistsError: If the name is already registered
            CapacityExceededError: If the registry is full
            pydantic.ValidationError: If a value is negative or not an integer
        """
        self._require_owner(caller, "add a brand")
        if self.brand_exists(name):
            raise BrandExistsError(name)
        if self.is_full:
            raise CapacityExceededError(self._capacity)

        brand = Brand(
            name=name,
            initial_value=initial_value,
            current_value=current_value,
            purchase_year=purchase_year,
        )
        self._brands[name] = brand
        logger.info(
            f"Added brand {name!r} (initial={initial_value}, "
            f"current={current_value}, year={purchase_year})"
        )
        return brand.model_copy()

    def get_brand(self, name: str) -> Brand:
        """Look up a brand by name.

        Raises:
            BrandNotFoundError: If no brand has this name
        """
        brand = self._brands.get(name)
        if brand is None:
            logger.debug(f"Lookup miss for brand {name!r}")
            raise BrandNotFoundError(name)
        return brand.model_copy()

    def update_value(self, caller: Optional[str], name: str, new_value: int) -> Brand:
        """Replace a brand's current value.

        Only current_value changes; the brand keeps its position and
        all other fields.

        Args:
            caller: Identity performing the change (must be the owner)
            name: Brand to update
            new_value: New current value

        Returns:
            Copy of the updated Brand

        Raises:
            UnauthorizedError: If caller is not the owner
            BrandNotFoundError: If no brand has this name
            pydantic.ValidationError: If new_value is negative or not an integer
        """
        self._require_owner(caller, "update a brand value")
        brand = self._brands.get(name)
        if brand is None:
            logger.debug(f"Update miss for brand {name!r}")
            raise BrandNotFoundError(name)

        old_value = brand.current_value
        brand.current_value = new_value
        logger.info(f"Updated {name!r} current value {old_value} -> {new_value}")
        return brand.model_copy()

    def get_all_brands(self) -> list[Brand]:
        """Return copies of all brands in insertion order."""
        return [brand.model_copy() for brand in self._brands.values()]
