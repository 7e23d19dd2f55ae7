"""Sample brand data for initial deployment and testing."""

import logging
from typing import Optional

from .storage.registry import BrandRegistry

logger = logging.getLogger(__name__)

# (name, initial_value, current_value, purchase_year), in load order
SAMPLE_BRANDS: list[tuple[str, int, int, int]] = [
    # Premium
    ("Buffet R13", 350000, 410000, 2018),
    ("Selmer Recital", 420000, 450000, 2019),
    ("Yamaha CSVR", 380000, 430000, 2020),
    # Mid-range
    ("Buffet E11", 180000, 200000, 2021),
    ("Yamaha YCL-450", 160000, 190000, 2022),
    # Student
    ("Jupiter JCL700N", 80000, 70000, 2019),
    ("Bundy BCL-300", 60000, 50000, 2020),
]


def load_sample_data(registry: BrandRegistry, caller: Optional[str] = None) -> int:
    """Add the sample brands to a registry in order.

    Args:
        registry: Registry to populate
        caller: Identity issuing the adds. Defaults to the registry owner.

    Returns:
        Number of brands added

    Raises:
        RegistryError: On the first add that fails (e.g. BrandExistsError
            when the registry already holds a sample brand)
    """
    caller = registry.owner if caller is None else caller
    for name, initial_value, current_value, purchase_year in SAMPLE_BRANDS:
        registry.add_brand(caller, name, initial_value, current_value, purchase_year)

    logger.info(f"Loaded {len(SAMPLE_BRANDS)} sample brands")
    return len(SAMPLE_BRANDS)
