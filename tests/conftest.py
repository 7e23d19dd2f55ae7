"""Pytest fixtures and test utilities."""

import pytest

from brandinvest.analysis import BrandRanker, InvestmentCalculator
from brandinvest.seed import load_sample_data
from brandinvest.storage import BrandRegistry

OWNER = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
NON_OWNER = "ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG"


@pytest.fixture
def owner() -> str:
    """Registry owner identity."""
    return OWNER


@pytest.fixture
def non_owner() -> str:
    """Identity that is not the owner."""
    return NON_OWNER


@pytest.fixture
def registry(owner: str) -> BrandRegistry:
    """Empty registry with the default current year (2023)."""
    return BrandRegistry(owner=owner, current_year=2023, capacity=100)


@pytest.fixture
def calculator(registry: BrandRegistry) -> InvestmentCalculator:
    """InvestmentCalculator bound to the registry fixture."""
    return InvestmentCalculator(registry)


@pytest.fixture
def ranker(registry: BrandRegistry, calculator: InvestmentCalculator) -> BrandRanker:
    """BrandRanker bound to the registry fixture."""
    return BrandRanker(registry, calculator)


@pytest.fixture
def seeded_registry(registry: BrandRegistry) -> BrandRegistry:
    """Registry loaded with the seven sample brands."""
    load_sample_data(registry)
    return registry


@pytest.fixture
def roi_brands(registry: BrandRegistry, owner: str) -> BrandRegistry:
    """Brands covering positive, zero-initial and negative ROI."""
    registry.add_brand(owner, "Test Brand", 100000, 120000, 2020)
    registry.add_brand(owner, "Zero Initial", 0, 10000, 2020)
    registry.add_brand(owner, "Negative ROI", 100000, 80000, 2020)
    return registry
