"""Tests for sample data loading."""

import pytest

from brandinvest.analysis import BrandRanker
from brandinvest.errors import BrandExistsError, UnauthorizedError
from brandinvest.seed import SAMPLE_BRANDS, load_sample_data
from brandinvest.storage import BrandRegistry


class TestLoadSampleData:
    """Test seeding a registry."""

    def test_loads_seven_brands(self, registry: BrandRegistry):
        """All sample brands are added in order."""
        added = load_sample_data(registry)

        assert added == 7
        assert len(registry.get_all_brands()) == 7
        assert [b.name for b in registry.get_all_brands()] == [s[0] for s in SAMPLE_BRANDS]

    def test_values_match(self, seeded_registry: BrandRegistry):
        """Seeded values are stored as given."""
        brand = seeded_registry.get_brand("Jupiter JCL700N")
        assert brand.initial_value == 80000
        assert brand.current_value == 70000
        assert brand.purchase_year == 2019

    def test_best_sample_investment(self, seeded_registry: BrandRegistry):
        """Yamaha YCL-450 has the best ROI of the sample."""
        best = BrandRanker(seeded_registry).find_best_investment()
        assert best.best_name == "Yamaha YCL-450"
        assert best.best_roi == 18

    def test_non_owner_cannot_seed(self, registry: BrandRegistry, non_owner: str):
        """Seeding goes through the owner check."""
        with pytest.raises(UnauthorizedError):
            load_sample_data(registry, caller=non_owner)
        assert len(registry) == 0

    def test_seeding_twice_fails(self, seeded_registry: BrandRegistry):
        """Sample names collide on a second load."""
        with pytest.raises(BrandExistsError):
            load_sample_data(seeded_registry)
        assert len(seeded_registry) == 7
