"""Tests for settings validation."""
import pytest
from pydantic import ValidationError

from itinerary_export.config import Settings
from itinerary_export.models import PackingStrategy


class TestSettings:
    """Test layout settings checks."""

    def test_height_budget_without_budget_fails(self):
        """A height_budget strategy needs a page budget at startup."""
        with pytest.raises(ValidationError):
            Settings(packing_strategy="height_budget", page_height_budget=None)

    def test_height_budget_with_budget(self):
        config = Settings(packing_strategy="height_budget", page_height_budget=120)

        assert config.packing_strategy == PackingStrategy.HEIGHT_BUDGET
        assert config.page_height_budget == 120

    def test_max_items_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(max_items_per_page=0)
