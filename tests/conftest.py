"""Pytest configuration and shared fixtures."""

from unittest.mock import AsyncMock

import pytest

from grocerylist.config import Settings
from grocerylist.connectors.enhancement import IngredientPayload
from grocerylist.consolidate.records import IngredientRecord

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow running")


# =============================================================================
# Recipe Fixtures
# =============================================================================


@pytest.fixture
def sample_recipes():
    """A handful of recipes with overlapping ingredients."""
    return [
        {
            "id": 1,
            "name": "Sambar",
            "ingredients": [
                {"name": "Toor Dal", "quantity": 1, "unit": "cup"},
                {"name": "Mixed Vegetables", "quantity": 2, "unit": "cups"},
                {"name": "Sambar Powder", "quantity": 2, "unit": "tbsp"},
                {"name": "Tamarind Paste", "quantity": 1, "unit": "tbsp"},
                {"name": "Mustard Seeds", "quantity": 1, "unit": "tsp"},
                {"name": "Curry Leaves", "quantity": 1, "unit": "sprig"},
            ],
        },
        {
            "id": 2,
            "name": "Aloo Gobi",
            "ingredients": [
                {"name": "Potatoes", "quantity": 2, "unit": "medium"},
                {"name": "Cauliflower", "quantity": 1, "unit": "medium"},
                {"name": "Cumin Seeds", "quantity": 1, "unit": "tsp"},
                {"name": "Turmeric Powder", "quantity": 1, "unit": "tsp"},
                {"name": "Garam Masala", "quantity": 1, "unit": "tsp"},
            ],
        },
        {
            "id": 3,
            "name": "Pav Bhaji",
            "ingredients": [
                {"name": "Mixed Vegetables", "quantity": 4, "unit": "cups"},
                {"name": "Pav Bhaji Masala", "quantity": 2, "unit": "tbsp"},
                {"name": "Butter", "quantity": 4, "unit": "tablespoons"},
                {"name": "Dinner Rolls (Pav)", "quantity": 8, "unit": "pieces"},
            ],
        },
        {
            "id": 5,
            "name": "Chana Masala",
            "ingredients": [
                {"name": "Chickpeas", "quantity": 2, "unit": "cups"},
                {"name": "Onion", "quantity": 1, "unit": "large"},
                {"name": "Tomatoes", "quantity": 2, "unit": "medium"},
            ],
        },
        {
            "id": 6,
            "name": "Generated Curry",
            "ingredients": [
                {"name": "Onion", "quantity": 2, "unit": "large"},
                {"name": "Tomato", "quantity": 3, "unit": "medium"},
                {"name": "Garlic", "quantity": 4, "unit": "cloves"},
                {"name": "Garam Masala", "quantity": 1, "unit": "teaspoon"},
                {"name": "Salt", "quantity": 0, "unit": "to taste"},
            ],
        },
    ]


@pytest.fixture
def sample_records():
    """Records with spelling, plural, qualifier and unit variations."""
    return [
        IngredientRecord(name="Tomato", quantity=2, unit="medium"),
        IngredientRecord(name="Garlic (paste or whole)", quantity=1, unit="clove"),
        IngredientRecord(name="Green Chilli", quantity=2, unit=""),
        IngredientRecord(name="Chiles", quantity=3, unit=""),
        IngredientRecord(name="Tomatoes", quantity=1, unit="medium"),
        IngredientRecord(name="Garlic", quantity=2, unit="cloves"),
        IngredientRecord(name="Salt", quantity=None, unit="to taste"),
        IngredientRecord(name="Chilli", quantity=1.5, unit=""),
        IngredientRecord(name="Rice", quantity=2, unit="cups"),
        IngredientRecord(name="rice", quantity=500, unit="grams"),
    ]


# =============================================================================
# Remote Enhancement Fixtures
# =============================================================================


@pytest.fixture
def enabled_settings():
    """Settings with remote consolidation switched on."""
    return Settings(
        ai_features_enabled=True,
        enhance_base_url="http://consolidator.test/api",
        enhance_max_retries=1,
        _env_file=None,
    )


@pytest.fixture
def disabled_settings():
    """Settings with remote consolidation switched off."""
    return Settings(ai_features_enabled=False, _env_file=None)


@pytest.fixture
def remote_ingredients():
    """A pre-merged list as the remote service would return it."""
    return [
        IngredientPayload(name="Consolidated Tomatoes", quantity=3, unit="medium"),
        IngredientPayload(name="consolidated onions", quantity=2, unit="medium"),
        IngredientPayload(name="Black Pepper", quantity=None, unit=None),
    ]


@pytest.fixture
def mock_connector(remote_ingredients):
    """Connector double returning the remote list."""
    connector = AsyncMock()
    connector.get_consolidated_list.return_value = remote_ingredients
    return connector
