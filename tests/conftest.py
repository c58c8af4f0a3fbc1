"""Shared pytest fixtures for store directory tests."""

import json

import pytest

from storefinder.core.config import settings
from storefinder.schemas.stores import StoreRecord


SAMPLE_STORES = [
    {
        "name": "Mama Africa Market",
        "address": "112 Fulton Street",
        "description": "West African groceries and spices.",
        "tags": ["African", "Halal", "Spices"],
    },
    {
        "name": "Golden Lotus",
        "address": "48 Canal Street",
        "description": "Noodles and frozen dumplings.",
        "tags": ["Asian", "Vegetarian", "Frozen"],
    },
    {
        "name": "Joe's Deli",
        "address": "9 Essex Street",
        "tags": ["Kosher", "Deli"],
    },
    {
        "name": "Bazaar Halal Meats",
        "address": "301 Steinway Street",
        "description": "Butcher counter with South Asian staples.",
        "tags": ["South Asian", "Asian", "Halal", "Meat"],
        "phone": "555-0101",
    },
]


@pytest.fixture
def stores():
    return [StoreRecord.model_validate(s) for s in SAMPLE_STORES]


@pytest.fixture
def stores_file(tmp_path, monkeypatch):
    """Write the sample document and point the service settings at it."""
    path = tmp_path / "stores.json"
    path.write_text(json.dumps(SAMPLE_STORES), encoding="utf-8")
    monkeypatch.setattr(settings, "STORES_PATH", path)
    return path
