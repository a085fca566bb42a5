"""Seed loader - builds in-memory stores from the bundled JSON fixture."""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from backend.compass.db.inmemory import InMemoryCatalog, InMemoryUserRepository
from backend.compass.models.catalog import CulturalSite, Destination, Region, Restaurant
from backend.compass.models.itinerary import User

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"
CATALOG_FIXTURE = FIXTURES_DIR / "catalog.json"

logger = logging.getLogger(__name__)


def _load_fixture(path: Path | str | None) -> dict[str, Any]:
    fixture_path = Path(path) if path else CATALOG_FIXTURE
    with open(fixture_path, encoding="utf-8") as f:
        data: dict[str, Any] = json.load(f)
    return data


def load_catalog(path: Path | str | None = None) -> InMemoryCatalog:
    """Load destinations, cultural sites, restaurants and regions.

    Args:
        path: Fixture file (default: bundled fixtures/catalog.json)

    Returns:
        InMemoryCatalog seeded in fixture declaration order
    """
    data = _load_fixture(path)

    catalog = InMemoryCatalog(
        destinations=[Destination.model_validate(d) for d in data.get("destinations", [])],
        cultural_sites=[CulturalSite.model_validate(s) for s in data.get("culturalSites", [])],
        restaurants=[Restaurant.model_validate(r) for r in data.get("restaurants", [])],
        regions=[Region.model_validate(r) for r in data.get("regions", [])],
    )

    logger.info(
        f"Seeded catalog: {len(catalog.list_destinations())} destinations, "
        f"{len(catalog.list_cultural_sites())} cultural sites, "
        f"{len(catalog.list_restaurants())} restaurants"
    )
    return catalog


def load_users(path: Path | str | None = None) -> InMemoryUserRepository:
    """Load seeded user profiles."""
    data = _load_fixture(path)
    now = datetime.now()

    users = [
        User.model_validate({"createdAt": now, **u}) for u in data.get("users", [])
    ]
    return InMemoryUserRepository(users)
