"""Simulated Immoscout24 feed.

Generates plausible apartment and house offers for a city. Stands in for the
real portal, which offers no public search API.
"""

from __future__ import annotations

import logging
from typing import Any

from app.services.fetchers.base_fetcher import BaseFetcher
from app.services.fetchers.utils import (
    CONDITIONS,
    jittered_coordinates,
    random_address,
    random_postal_code,
    random_token,
)

logger = logging.getLogger(__name__)


class ImmoscoutFetcher(BaseFetcher):
    """Immoscout24 offers: 3-7 units, 40-139 m², 2500-5499 EUR/m²."""

    SOURCE_NAME = "Immoscout24"

    async def fetch(self, city: str) -> list[dict[str, Any]]:
        rng = self._rng
        count = rng.randint(3, 7)
        listings: list[dict[str, Any]] = []

        for _ in range(count):
            size = rng.randint(40, 139)
            price = size * rng.randint(2500, 5499)
            rooms = size // 25 + 1
            latitude, longitude = jittered_coordinates(city, rng)

            listings.append({
                "title": f"{rooms}-room apartment in {city}",
                "address": random_address(rng, 100),
                "city": city,
                "postal_code": random_postal_code(rng),
                "latitude": latitude,
                "longitude": longitude,
                "price": float(price),
                "size": float(size),
                "rooms": rooms,
                "property_type": "house" if rng.random() > 0.7 else "apartment",
                "year_built": rng.randint(1970, 2019),
                "condition": rng.choice(CONDITIONS),
                "image_url": f"https://picsum.photos/seed/{random_token(rng)}/800/600",
                "description": f"Lovely {rooms}-room home in {city} with {size} m² of living space.",
                "source": self.SOURCE_NAME,
                "external_id": f"IS24-{random_token(rng)}",
            })

        logger.info("%s returned %d listings for %s", self.SOURCE_NAME, len(listings), city)
        return listings
