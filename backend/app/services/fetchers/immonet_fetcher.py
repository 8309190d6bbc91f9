"""Simulated Immonet feed, larger and pricier units than Immoscout24."""

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


class ImmonetFetcher(BaseFetcher):
    """Immonet offers: 2-5 units, 50-169 m², 3000-5499 EUR/m²."""

    SOURCE_NAME = "Immonet"

    async def fetch(self, city: str) -> list[dict[str, Any]]:
        rng = self._rng
        listings: list[dict[str, Any]] = []

        for _ in range(rng.randint(2, 5)):
            size = rng.randint(50, 169)
            price = size * rng.randint(3000, 5499)
            rooms = size // 30 + 1
            latitude, longitude = jittered_coordinates(city, rng)

            listings.append({
                "title": f"Attractive condominium - {rooms} rooms",
                "address": random_address(rng, 150),
                "city": city,
                "postal_code": random_postal_code(rng),
                "latitude": latitude,
                "longitude": longitude,
                "price": float(price),
                "size": float(size),
                "rooms": rooms,
                "property_type": "house" if rng.random() > 0.6 else "apartment",
                "year_built": rng.randint(1980, 2019),
                "condition": rng.choice(CONDITIONS),
                "image_url": f"https://picsum.photos/seed/{random_token(rng)}/800/600",
                "description": f"Modern property in a sought-after part of {city}.",
                "source": self.SOURCE_NAME,
                "external_id": f"IN-{random_token(rng)}",
            })

        logger.info("%s returned %d listings for %s", self.SOURCE_NAME, len(listings), city)
        return listings
