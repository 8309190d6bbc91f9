"""Pull listings from the external feeds and store them enriched."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from app.config import settings
from app.services import listing_service
from app.services.fetchers.registry import FetcherRegistry
from app.utils.exceptions import FetchError

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

    from app.models.listing import Listing
    from app.services.fetchers.base_fetcher import BaseFetcher

logger = logging.getLogger(__name__)


async def _fetch_one(fetcher: BaseFetcher, city: str) -> list[dict[str, Any]]:
    """Run one feed under the configured timeout; failures yield no listings."""
    try:
        return await asyncio.wait_for(
            fetcher.fetch(city), timeout=settings.fetch_timeout_seconds
        )
    except asyncio.TimeoutError:
        logger.error(
            "%s timed out after %.1fs for %s",
            fetcher.SOURCE_NAME, settings.fetch_timeout_seconds, city,
        )
    except FetchError as e:
        logger.error("%s fetch failed for %s: %s", fetcher.SOURCE_NAME, city, e)
    except Exception:
        logger.exception("Unexpected error from %s for %s", fetcher.SOURCE_NAME, city)
    return []


async def fetch_listings(
    source: str, city: str, fetchers: list[BaseFetcher] | None = None
) -> list[dict[str, Any]]:
    """Raw listings from ``source`` (or every feed for ``all``) for ``city``.

    Raises:
        ValueError: If ``source`` is not a registered feed.
    """
    fetchers = fetchers if fetchers is not None else FetcherRegistry.resolve(source)
    results = await asyncio.gather(*(_fetch_one(f, city) for f in fetchers))
    return [raw for batch in results for raw in batch]


async def fetch_and_import(
    db: Session,
    source: str,
    city: str,
    fetchers: list[BaseFetcher] | None = None,
) -> list[Listing]:
    raw_listings = await fetch_listings(source, city, fetchers)
    logger.info("Fetched %d raw listings from %s for %s", len(raw_listings), source, city)
    return listing_service.import_listings(db, raw_listings)
