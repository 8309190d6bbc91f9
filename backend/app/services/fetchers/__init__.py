"""Listing feeds that produce raw, not yet enriched, listings."""

from app.services.fetchers.base_fetcher import BaseFetcher, FetchError
from app.services.fetchers.immonet_fetcher import ImmonetFetcher
from app.services.fetchers.immoscout_fetcher import ImmoscoutFetcher
from app.services.fetchers.registry import FetcherRegistry

__all__ = [
    "BaseFetcher",
    "FetchError",
    "ImmoscoutFetcher",
    "ImmonetFetcher",
    "FetcherRegistry",
]
