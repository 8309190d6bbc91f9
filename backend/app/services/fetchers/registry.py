"""Registry of available listing feeds."""

from __future__ import annotations

import logging

from app.services.fetchers.base_fetcher import BaseFetcher
from app.services.fetchers.immonet_fetcher import ImmonetFetcher
from app.services.fetchers.immoscout_fetcher import ImmoscoutFetcher

logger = logging.getLogger(__name__)

ALL_SOURCES = "all"


class FetcherRegistry:
    """Registry and factory for listing feeds."""

    # Map of lower-cased source names to fetcher classes
    _fetchers: dict[str, type[BaseFetcher]] = {
        "immoscout": ImmoscoutFetcher,
        "immonet": ImmonetFetcher,
    }

    @classmethod
    def get_fetcher(cls, source_name: str) -> BaseFetcher:
        """
        Get a fetcher instance by source name (case-insensitive).

        Raises:
            ValueError: If the source name is not registered.
        """
        fetcher_class = cls._fetchers.get(source_name.lower())
        if not fetcher_class:
            raise ValueError(
                f"Unknown listing source: {source_name}. "
                f"Available: {', '.join(cls.list_sources())}, {ALL_SOURCES}"
            )
        return fetcher_class()

    @classmethod
    def resolve(cls, source_name: str) -> list[BaseFetcher]:
        """Fetchers for ``source_name``, or every registered one for ``all``."""
        if source_name.lower() == ALL_SOURCES:
            return [fetcher_class() for fetcher_class in cls._fetchers.values()]
        return [cls.get_fetcher(source_name)]

    @classmethod
    def list_sources(cls) -> list[str]:
        return list(cls._fetchers.keys())

    @classmethod
    def register_fetcher(cls, source_name: str, fetcher_class: type[BaseFetcher]) -> None:
        if not issubclass(fetcher_class, BaseFetcher):
            raise TypeError(f"{fetcher_class.__name__} must be a subclass of BaseFetcher")
        cls._fetchers[source_name.lower()] = fetcher_class
        logger.info("Registered fetcher: %s -> %s", source_name, fetcher_class.__name__)
