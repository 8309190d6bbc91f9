"""Base class for listing feeds."""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from typing import Any

from app.utils.exceptions import FetchError

logger = logging.getLogger(__name__)

__all__ = ["BaseFetcher", "FetchError"]


class BaseFetcher(ABC):
    """Abstract listing feed.

    Feeds return raw records only. Derived metrics are computed by
    :func:`app.services.listing_service.build_listing` before anything is
    stored, so any derived values a feed supplies are discarded.
    """

    # Subclasses must define this
    SOURCE_NAME: str = ""

    def __init__(self, rng: random.Random | None = None) -> None:
        if not self.SOURCE_NAME:
            raise ValueError(f"{self.__class__.__name__} must define SOURCE_NAME")
        self._rng = rng or random.Random()

    @abstractmethod
    async def fetch(self, city: str) -> list[dict[str, Any]]:
        """
        Fetch listings offered in ``city``.

        Returns:
            List of raw listing dicts with the keys of
            :class:`app.schemas.listing.ListingCreate`, including
            ``source`` (equal to SOURCE_NAME) and a feed-unique
            ``external_id``.

        Raises:
            FetchError: If the feed cannot be reached or returns garbage.
        """
        pass
