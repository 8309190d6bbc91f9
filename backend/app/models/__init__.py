from app.models.listing import Listing

__all__ = [
    "Listing",
]
