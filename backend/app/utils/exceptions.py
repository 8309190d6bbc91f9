class ListingNotFoundError(Exception):
    """Raised when a listing id does not exist."""


class FetchError(Exception):
    """Raised by a listing feed that cannot deliver results."""


class FinancingError(ValueError):
    """Raised when a financing configuration cannot be amortized."""
