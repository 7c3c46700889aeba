"""
Exception types for LeftoverLink.

Store operations are total, so these are only raised at the validation
seam (drafts) and by explicit lookups that require a listing to exist.
"""


class LeftoverLinkError(Exception):
    """Base class for all LeftoverLink errors."""


class ListingValidationError(LeftoverLinkError):
    """
    Raised when a listing draft is missing a required field.

    Attributes:
        field: Name of the offending field
        message: Human-readable explanation
    """

    def __init__(self, field: str, message: str = None):
        self.field = field
        self.message = message or f"{field} must not be empty"
        super().__init__(self.message)


class ListingNotFoundError(LeftoverLinkError):
    """
    Raised when a lookup references an id the store does not hold.

    Attributes:
        listing_id: The id that was requested
    """

    def __init__(self, listing_id: str):
        self.listing_id = listing_id
        super().__init__(f"Listing not found: {listing_id}")
