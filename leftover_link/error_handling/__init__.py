"""
Error handling module for LeftoverLink.

Provides the exception taxonomy shared by the core and the API.
"""

from .errors import LeftoverLinkError, ListingValidationError, ListingNotFoundError

__all__ = ['LeftoverLinkError', 'ListingValidationError', 'ListingNotFoundError']
