"""
LeftoverLink: post and browse leftover food listings.

The core is an in-memory listing store that notifies observers on every
change, and a filter engine that derives the displayed subset from search
text and a dietary tag.
"""

from leftover_link.models import ALL_TAG, DIETARY_TAGS, FILTER_TAGS, Listing, ListingDraft
from leftover_link.store import InMemoryListingStore, ListingRepository
from leftover_link.filtering import ListingFeed, ListingFilter, filter_listings

__version__ = "0.1.0"

__all__ = [
    'ALL_TAG',
    'DIETARY_TAGS',
    'FILTER_TAGS',
    'Listing',
    'ListingDraft',
    'InMemoryListingStore',
    'ListingRepository',
    'ListingFeed',
    'ListingFilter',
    'filter_listings',
]
