"""
Store module for LeftoverLink.

Holds the in-memory collection of listings and its change notifications.
"""

from .listing_store import InMemoryListingStore, ListingRepository, Subscription
from .publisher import SnapshotPublisher
from .seed import sample_listings

__all__ = ['InMemoryListingStore', 'ListingRepository', 'SnapshotPublisher', 'Subscription', 'sample_listings']
