"""
Filtering module for LeftoverLink listings.

This module derives the displayed subset of listings from search text and
a dietary tag, and keeps that subset in sync with the store.
"""

from .listing_filter import ListingFilter, filter_listings
from .listing_feed import ListingFeed

__all__ = ['ListingFilter', 'filter_listings', 'ListingFeed']
