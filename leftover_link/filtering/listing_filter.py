"""
Listing filter implementation for LeftoverLink.

This module derives the displayed subset of listings from free-text search
and a selected dietary tag. Filtering never mutates its input.
"""

from typing import Iterable, List, Optional

from leftover_link.models import ALL_TAG, Listing


class ListingFilter:
    """Filters listings by search text and dietary tag.

    Both filters are conjunctive: a listing must pass each active filter to
    remain. Input order is preserved.
    """

    def filter_by_text(
        self,
        listings: Iterable[Listing],
        search_text: Optional[str]
    ) -> List[Listing]:
        """Filter listings by a case-insensitive substring search.

        The search text is trimmed first; empty or whitespace-only text
        disables the filter.

        Args:
            listings: Listings to filter
            search_text: Raw text as typed by the user

        Returns:
            Listings whose title or description contains the text
        """
        needle = (search_text or "").strip().lower()
        if not needle:
            return list(listings)

        return [
            listing for listing in listings
            if needle in listing.title.lower() or needle in listing.description.lower()
        ]

    def filter_by_tag(
        self,
        listings: Iterable[Listing],
        tag: Optional[str]
    ) -> List[Listing]:
        """Filter listings by exact dietary tag.

        A tag of None or "All" disables the filter.

        Args:
            listings: Listings to filter
            tag: Selected tag (case-sensitive)

        Returns:
            Listings carrying the tag
        """
        if tag is None or tag == ALL_TAG:
            return list(listings)

        return [listing for listing in listings if listing.has_tag(tag)]

    def apply(
        self,
        listings: Iterable[Listing],
        search_text: Optional[str] = "",
        tag: Optional[str] = None
    ) -> List[Listing]:
        """Apply the text filter, then the tag filter."""
        return self.filter_by_tag(self.filter_by_text(listings, search_text), tag)


_default_filter = ListingFilter()


def filter_listings(
    listings: Iterable[Listing],
    search_text: Optional[str] = "",
    tag: Optional[str] = None
) -> List[Listing]:
    """Derive the displayed subset of ``listings``."""
    return _default_filter.apply(listings, search_text, tag)
