"""
View-model that keeps a filtered listing feed in sync with a store.

The feed combines the latest store snapshot with the latest search text and
selected tag. Any change to one of the three inputs recomputes the
displayed list and publishes it to the feed's own subscribers.
"""

import logging
import threading
from typing import Callable, List, Optional, Tuple

from leftover_link.filtering.listing_filter import filter_listings
from leftover_link.models import ALL_TAG, Listing, ListingDraft
from leftover_link.store import ListingRepository, SnapshotPublisher, Subscription


logger = logging.getLogger(__name__)

FeedCallback = Callable[[List[Listing]], None]


class ListingFeed:
    """Filtered, observable view over a ListingRepository.

    Attributes:
        repository: The listing source this feed observes
        listings: The currently displayed (filtered) listings
    """

    def __init__(
        self,
        repository: ListingRepository,
        search_text: str = "",
        selected_tag: Optional[str] = None
    ):
        """Subscribe to ``repository`` and compute the initial feed.

        Args:
            repository: The listing source to observe
            search_text: Initial search text
            selected_tag: Initial tag filter (None means no filter)
        """
        self.repository = repository
        self.listings: List[Listing] = []
        self._search_text = search_text
        self._selected_tag = selected_tag
        self._source: Tuple[Listing, ...] = ()
        self._lock = threading.Lock()
        self._publisher = SnapshotPublisher(self._lock, name="feed")
        self._subscription = repository.subscribe(self._on_store_changed)

    # -- filter parameters -------------------------------------------------

    @property
    def search_text(self) -> str:
        return self._search_text

    @search_text.setter
    def search_text(self, value: str) -> None:
        with self._lock:
            self._search_text = value or ""
            self._recompute()
        self._publisher.drain()

    @property
    def selected_tag(self) -> Optional[str]:
        return self._selected_tag

    @selected_tag.setter
    def selected_tag(self, value: Optional[str]) -> None:
        with self._lock:
            self._selected_tag = value
            self._recompute()
        self._publisher.drain()

    def select_tag(self, tag: str) -> None:
        """Handle a tap on the tag bar.

        Tapping "All" or the currently selected tag clears the filter;
        tapping any other tag selects it.
        """
        with self._lock:
            if tag == ALL_TAG or tag == self._selected_tag:
                self._selected_tag = None
            else:
                self._selected_tag = tag
            self._recompute()
        self._publisher.drain()

    def is_tag_selected(self, tag: str) -> bool:
        with self._lock:
            selected = self._selected_tag
        if selected is None:
            return tag == ALL_TAG
        return tag == selected

    # -- repository passthrough --------------------------------------------

    def add(self, listing: Listing) -> None:
        self.repository.add(listing)

    def submit(self, draft: ListingDraft) -> Listing:
        """Validate ``draft``, build the listing and add it to the repository.

        Raises:
            ListingValidationError: If a required field is empty
        """
        listing = draft.to_listing()
        self.repository.add(listing)
        return listing

    def delete(self, listing_id: str) -> bool:
        return self.repository.delete(listing_id)

    def refresh(self) -> None:
        self.repository.refresh()

    # -- observation -------------------------------------------------------

    def subscribe(self, callback: FeedCallback) -> Subscription:
        """Receive the displayed list now and after every recomputation."""
        with self._lock:
            self._publisher.add_subscriber(callback, list(self.listings))
        self._publisher.drain()
        return Subscription(lambda: self._publisher.remove_subscriber(callback))

    def close(self) -> None:
        """Stop observing the repository."""
        self._subscription.cancel()

    def _on_store_changed(self, snapshot: Tuple[Listing, ...]) -> None:
        with self._lock:
            self._source = snapshot
            self._recompute()
        self._publisher.drain()

    def _recompute(self) -> None:
        # Caller holds self._lock and drains after releasing it
        self.listings = filter_listings(self._source, self._search_text, self._selected_tag)
        logger.debug(
            f"Feed recomputed: {len(self.listings)}/{len(self._source)} listings "
            f"(search={self._search_text!r}, tag={self._selected_tag!r})"
        )
        self._publisher.enqueue(list(self.listings))
