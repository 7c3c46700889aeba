"""
In-memory listing store for LeftoverLink.

This module holds the live collection of listings and publishes a fresh
snapshot to every subscriber whenever the collection changes.
"""

import logging
import threading
from typing import Callable, Iterable, Iterator, List, Optional, Protocol, Tuple

from leftover_link.error_handling import ListingNotFoundError
from leftover_link.models import Listing
from leftover_link.store.publisher import SnapshotPublisher
from leftover_link.store.seed import sample_listings


logger = logging.getLogger(__name__)

Snapshot = Tuple[Listing, ...]
SnapshotCallback = Callable[[Snapshot], None]


class Subscription:
    """Handle returned by subscribe(); cancel() stops further deliveries."""

    def __init__(self, cancel: Callable[[], None]):
        self._cancel = cancel
        self.active = True

    def cancel(self) -> None:
        if self.active:
            self.active = False
            self._cancel()


class ListingRepository(Protocol):
    """Capability interface for a source of listings.

    An in-memory store and a remote-backed store both satisfy this
    interface; consumers only ever see snapshots delivered through
    subscribe().
    """

    def add(self, listing: Listing) -> None: ...

    def delete(self, listing_id: str) -> bool: ...

    def refresh(self) -> None: ...

    def snapshot(self) -> Snapshot: ...

    def subscribe(self, callback: SnapshotCallback) -> Subscription: ...


class InMemoryListingStore:
    """Single source of truth for the live collection of listings.

    New listings are prepended so the collection reads most-recent-first.
    Every committed mutation publishes the full collection, as an immutable
    tuple, to subscribers in the order the mutations were applied. This
    holds even when a subscriber mutates the store from its own callback.

    Attributes:
        name: Label used in log messages
    """

    def __init__(self, listings: Optional[Iterable[Listing]] = None, name: str = "listings"):
        """Initialize the store.

        Args:
            listings: Initial collection, already in display order
            name: Label used in log messages
        """
        self.name = name
        self._listings: List[Listing] = []
        self._lock = threading.Lock()
        self._publisher = SnapshotPublisher(self._lock, name=name)

        seen = set()
        for listing in listings or ():
            if listing.id in seen:
                logger.warning(f"[{self.name}] Skipping duplicate initial listing {listing.id}")
                continue
            seen.add(listing.id)
            self._listings.append(listing)

    @classmethod
    def with_sample_data(cls, name: str = "listings") -> 'InMemoryListingStore':
        """Create a store seeded with the sample listings."""
        return cls(sample_listings(), name=name)

    # -- read path ---------------------------------------------------------

    def snapshot(self) -> Snapshot:
        """Return the current collection as an immutable tuple."""
        with self._lock:
            return tuple(self._listings)

    def get(self, listing_id: str) -> Optional[Listing]:
        with self._lock:
            for listing in self._listings:
                if listing.id == listing_id:
                    return listing
        return None

    def get_or_raise(self, listing_id: str) -> Listing:
        """Return the listing with ``listing_id``.

        Raises:
            ListingNotFoundError: If no such listing is held
        """
        listing = self.get(listing_id)
        if listing is None:
            raise ListingNotFoundError(listing_id)
        return listing

    def __len__(self) -> int:
        with self._lock:
            return len(self._listings)

    def __iter__(self) -> Iterator[Listing]:
        return iter(self.snapshot())

    def subscribe(self, callback: SnapshotCallback) -> Subscription:
        """Receive the current collection now and every future change.

        When called from inside another subscriber's callback, the initial
        snapshot is delivered once the pending ones ahead of it are.

        Args:
            callback: Called with a snapshot tuple on every publication

        Returns:
            Subscription whose cancel() stops deliveries
        """
        with self._lock:
            self._publisher.add_subscriber(callback, tuple(self._listings))
        self._publisher.drain()
        return Subscription(lambda: self._publisher.remove_subscriber(callback))

    # -- mutations ---------------------------------------------------------

    def add(self, listing: Listing) -> None:
        """Insert ``listing`` at the front of the collection.

        No validation is performed. A listing whose id is already held is
        ignored so ids stay unique.
        """
        with self._lock:
            if any(existing.id == listing.id for existing in self._listings):
                logger.warning(f"[{self.name}] Ignoring add of duplicate listing id {listing.id}")
                return
            self._listings.insert(0, listing)
            self._publisher.enqueue(tuple(self._listings))
            total = len(self._listings)
        logger.info(f"[{self.name}] Added listing {listing.id} ({listing.title!r}); {total} total")
        self._publisher.drain()

    def delete(self, listing_id: str) -> bool:
        """Remove the listing matching ``listing_id``.

        Unknown ids are a no-op and publish nothing.

        Returns:
            True if a listing was removed, False otherwise
        """
        with self._lock:
            remaining = [listing for listing in self._listings if listing.id != listing_id]
            if len(remaining) == len(self._listings):
                logger.debug(f"[{self.name}] Delete of unknown listing {listing_id} ignored")
                return False
            self._listings = remaining
            self._publisher.enqueue(tuple(self._listings))
            total = len(self._listings)
        logger.info(f"[{self.name}] Deleted listing {listing_id}; {total} remaining")
        self._publisher.drain()
        return True

    def refresh(self) -> None:
        """Re-publish the current collection unchanged."""
        with self._lock:
            self._publisher.enqueue(tuple(self._listings))
            total = len(self._listings)
        logger.debug(f"[{self.name}] Refresh re-emitting {total} listings")
        self._publisher.drain()
