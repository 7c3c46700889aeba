"""
Data models for LeftoverLink.

This module defines the listing record shared by the store, the filter
engine and the API, plus the draft used when a user submits a new listing.
"""

import base64
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import FrozenSet, Optional, Set

from leftover_link.error_handling import ListingValidationError


# Dietary tags offered by the tag bar. Listings may carry other tags too.
DIETARY_TAGS = ("Vegetarian", "Vegan", "Gluten-Free", "Nut-Free")

# Sentinel tag meaning "no tag filter"
ALL_TAG = "All"

FILTER_TAGS = (ALL_TAG,) + DIETARY_TAGS


def new_listing_id() -> str:
    """Generate a fresh, never-reused listing identifier."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Listing:
    """Represents a leftover food listing.

    Listings are immutable once created; the only way to change the
    collection is to add a new listing or delete an existing one.

    Attributes:
        title: Short title describing the food item
        description: Longer description with additional details
        location: Where the item can be picked up
        dietary_tags: Dietary labels such as "Vegetarian" or "Vegan"
        image_data: Optional raw image bytes
        created_at: When the listing was posted (display only)
        id: Unique identifier generated at creation time
    """
    title: str
    description: str
    location: str
    dietary_tags: FrozenSet[str] = frozenset()
    image_data: Optional[bytes] = None
    created_at: datetime = field(default_factory=datetime.now)
    id: str = field(default_factory=new_listing_id)

    def __post_init__(self):
        # Accept any iterable of tags but always store a frozenset
        if not isinstance(self.dietary_tags, frozenset):
            object.__setattr__(self, 'dietary_tags', frozenset(self.dietary_tags))

    def has_tag(self, tag: str) -> bool:
        """Exact, case-sensitive tag membership."""
        return tag in self.dietary_tags

    def to_dict(self) -> dict:
        """Convert listing to dictionary for JSON serialization.

        Returns:
            Dictionary with datetime as ISO string, tags as a sorted list
            and image data base64-encoded
        """
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'location': self.location,
            'dietary_tags': sorted(self.dietary_tags),
            'image_data': (
                base64.b64encode(self.image_data).decode('ascii')
                if self.image_data is not None else None
            ),
            'created_at': self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Listing':
        """Create Listing instance from dictionary.

        Args:
            data: Dictionary as produced by to_dict()

        Returns:
            Listing instance
        """
        data = data.copy()
        if isinstance(data.get('created_at'), str):
            data['created_at'] = datetime.fromisoformat(data['created_at'])
        if isinstance(data.get('image_data'), str):
            data['image_data'] = base64.b64decode(data['image_data'])
        if data.get('dietary_tags') is None:
            data['dietary_tags'] = frozenset()
        return cls(**data)


@dataclass
class ListingDraft:
    """The new-listing form before submission.

    Title, description and location are required; each must contain
    something other than whitespace.
    """
    title: str = ""
    description: str = ""
    location: str = ""
    dietary_tags: Set[str] = field(default_factory=set)
    image_data: Optional[bytes] = None

    REQUIRED_FIELDS = ('title', 'description', 'location')

    @property
    def is_valid(self) -> bool:
        return all(getattr(self, name).strip() for name in self.REQUIRED_FIELDS)

    def validate(self) -> None:
        """Raise ListingValidationError for the first empty required field."""
        for name in self.REQUIRED_FIELDS:
            if not getattr(self, name).strip():
                raise ListingValidationError(name)

    def toggle_tag(self, tag: str) -> None:
        if tag in self.dietary_tags:
            self.dietary_tags.discard(tag)
        else:
            self.dietary_tags.add(tag)

    def to_listing(self, created_at: Optional[datetime] = None) -> Listing:
        """Validate the draft and build a new Listing with a fresh id.

        Args:
            created_at: Override for the creation timestamp (defaults to now)

        Returns:
            The new immutable Listing

        Raises:
            ListingValidationError: If a required field is empty
        """
        self.validate()
        return Listing(
            title=self.title.strip(),
            description=self.description.strip(),
            location=self.location.strip(),
            dietary_tags=frozenset(self.dietary_tags),
            image_data=self.image_data,
            created_at=created_at or datetime.now(),
        )

