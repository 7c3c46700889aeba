"""Sample listings so a fresh store feels populated."""

from datetime import datetime, timedelta
from typing import List, Optional

from leftover_link.models import Listing


# (title, description, location, tags, age in seconds)
SAMPLE_LISTINGS = [
    ("Leftover Pasta",
     "Delicious penne pasta with marinara sauce and veggies.",
     "Dorm A", ("Vegetarian",), 3600),
    ("Half a Pizza",
     "Half of a pepperoni pizza from last night.",
     "Apartment 3C", ("Nut-Free",), 7200),
    ("Gluten-free Muffins",
     "Freshly baked gluten-free banana muffins.",
     "Library Cafe", ("Gluten-Free",), 86400),
    ("Vegan Salad",
     "Mixed greens with quinoa and chickpeas.",
     "Dorm B", ("Vegan",), 5400),
    ("Fruit Bowl",
     "Assorted seasonal fruits.",
     "Student Center", ("Vegetarian", "Nut-Free"), 18000),
]


def sample_listings(now: Optional[datetime] = None) -> List[Listing]:
    """Build fresh Listing objects (new ids) for the sample data."""
    now = now or datetime.now()
    return [
        Listing(
            title=title,
            description=description,
            location=location,
            dietary_tags=frozenset(tags),
            created_at=now - timedelta(seconds=age),
        )
        for title, description, location, tags, age in SAMPLE_LISTINGS
    ]
