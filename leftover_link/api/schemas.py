"""Request and response models for the LeftoverLink API"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from leftover_link.helpers import time_ago
from leftover_link.models import Listing


class ListingBase(BaseModel):
    """Base listing fields"""
    title: str
    description: str
    location: str
    dietary_tags: List[str] = Field(default_factory=list)


class ListingCreate(ListingBase):
    """Model for submitting a new listing"""
    image_base64: Optional[str] = Field(None, description="Photo as base64 text")


class ListingResponse(ListingBase):
    """API response model for listings"""
    id: str
    created_at: datetime
    time_ago: str
    image_base64: Optional[str] = None

    @classmethod
    def from_listing(cls, listing: Listing, now: Optional[datetime] = None) -> 'ListingResponse':
        data = listing.to_dict()
        data["image_base64"] = data.pop("image_data")
        data["time_ago"] = time_ago(listing.created_at, now)
        return cls(**data)


class ErrorResponse(BaseModel):
    """Error body for validation and lookup failures"""
    detail: str
    field: Optional[str] = None
