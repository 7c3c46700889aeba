"""
Listing routes: browse, post, delete and refresh.
"""

import base64
import binascii
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response

from leftover_link.api.schemas import ErrorResponse, ListingCreate, ListingResponse
from leftover_link.filtering import filter_listings
from leftover_link.models import FILTER_TAGS, ListingDraft
from leftover_link.store import InMemoryListingStore

logger = logging.getLogger(__name__)

router = APIRouter()


def get_store(request: Request) -> InMemoryListingStore:
    """Dependency returning the application's listing store."""
    return request.app.state.store


@router.get("/tags", response_model=List[str])
async def list_tags():
    """Tags shown in the filter bar, "All" first."""
    return list(FILTER_TAGS)


@router.get("/listings", response_model=List[ListingResponse])
async def list_listings(
    search: str = Query("", description="Case-insensitive text to find in title or description"),
    tag: Optional[str] = Query(None, description="Dietary tag; omit or use 'All' for no filter"),
    store: InMemoryListingStore = Depends(get_store)
):
    """
    List listings most-recent-first, filtered by search text and tag.
    """
    listings = filter_listings(store.snapshot(), search, tag)
    return [ListingResponse.from_listing(listing) for listing in listings]


@router.post(
    "/listings",
    response_model=ListingResponse,
    status_code=201,
    responses={422: {"model": ErrorResponse}}
)
async def create_listing(
    payload: ListingCreate,
    store: InMemoryListingStore = Depends(get_store)
):
    """
    Post a new listing.

    Title, description and location must be non-empty after trimming.
    """
    image_data = None
    if payload.image_base64:
        try:
            image_data = base64.b64decode(payload.image_base64, validate=True)
        except (binascii.Error, ValueError) as e:
            logger.warning(f"Rejected listing with undecodable image: {e}")
            raise HTTPException(status_code=422, detail="image_base64 is not valid base64")

    draft = ListingDraft(
        title=payload.title,
        description=payload.description,
        location=payload.location,
        dietary_tags=set(payload.dietary_tags),
        image_data=image_data,
    )
    listing = draft.to_listing()
    store.add(listing)
    return ListingResponse.from_listing(listing)


@router.post("/listings/refresh", response_model=List[ListingResponse])
async def refresh_listings(store: InMemoryListingStore = Depends(get_store)):
    """Pull-to-refresh: re-emit and return the full collection."""
    store.refresh()
    return [ListingResponse.from_listing(listing) for listing in store.snapshot()]


@router.get(
    "/listings/{listing_id}",
    response_model=ListingResponse,
    responses={404: {"model": ErrorResponse}}
)
async def get_listing(listing_id: str, store: InMemoryListingStore = Depends(get_store)):
    """Get a single listing by ID."""
    return ListingResponse.from_listing(store.get_or_raise(listing_id))


@router.delete("/listings/{listing_id}", status_code=204)
async def delete_listing(listing_id: str, store: InMemoryListingStore = Depends(get_store)):
    """
    Delete a listing.

    Deleting an unknown ID succeeds without changing anything.
    """
    store.delete(listing_id)
    return Response(status_code=204)
