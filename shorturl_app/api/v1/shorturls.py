from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import RedirectResponse
from shorturl_app.dependencies import get_registry
from shorturl_app.exceptions import (
    CapacityExhaustedError,
    ConflictError,
    ExpiredError,
    InvalidInputError,
    NotFoundError,
)
from shorturl_app.schemas.url import ShortURLCreate, ShortURLCreated
from shorturl_app.services.registry import Registry

router = APIRouter(prefix="/shorturls", tags=["shorturls"])


@router.post("", response_model=ShortURLCreated, status_code=status.HTTP_201_CREATED)
async def create_short_url(
    payload: ShortURLCreate,
    registry: Registry = Depends(get_registry)
):
    """Create a short URL, with a generated code unless one is requested"""
    if not payload.url:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="URL is required")

    try:
        record = registry.create(
            payload.url,
            validity_minutes=payload.validity,
            requested_shortcode=payload.shortcode or None,
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)
    except CapacityExhaustedError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=e.message)

    return ShortURLCreated.from_record(record)


@router.get("/{shortcode}")
async def redirect_to_original_url(
    shortcode: str,
    registry: Registry = Depends(get_registry)
):
    """
    Redirect to the original URL.
    
    The click is counted by the same registry call that checks expiry,
    so an expired code never moves the counters.
    """
    try:
        record = registry.resolve(shortcode)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except ExpiredError as e:
        raise HTTPException(status_code=status.HTTP_410_GONE, detail=e.message)

    return RedirectResponse(url=record.original_url, status_code=status.HTTP_302_FOUND)
