from pydantic import BaseModel, Field, ConfigDict, StrictFloat, StrictInt
from typing import List, Optional, Union
from shorturl_app.config import settings
from shorturl_app.models.url import UrlRecord
from shorturl_app.services.statistics import StatsSnapshot
from shorturl_app.utils import iso_z


def shortened_url(shortcode: str) -> str:
    return f"{settings.base_url}/shorturls/{shortcode}"


class ShortURLCreate(BaseModel):
    """Request body for POST /shorturls
    
    url is checked by the registry (not here) so that every bad URL
    gets the same 400 answer.
    """
    url: Optional[str] = Field(None, description="Original long URL")
    validity: Optional[Union[StrictInt, StrictFloat]] = Field(None, description="Minutes (default 30)")
    shortcode: Optional[str] = Field(None, description="Custom shortcode")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "url": "https://example.com/some/long/path",
                "validity": 30,
                "shortcode": "abc123"
            }
        }
    )


class ShortURLCreated(BaseModel):
    url: str
    shortcode: str
    validity: Union[int, float]
    shortenedUrl: str
    expiryDate: str

    @classmethod
    def from_record(cls, record: UrlRecord) -> "ShortURLCreated":
        return cls(
            url=record.original_url,
            shortcode=record.shortcode,
            validity=record.validity_minutes,
            shortenedUrl=shortened_url(record.shortcode),
            expiryDate=iso_z(record.expires_at),
        )


class URLStats(BaseModel):
    shortcode: str
    originalUrl: str
    shortenedUrl: str
    createdAt: str
    expiryDate: str
    clicks: int
    lastAccessed: Optional[str] = None
    isExpired: bool

    @classmethod
    def from_snapshot(cls, snapshot: StatsSnapshot) -> "URLStats":
        return cls(
            shortcode=snapshot.shortcode,
            originalUrl=snapshot.original_url,
            shortenedUrl=shortened_url(snapshot.shortcode),
            createdAt=iso_z(snapshot.created_at),
            expiryDate=iso_z(snapshot.expires_at),
            clicks=snapshot.click_count,
            lastAccessed=iso_z(snapshot.last_accessed_at) if snapshot.last_accessed_at else None,
            isExpired=snapshot.is_expired,
        )


class StatisticsResponse(BaseModel):
    totalUrls: int
    urls: List[URLStats]
