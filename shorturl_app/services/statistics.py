"""
Statistics View: read-only reporting over the registry.

Holds no state of its own. The only value it computes is is_expired,
evaluated against the registry clock on every call.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from shorturl_app.models.url import UrlRecord
from shorturl_app.services.registry import Registry


@dataclass(frozen=True)
class StatsSnapshot:
    shortcode: str
    original_url: str
    created_at: datetime
    expires_at: datetime
    click_count: int
    last_accessed_at: Optional[datetime]
    is_expired: bool


class StatisticsView:
    
    def __init__(self, registry: Registry):
        self.registry = registry
    
    def get_one(self, shortcode: str) -> StatsSnapshot:
        """Raises NotFoundError if the code was never created."""
        record = self.registry.get(shortcode)
        return self._snapshot(record, self.registry.clock())
    
    def get_all(self) -> List[StatsSnapshot]:
        """Every record ever created, newest first.
        
        sorted() is stable, so records created in the same instant keep
        their creation order relative to each other.
        """
        records = self.registry.records()
        now = self.registry.clock()
        ordered = sorted(records, key=lambda record: record.created_at, reverse=True)
        return [self._snapshot(record, now) for record in ordered]
    
    @staticmethod
    def _snapshot(record: UrlRecord, now: datetime) -> StatsSnapshot:
        return StatsSnapshot(
            shortcode=record.shortcode,
            original_url=record.original_url,
            created_at=record.created_at,
            expires_at=record.expires_at,
            click_count=record.click_count,
            last_accessed_at=record.last_accessed_at,
            is_expired=record.is_expired(now),
        )
