from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union


@dataclass
class UrlRecord:
    """
    One shortcode and everything known about it.
    
    shortcode, original_url, created_at, validity_minutes and expires_at
    are fixed at creation. click_count and last_accessed_at change only
    through Registry.resolve(), together, under the registry lock.
    Records are never deleted: expired ones stay queryable for stats.
    """
    shortcode: str
    original_url: str
    created_at: datetime
    validity_minutes: Union[int, float]
    expires_at: datetime
    click_count: int = 0
    last_accessed_at: Optional[datetime] = None

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at
