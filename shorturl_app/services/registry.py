"""
Registry: the single owner of every UrlRecord.

All reads and writes go through one lock, which makes
check-then-insert in create() and increment-and-timestamp in
resolve() atomic against concurrent requests. Every operation is an
in-memory step, so the lock is never held across I/O.
"""

import threading
from dataclasses import replace
from datetime import datetime, timedelta
from typing import Callable, Dict, List, Optional, Union

from shorturl_app.exceptions import (
    ConflictError,
    ExpiredError,
    InvalidInputError,
    NotFoundError,
)
from shorturl_app.models.url import UrlRecord
from shorturl_app.services.short_code_strategies import ShortCodeStrategy
from shorturl_app.utils import is_positive_number, is_valid_url, utc_now


class Registry:
    """
    In-memory shortcode -> UrlRecord store.
    
    Codes are never reused: expired records stay in the map for the
    lifetime of the process, so exists() and code generation see them.
    Callers always receive copies; the stored records are mutated only
    inside resolve().
    """
    
    def __init__(
        self,
        short_code_strategy: ShortCodeStrategy,
        default_validity_minutes: Union[int, float] = 30,
        clock: Callable[[], datetime] = utc_now
    ):
        """
        Args:
            short_code_strategy: Generates codes when the caller gives none
            default_validity_minutes: Lifetime used when validity is omitted
            clock: Returns the current UTC-aware datetime
        """
        self.short_code_strategy = short_code_strategy
        self.default_validity_minutes = default_validity_minutes
        self.clock = clock
        self._records: Dict[str, UrlRecord] = {}
        self._lock = threading.Lock()
    
    def create(
        self,
        original_url: str,
        validity_minutes: Optional[Union[int, float]] = None,
        requested_shortcode: Optional[str] = None
    ) -> UrlRecord:
        """Create a record, generating a code if none was requested.
        
        Raises:
            InvalidInputError: URL not absolute, or validity not a positive number
            ConflictError: requested_shortcode was ever issued before
            CapacityExhaustedError: generation ran out of attempts
        """
        if not is_valid_url(original_url):
            raise InvalidInputError("Invalid URL format")
        
        if validity_minutes is None:
            validity_minutes = self.default_validity_minutes
        elif not is_positive_number(validity_minutes):
            raise InvalidInputError("Validity must be a positive number of minutes")
        
        with self._lock:
            if requested_shortcode:
                if requested_shortcode in self._records:
                    raise ConflictError("Shortcode already exists")
                shortcode = requested_shortcode
            else:
                shortcode = self.short_code_strategy.generate(self._records.__contains__)
            
            created_at = self.clock()
            try:
                expires_at = created_at + timedelta(minutes=validity_minutes)
            except OverflowError:
                raise InvalidInputError("Validity is too large")
            record = UrlRecord(
                shortcode=shortcode,
                original_url=original_url,
                created_at=created_at,
                validity_minutes=validity_minutes,
                expires_at=expires_at,
            )
            self._records[shortcode] = record
            return replace(record)
    
    def resolve(self, shortcode: str) -> UrlRecord:
        """Look up a code for redirection and count the access.
        
        The click count and last-access time are updated in the same
        critical section as the expiry check; the returned copy already
        reflects this access.
        
        Raises:
            NotFoundError: code was never issued
            ExpiredError: code is past its validity window
        """
        with self._lock:
            record = self._records.get(shortcode)
            if record is None:
                raise NotFoundError("Shortcode not found")
            
            now = self.clock()
            if record.is_expired(now):
                raise ExpiredError("URL has expired")
            
            record.click_count += 1
            record.last_accessed_at = now
            return replace(record)
    
    def exists(self, shortcode: str) -> bool:
        """Membership check; does not look at expiry."""
        with self._lock:
            return shortcode in self._records
    
    def get(self, shortcode: str) -> UrlRecord:
        """Copy of one record, without counting an access."""
        with self._lock:
            record = self._records.get(shortcode)
            if record is None:
                raise NotFoundError("Shortcode not found")
            return replace(record)
    
    def records(self) -> List[UrlRecord]:
        """Copies of all records, in creation (insertion) order."""
        with self._lock:
            return [replace(record) for record in self._records.values()]
    
    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
