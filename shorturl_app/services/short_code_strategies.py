"""
Short code generation strategies for URL shortener.
Uses Strategy Pattern to allow different generation algorithms.
"""

import secrets
import string
from abc import ABC, abstractmethod
from typing import Callable

from shorturl_app.exceptions import CapacityExhaustedError


class ShortCodeStrategy(ABC):
    """
    Abstract base class for short code generation strategies.
    
    Subclasses only say how to draw one candidate; the collision
    retry loop and its budget live here.
    """
    
    def __init__(self, max_attempts: int = 10):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.max_attempts = max_attempts
    
    def generate(self, is_taken: Callable[[str], bool]) -> str:
        """
        Draw candidates until one is free.
        
        Args:
            is_taken: Membership check against every code ever issued
            
        Returns:
            A short code for which is_taken() returned False
            
        Raises:
            CapacityExhaustedError: If every attempt collided
        """
        for _ in range(self.max_attempts):
            short_code = self._candidate()
            if not is_taken(short_code):
                return short_code
        
        raise CapacityExhaustedError(
            f"Could not generate unique short code after {self.max_attempts} attempts"
        )
    
    @abstractmethod
    def _candidate(self) -> str:
        """Return one random candidate code"""
        pass


class HexShortCodeStrategy(ShortCodeStrategy):
    """
    Random bytes rendered as lowercase hex.
    
    3 bytes -> 6 characters -> 16^6 (~16.7M) codes, so a collision is
    rare until the registry holds millions of records.
    """
    
    def __init__(self, num_bytes: int = 3, max_attempts: int = 10):
        super().__init__(max_attempts=max_attempts)
        self.num_bytes = num_bytes
    
    def _candidate(self) -> str:
        return secrets.token_hex(self.num_bytes)


class RandomShortCodeStrategy(ShortCodeStrategy):
    """Random alphanumeric string (62 symbols per position)."""
    
    def __init__(self, length: int = 6, max_attempts: int = 10):
        super().__init__(max_attempts=max_attempts)
        self.length = length
        self.characters = string.ascii_letters + string.digits
    
    def _candidate(self) -> str:
        return ''.join(secrets.choice(self.characters) for _ in range(self.length))
