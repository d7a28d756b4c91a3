"""
Factory for creating log sink instances.
Simple, clean factory with singleton caching.
"""

import logging
from enum import Enum
from .strategies import (
    LogSinkStrategy,
    ConsoleLogSink,
    RemoteLogSink,
    InMemoryLogSink,
    NullLogSink,
)
from shorturl_app.config import settings


logger = logging.getLogger(__name__)


class LogSinkBackend(Enum):
    """Available log sink backends"""
    CONSOLE = "console"
    REMOTE = "remote"
    MEMORY = "memory"
    NULL = "null"


class LogSinkFactory:
    """
    Simple factory for creating log sink instances.
    
    Uses Singleton Pattern - creates instance once, reuses it.
    Gets configuration from settings (not passed as parameters).
    """
    
    _instance: LogSinkStrategy = None  # Single cached instance
    
    @classmethod
    def create(cls, backend: LogSinkBackend) -> LogSinkStrategy:
        """
        Create or return cached log sink instance.
        
        Args:
            backend: Type of log sink backend (from enum)
            
        Returns:
            Singleton log sink instance
        """
        if cls._instance is not None:
            return cls._instance
        
        if backend == LogSinkBackend.CONSOLE:
            cls._instance = ConsoleLogSink()
            
        elif backend == LogSinkBackend.REMOTE:
            cls._instance = RemoteLogSink(
                url=settings.log_service_url,
                timeout=settings.log_service_timeout
            )
            
        elif backend == LogSinkBackend.MEMORY:
            cls._instance = InMemoryLogSink()
            
        elif backend == LogSinkBackend.NULL:
            cls._instance = NullLogSink()
            
        else:
            raise ValueError(f"Unknown log sink backend: {backend}")
        
        logger.info("%s log sink initialized", backend.value)
        return cls._instance
    
    @classmethod
    def clear_instance(cls):
        """Clear cached instance (for testing)"""
        cls._instance = None
