"""
FastAPI dependencies for dependency injection.

This module provides the process-wide registry, statistics view and
log sink. Tests swap them through app.dependency_overrides.
"""

from functools import lru_cache

from fastapi import Depends

from shorturl_app.config import settings
from shorturl_app.log_sink import LogSinkBackend, LogSinkFactory, LogSinkStrategy
from shorturl_app.services.registry import Registry
from shorturl_app.services.short_code_factory import ShortCodeFactory
from shorturl_app.services.statistics import StatisticsView


@lru_cache()
def get_registry() -> Registry:
    """
    Get the registry (singleton).
    
    Every request must see the same store, so this is built once.
    """
    return Registry(
        short_code_strategy=ShortCodeFactory.create_strategy(),
        default_validity_minutes=settings.default_validity_minutes,
    )


def get_statistics_view(registry: Registry = Depends(get_registry)) -> StatisticsView:
    """Statistics view over the injected registry (stateless, cheap to build)"""
    return StatisticsView(registry)


@lru_cache()
def get_log_sink() -> LogSinkStrategy:
    """
    Get log sink instance (singleton).
    
    Factory gets config from settings internally.
    """
    backend = LogSinkBackend(settings.log_sink_backend)
    return LogSinkFactory.create(backend)
