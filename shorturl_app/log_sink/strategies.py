"""
Log sink strategies using Strategy Pattern.
Allows switching between different destinations for log events
(console, remote log service, in-memory, null).

Emitting never raises: the service keeps working whether or not its
log events arrive.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Set

import httpx

from .models import LogEvent


logger = logging.getLogger(__name__)


class LogSinkStrategy(ABC):
    """
    Abstract base class for log sinks.
    
    All methods are async because the remote sink does network I/O.
    """
    
    @abstractmethod
    async def emit(self, event: LogEvent) -> None:
        """
        Hand an event to the sink without waiting for delivery.
        
        Args:
            event: LogEvent to deliver
        """
        pass
    
    async def close(self) -> None:
        """Release resources held by the sink"""
        pass


class ConsoleLogSink(LogSinkStrategy):
    """
    Forwards events into stdlib logging.
    
    Default backend: events show up next to the rest of the process
    output without any extra infrastructure.
    """
    
    LEVELS = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warn": logging.WARNING,
        "error": logging.ERROR,
        "fatal": logging.CRITICAL,
    }
    
    def __init__(self, logger_name: str = "shorturl_app.events"):
        self.logger = logging.getLogger(logger_name)
    
    async def emit(self, event: LogEvent) -> None:
        self.logger.log(
            self.LEVELS[event.level],
            "[%s/%s] %s", event.stack, event.package, event.message
        )


class RemoteLogSink(LogSinkStrategy):
    """
    POSTs each event as JSON to a remote log service.
    
    Delivery runs as a background task so the request that produced
    the event is not held up by the log service. Failures are reported
    through stdlib logging and dropped.
    """
    
    def __init__(self, url: str, timeout: float = 2.0, client: Optional[httpx.AsyncClient] = None):
        """
        Args:
            url: Endpoint accepting {stack, level, package, message, timestamp}
            timeout: Per-request timeout in seconds
            client: Pre-built client (tests inject one with a mock transport)
        """
        self.url = url
        self.client = client or httpx.AsyncClient(timeout=timeout)
        self._pending: Set[asyncio.Task] = set()
    
    async def emit(self, event: LogEvent) -> None:
        task = asyncio.create_task(self.send(event))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
    
    async def send(self, event: LogEvent) -> bool:
        """Deliver one event now. Returns True on a 2xx answer."""
        try:
            response = await self.client.post(self.url, json=event.model_dump(mode="json"))
            response.raise_for_status()
            return True
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Failed to send log event to %s: %s", self.url, e)
            return False
    
    async def flush(self) -> None:
        """Wait for every in-flight delivery to finish"""
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)
    
    async def close(self) -> None:
        await self.flush()
        await self.client.aclose()


class InMemoryLogSink(LogSinkStrategy):
    """
    Keeps events in a list.
    
    Used in tests and for local debugging.
    """
    
    def __init__(self):
        self.events: List[LogEvent] = []
    
    async def emit(self, event: LogEvent) -> None:
        self.events.append(event)
    
    def clear(self) -> None:
        self.events.clear()


class NullLogSink(LogSinkStrategy):
    """
    Null Object Pattern - sink that drops everything.
    """
    
    async def emit(self, event: LogEvent) -> None:
        pass
