"""
In-memory data models for the URL shortener.

Records live only for the lifetime of the process; the registry owns them.
"""

from .url import UrlRecord

__all__ = ["UrlRecord"]
