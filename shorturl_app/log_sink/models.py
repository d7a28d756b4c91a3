"""
Data models for log events.
"""

from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from shorturl_app.utils import iso_z


LogStack = Literal["backend", "frontend"]
LogLevel = Literal["debug", "info", "warn", "error", "fatal"]


class LogEvent(BaseModel):
    """
    One notification for the logging collaborator.
    
    Published for request outcomes and server lifecycle events.
    An unknown stack or level fails validation.
    """
    
    stack: LogStack = Field(..., description="Which side of the system emitted the event")
    level: LogLevel = Field(..., description="Severity")
    package: str = Field(..., description="Component context (e.g. shorturls, statistics, server)")
    message: str = Field(..., description="Descriptive log message")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event happened"
    )
    
    @field_serializer("timestamp")
    def serialize_timestamp(self, value: datetime) -> str:
        return iso_z(value)
    
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "stack": "backend",
                "level": "info",
                "package": "shorturls",
                "message": "POST /shorturls - 201 (3ms)",
                "timestamp": "2025-10-29T10:30:00.000Z"
            }
        }
    )
