"""Notification and system log models shared with the backend."""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Notification(BaseModel):
    """A notification as stored by the backend."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    title: str
    body: str
    type: Optional[str] = None
    read: bool
    metadata: Optional[Any] = None
    createdBy: Optional[str] = None
    createdAt: str
    updatedAt: str


class LogEntry(BaseModel):
    """One parsed line of a backend log file."""
    timestamp: str
    level: str
    message: str
    raw: str


class LogsResponse(BaseModel):
    count: int
    entries: List[LogEntry]


class NotificationsResponse(BaseModel):
    count: int
    items: List[Notification]
