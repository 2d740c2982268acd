# models/auto_reply.py

from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field


class AutoReplyTemplate(BaseModel):
    subject: str
    body: str


class AutoReplyConfig(BaseModel):
    enabled: bool = True
    delay_minutes: int = Field(10, ge=0)
    template: AutoReplyTemplate


class AutoReplyConfigUpdate(BaseModel):
    """Partial update (PATCH); omitted fields keep their current value."""

    enabled: Optional[bool] = None
    delay_minutes: Optional[int] = Field(None, ge=0)
    template: Optional[AutoReplyTemplate] = None


class ScheduledNotification(BaseModel):
    """What to send and when. Dispatch is up to the host scheduler."""

    to: str
    subject: str
    body: str
    fire_at: datetime
    request_id: Optional[str] = None


class AutoReplyStatus(BaseModel):
    enabled: bool
    delay_minutes: int
    success_rate: int
    total_sent: int = 0
    last_sent: Optional[datetime] = None
