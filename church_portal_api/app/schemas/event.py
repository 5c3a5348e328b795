"""
Pydantic models for event data.

Events are created from multipart forms; ``EventRead`` is what the
API returns.  ``date`` is stored and returned as naive UTC, while
``time`` is a free‑form label such as ``"10:00 AM"``.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class EventRead(BaseModel):
    id: str
    title: str = Field(..., examples=["Youth Camp"])
    date: datetime = Field(..., examples=["2026-12-01T09:00:00"])
    time: str = Field("", examples=["9:00 AM"])
    image: Optional[str] = None
    image_url: Optional[str] = None
