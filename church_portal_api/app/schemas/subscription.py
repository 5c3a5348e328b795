"""Pydantic models for the mailing‑list subscription endpoint."""

from typing import Optional

from pydantic import BaseModel, Field


class SubscribeRequest(BaseModel):
    # Optional at the schema level so a missing address is reported by
    # the subscription service as "Email is required".
    email: Optional[str] = Field(None, examples=["friend@example.com"])


class SubscribeResponse(BaseModel):
    message: str
