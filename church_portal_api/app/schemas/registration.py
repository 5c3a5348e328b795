"""
Pydantic models for event registrations.

``RegistrationCreate`` is the body of ``POST /api/register``; ``name``
and ``email`` must be present, the remaining contact fields default to
empty strings.  ``RegistrationRead`` adds the record ``id`` and the
check‑in flag ``check``.
"""

from typing import Optional

from pydantic import BaseModel, Field


class RegistrationBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["Grace Mensah"])
    email: str = Field(..., min_length=1, examples=["grace@example.com"])
    location: str = Field("", examples=["Accra"])
    church: str = Field("", examples=["Calvary Chapel"])
    phone: str = Field("", examples=["+233 20 000 0000"])


class RegistrationCreate(RegistrationBase):
    """Schema for registering an attendee."""
    pass


class RegistrationRead(RegistrationBase):
    """Schema for reading a registration from the API."""

    id: str
    check: bool = False


class RegistrationResponse(BaseModel):
    message: str
    user: Optional[RegistrationRead] = None
