"""
Event endpoints.

Events are created from multipart forms (``title``, ``date``, ``time``
and an optional ``image``).  The listing only shows upcoming events,
ordered by date.
"""

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile, status

from ...schemas.event import EventRead
from ...services.event_service import EventService
from ..deps import get_event_service
from .uploads import read_upload


router = APIRouter()


@router.post("", response_model=EventRead, status_code=status.HTTP_201_CREATED)
async def create_event(
    title: str = Form(..., min_length=1),
    date: datetime = Form(...),
    time: str = Form(..., min_length=1),
    image: Optional[UploadFile] = File(None),
    service: EventService = Depends(get_event_service),
) -> EventRead:
    """Create an event.

    ``date`` accepts ISO 8601 (``2026-12-01T09:00:00Z`` or
    ``2026-12-01``); times with an offset are converted to UTC.
    """
    data, filename = await read_upload(image)
    return await service.create_event(title, date, time, image=data, image_name=filename)


@router.get("", response_model=List[EventRead])
async def list_events(service: EventService = Depends(get_event_service)) -> List[EventRead]:
    """Upcoming events (dated now or later), soonest first."""
    return await service.list_upcoming()


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(event_id: str, service: EventService = Depends(get_event_service)) -> Response:
    await service.delete_event(event_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
