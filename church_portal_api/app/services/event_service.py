"""
Business logic for events.

Events follow the same image lifecycle as blog posts, without an
update operation: an attached picture is stored on create and removed
together with the event.  Only upcoming events (dated now or later)
are listed, soonest first.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..core.errors import NotFoundError
from ..repositories.base import to_naive_utc
from ..repositories.event_repository import EventRepository
from ..schemas.event import EventRead
from .media_store import MediaStore


logger = logging.getLogger(__name__)


class EventService:
    """Сервис для управления мероприятиями."""

    def __init__(self, repository: EventRepository, media: MediaStore) -> None:
        self.repository = repository
        self.media = media

    def _to_read(self, record: Dict[str, Any]) -> EventRead:
        image = record.get("image") or None
        return EventRead(
            id=record["id"],
            title=record.get("title") or "",
            date=record["date"],
            time=record.get("time") or "",
            image=image,
            image_url=self.media.url_for(image),
        )

    async def create_event(
        self,
        title: str,
        date: datetime,
        time: str,
        image: Optional[bytes] = None,
        image_name: Optional[str] = None,
    ) -> EventRead:
        """Создать мероприятие, предварительно сохранив изображение."""
        image_key = None
        if image is not None:
            image_key = await self.media.store(image, image_name)
        record = await self.repository.insert(
            {"title": title, "date": to_naive_utc(date), "time": time, "image": image_key}
        )
        logger.info("Created event %s '%s' on %s", record["id"], title, record["date"])
        return self._to_read(record)

    async def list_upcoming(self) -> List[EventRead]:
        return [self._to_read(record) for record in await self.repository.find_upcoming()]

    async def delete_event(self, event_id: str) -> None:
        """Удалить мероприятие вместе с его изображением.

        Если мероприятие не найдено, возбуждает ``NotFoundError``.
        """
        record = await self.repository.find_by_id(event_id)
        if record is None:
            raise NotFoundError("Event not found")
        await self.media.delete(record.get("image"))
        await self.repository.delete_by_id(event_id)
        logger.info("Deleted event %s", event_id)
