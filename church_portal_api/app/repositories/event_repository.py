"""Persistence for events."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pymongo import ASCENDING

from ..core.db import EVENTS
from .base import MongoRepository, utcnow


class EventRepository(MongoRepository):
    collection_name = EVENTS

    async def find_upcoming(self, now: Optional[datetime] = None) -> List[Dict[str, Any]]:
        """Events dated now or later, soonest first."""
        return await self.find_all(
            {"date": {"$gte": now or utcnow()}},
            sort=[("date", ASCENDING)],
        )
