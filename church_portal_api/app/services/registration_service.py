"""
Business logic for event registrations.

Registrations are created by attendees and later checked in at the
door.  Check‑in is one‑way: it only ever sets the ``check`` flag to
true, so repeating it has no further effect.  Registrations are never
deleted through the API.
"""

import logging
from typing import List

from ..core.db import parse_object_id
from ..core.errors import NotFoundError, ValidationError
from ..repositories.registration_repository import RegistrationRepository
from ..schemas.registration import RegistrationCreate, RegistrationRead


logger = logging.getLogger(__name__)


class RegistrationService:
    """Сервис регистраций участников."""

    def __init__(self, repository: RegistrationRepository) -> None:
        self.repository = repository

    async def register(self, data: RegistrationCreate) -> RegistrationRead:
        record = await self.repository.insert({**data.model_dump(), "check": False})
        logger.info("Created registration %s", record["id"])
        return RegistrationRead(**record)

    async def list_registrations(self) -> List[RegistrationRead]:
        records = await self.repository.find_all()
        return [RegistrationRead(**record) for record in records]

    async def check_in(self, registration_id: str) -> RegistrationRead:
        """Mark a registration as checked in and return it.

        Raises ``ValidationError`` if ``registration_id`` is not a valid
        id and ``NotFoundError`` if no registration has it; nothing is
        created in either case.
        """
        if parse_object_id(registration_id) is None:
            raise ValidationError("Invalid registration id")
        record = await self.repository.update_by_id(registration_id, {"check": True})
        if record is None:
            raise NotFoundError("User not found")
        logger.info("Checked in registration %s", registration_id)
        return RegistrationRead(**record)
