"""Persistence for event registrations."""

from ..core.db import REGISTRATIONS
from .base import MongoRepository


class RegistrationRepository(MongoRepository):
    collection_name = REGISTRATIONS
