"""
Registration endpoints.

Attendees register with their contact details; staff list the
registrations and check people in at the door.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from ...schemas.registration import RegistrationCreate, RegistrationRead, RegistrationResponse
from ...services.registration_service import RegistrationService
from ..deps import get_registration_service


router = APIRouter()


@router.post("", response_model=RegistrationResponse, status_code=status.HTTP_201_CREATED)
async def register(
    registration: RegistrationCreate,
    service: RegistrationService = Depends(get_registration_service),
) -> RegistrationResponse:
    """Register an attendee.

    ``name`` and ``email`` are required; a missing field yields 400.
    New registrations always start with ``check`` set to false.
    """
    user = await service.register(registration)
    return RegistrationResponse(message="User registered successfully", user=user)


@router.get("", response_model=List[RegistrationRead])
async def list_registrations(
    service: RegistrationService = Depends(get_registration_service),
) -> List[RegistrationRead]:
    return await service.list_registrations()


@router.patch("/{registration_id}", response_model=RegistrationResponse)
async def check_in(
    registration_id: str,
    service: RegistrationService = Depends(get_registration_service),
) -> RegistrationResponse:
    """Check an attendee in.

    Sets ``check`` to true; calling it again leaves it true.  Returns
    404 if the registration does not exist.
    """
    user = await service.check_in(registration_id)
    return RegistrationResponse(message="User checked in successfully", user=user)
