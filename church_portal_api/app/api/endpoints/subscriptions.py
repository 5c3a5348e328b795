"""
Newsletter subscription endpoint.

Forwards the submitted address to Mailchimp.  A missing address is
rejected with 400 before Mailchimp is contacted; a Mailchimp error
status is passed back to the client.
"""

from fastapi import APIRouter, Depends

from ...schemas.subscription import SubscribeRequest, SubscribeResponse
from ...services.subscription_service import SubscriptionService
from ..deps import get_subscription_service


router = APIRouter()


@router.post("", response_model=SubscribeResponse)
async def subscribe(
    payload: SubscribeRequest,
    service: SubscriptionService = Depends(get_subscription_service),
) -> SubscribeResponse:
    await service.subscribe(payload.email)
    return SubscribeResponse(message="Subscription successful")
