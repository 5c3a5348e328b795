"""
FastAPI dependencies giving route handlers access to services.

Services are created once at application startup and kept on
``app.state``; these helpers fetch them from the current request.
"""

from fastapi import Request

from ..services.event_service import EventService
from ..services.post_service import PostService
from ..services.registration_service import RegistrationService
from ..services.subscription_service import SubscriptionService


def get_registration_service(request: Request) -> RegistrationService:
    return request.app.state.registration_service


def get_post_service(request: Request) -> PostService:
    return request.app.state.post_service


def get_event_service(request: Request) -> EventService:
    return request.app.state.event_service


def get_subscription_service(request: Request) -> SubscriptionService:
    return request.app.state.subscription_service
