"""
Top‑level API router.

This router aggregates the resource routers (registrations,
subscriptions, blog posts, events) and is included by the application
under the ``/api`` prefix.  When a new resource is added, include its
router here.
"""

from fastapi import APIRouter

from .endpoints import blogs, events, health, registrations, subscriptions

router = APIRouter()

router.include_router(registrations.router, prefix="/register", tags=["registrations"])
router.include_router(subscriptions.router, prefix="/subscribe", tags=["subscriptions"])
router.include_router(blogs.router, prefix="/blogs", tags=["blogs"])
router.include_router(events.router, prefix="/events", tags=["events"])
router.include_router(health.router, prefix="/health", tags=["health"])
