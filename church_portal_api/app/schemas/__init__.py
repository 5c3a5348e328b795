"""
Pydantic schema definitions for API payloads.

Each resource (registrations, posts, events) defines its own Pydantic
models for request and response bodies.  Schemas are separated from
the stored MongoDB documents to decouple API representation from
persistence.
"""
