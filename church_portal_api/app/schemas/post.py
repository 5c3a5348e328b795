"""
Pydantic models for blog posts.

Posts are created and updated from multipart forms (so the request
side is handled by ``Form``/``File`` parameters in the router); the
models here describe what the API returns.  ``image`` is the storage
key of the attached picture and ``image_url`` the public path it is
served from.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class PostRead(BaseModel):
    id: str
    title: str = Field(..., examples=["Sunday service recap"])
    content: str = Field(..., examples=["What a morning it was..."])
    image: Optional[str] = Field(None, examples=["1718000000000-3fa2b9c1.jpg"])
    image_url: Optional[str] = Field(None, examples=["/uploads/1718000000000-3fa2b9c1.jpg"])
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PostPage(BaseModel):
    """One page of posts plus the total number of matching posts."""

    blogs: List[PostRead]
    total: int
