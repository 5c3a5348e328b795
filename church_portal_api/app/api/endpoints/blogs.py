"""
Blog post endpoints.

Posts are submitted as multipart forms with ``title``, ``content`` and
an optional ``image`` file.  Listing comes in three forms: every post
(``GET /``), one page of posts with the total count (``GET /main``) and
a paginated case‑insensitive title search (``GET /search``).
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Query, Response, UploadFile, status

from ...schemas.post import PostPage, PostRead
from ...services.post_service import PostService
from ..deps import get_post_service
from .uploads import read_upload


router = APIRouter()


@router.post("", response_model=PostRead, status_code=status.HTTP_201_CREATED)
async def create_post(
    title: str = Form(..., min_length=1),
    content: str = Form(..., min_length=1),
    image: Optional[UploadFile] = File(None),
    service: PostService = Depends(get_post_service),
) -> PostRead:
    data, filename = await read_upload(image)
    return await service.create_post(title, content, image=data, image_name=filename)


@router.get("", response_model=List[PostRead])
async def list_posts(service: PostService = Depends(get_post_service)) -> List[PostRead]:
    return await service.list_posts()


@router.get("/main", response_model=PostPage)
async def list_posts_page(
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    service: PostService = Depends(get_post_service),
) -> PostPage:
    """Return one page of posts (28 per page by default) and the total."""
    return await service.list_page(page=page, limit=limit)


@router.get("/search", response_model=PostPage)
async def search_posts(
    search_query: Optional[str] = Query(None, alias="searchQuery"),
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    service: PostService = Depends(get_post_service),
) -> PostPage:
    """Find posts whose title contains ``searchQuery``, ignoring case.

    An empty query matches every post.
    """
    return await service.search(search_query, page=page, limit=limit)


@router.get("/{post_id}", response_model=PostRead)
async def get_post(post_id: str, service: PostService = Depends(get_post_service)) -> PostRead:
    return await service.get_post(post_id)


@router.put("/{post_id}", response_model=PostRead)
async def update_post(
    post_id: str,
    title: Optional[str] = Form(None),
    content: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    service: PostService = Depends(get_post_service),
) -> PostRead:
    """Update a post.

    Omitted or empty ``title``/``content`` keep their current values.
    Attaching a new ``image`` replaces the old file, which is deleted.
    """
    data, filename = await read_upload(image)
    return await service.update_post(post_id, title=title, content=content, image=data, image_name=filename)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(post_id: str, service: PostService = Depends(get_post_service)) -> Response:
    await service.delete_post(post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
