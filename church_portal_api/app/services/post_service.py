"""
Business logic for blog posts.

A post may carry one image, owned exclusively by that post.  The
service keeps the image file and the record in step:

* on create, an attached file is stored first and its key saved on
  the new record;
* on update, a newly attached file replaces the old one (the old file
  is deleted, the new one stored) while text fields are merged, so an
  omitted or empty title/content keeps its previous value;
* on delete, the image file is removed before the record.

File operations and the database write are not atomic.  If the
database write fails after a file was stored, the file is left in the
uploads directory.
"""

import logging
from typing import Any, Dict, List, Optional

from ..core.errors import NotFoundError
from ..repositories.base import skip_for_page
from ..repositories.post_repository import PostRepository
from ..schemas.post import PostPage, PostRead
from .media_store import MediaStore


logger = logging.getLogger(__name__)


class PostService:
    """Сервис для управления записями блога."""

    def __init__(self, repository: PostRepository, media: MediaStore, page_size: int = 28) -> None:
        self.repository = repository
        self.media = media
        self.page_size = page_size

    def _to_read(self, record: Dict[str, Any]) -> PostRead:
        image = record.get("image") or None
        return PostRead(
            id=record["id"],
            title=record.get("title") or "",
            content=record.get("content") or "",
            image=image,
            image_url=self.media.url_for(image),
            created_at=record.get("created_at"),
            updated_at=record.get("updated_at"),
        )

    async def create_post(
        self,
        title: str,
        content: str,
        image: Optional[bytes] = None,
        image_name: Optional[str] = None,
    ) -> PostRead:
        """Create a post, storing ``image`` first when one is attached."""
        image_key = None
        if image is not None:
            image_key = await self.media.store(image, image_name)
        record = await self.repository.insert(
            {"title": title, "content": content, "image": image_key}
        )
        logger.info("Created post %s '%s'", record["id"], title)
        return self._to_read(record)

    async def list_posts(self) -> List[PostRead]:
        return [self._to_read(record) for record in await self.repository.find_all()]

    async def list_page(self, page: int = 1, limit: Optional[int] = None) -> PostPage:
        """Return one page of posts in insertion order and the total count."""
        limit = limit or self.page_size
        records = await self.repository.find_all(skip=skip_for_page(page, limit), limit=limit)
        total = await self.repository.count()
        return PostPage(blogs=[self._to_read(record) for record in records], total=total)

    async def search(self, query: Optional[str], page: int = 1, limit: Optional[int] = None) -> PostPage:
        """Page through posts whose title contains ``query`` (any case)."""
        limit = limit or self.page_size
        filters = PostRepository.title_filter(query)
        records = await self.repository.find_all(filters, skip=skip_for_page(page, limit), limit=limit)
        total = await self.repository.count(filters)
        return PostPage(blogs=[self._to_read(record) for record in records], total=total)

    async def get_post(self, post_id: str) -> PostRead:
        record = await self.repository.find_by_id(post_id)
        if record is None:
            raise NotFoundError("Blog not found")
        return self._to_read(record)

    async def update_post(
        self,
        post_id: str,
        title: Optional[str] = None,
        content: Optional[str] = None,
        image: Optional[bytes] = None,
        image_name: Optional[str] = None,
    ) -> PostRead:
        """Merge the supplied fields into an existing post.

        The image is replaced only when a new file is attached; the
        previous file is deleted before the new one is stored.
        """
        record = await self.repository.find_by_id(post_id)
        if record is None:
            raise NotFoundError("Blog not found")

        changes: Dict[str, Any] = {}
        if title:
            changes["title"] = title
        if content:
            changes["content"] = content
        if image is not None:
            await self.media.delete(record.get("image"))
            changes["image"] = await self.media.store(image, image_name)

        updated = await self.repository.update_by_id(post_id, changes)
        if updated is None:
            # Deleted by a concurrent request after the lookup above.
            raise NotFoundError("Blog not found")
        logger.info("Updated post %s (%s)", post_id, ", ".join(sorted(changes)) or "no changes")
        return self._to_read(updated)

    async def delete_post(self, post_id: str) -> None:
        """Delete a post and its image file.

        Raises ``NotFoundError`` if the post does not exist.
        """
        record = await self.repository.find_by_id(post_id)
        if record is None:
            raise NotFoundError("Blog not found")
        await self.media.delete(record.get("image"))
        await self.repository.delete_by_id(post_id)
        logger.info("Deleted post %s", post_id)
