"""Persistence for blog posts."""

import re
from typing import Any, Dict, Optional

from ..core.db import POSTS
from .base import MongoRepository


class PostRepository(MongoRepository):
    collection_name = POSTS
    timestamps = True

    @staticmethod
    def title_filter(search: Optional[str]) -> Dict[str, Any]:
        """Case‑insensitive substring match on ``title``.

        An empty search matches every post.  The text is escaped so
        that characters such as ``.`` or ``(`` match literally.
        """
        if not search:
            return {}
        return {"title": {"$regex": re.escape(search), "$options": "i"}}
