"""
Local disk storage for uploaded images.

Files are written to a single uploads directory under generated
names of the form ``<epoch-ms>-<random hex><ext>`` so that the
original extension is kept while names stay unique.  The storage key
persisted on a record is that bare filename; :meth:`MediaStore.url_for`
turns it into the public path served by the static files mount.

Disk I/O runs in the threadpool so request handlers do not block the
event loop while files are written or removed.
"""

import logging
import time
import uuid
from pathlib import Path
from typing import Optional

from fastapi.concurrency import run_in_threadpool

from ..core.errors import FileIoError


logger = logging.getLogger(__name__)


class MediaStore:
    """Store and delete uploaded files in ``base_dir``."""

    def __init__(self, base_dir: str, url_path: str = "/uploads") -> None:
        self.base_dir = Path(base_dir).resolve()
        self.url_path = "/" + url_path.strip("/")

    def ensure_directory(self) -> None:
        self.base_dir.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def generate_key(original_name: Optional[str]) -> str:
        suffix = Path(original_name or "").suffix.lower()
        return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}{suffix}"

    def path_for(self, key: str) -> Path:
        # Only the final path component is used so a stored key can never
        # point outside the uploads directory.
        return self.base_dir / Path(key).name

    def url_for(self, key: Optional[str]) -> Optional[str]:
        if not key:
            return None
        return f"{self.url_path}/{Path(key).name}"

    async def store(self, data: bytes, original_name: Optional[str]) -> str:
        """Write ``data`` under a new unique name and return its key."""
        key = self.generate_key(original_name)
        path = self.path_for(key)
        try:
            await run_in_threadpool(self._write, path, data)
        except OSError as exc:
            logger.error("Could not write upload %s: %s", path, exc)
            raise FileIoError("Error saving uploaded file", detail=str(exc)) from exc
        logger.info("Stored upload %s (%d bytes)", key, len(data))
        return key

    async def delete(self, key: Optional[str]) -> None:
        """Remove the file for ``key``.

        Deleting a key whose file is already gone (or an empty key) is a
        no‑op.
        """
        if not key:
            return
        path = self.path_for(key)
        try:
            await run_in_threadpool(path.unlink, missing_ok=True)
        except OSError as exc:
            logger.error("Could not delete upload %s: %s", path, exc)
            raise FileIoError("Error deleting stored file", detail=str(exc)) from exc
        logger.info("Deleted upload %s", key)

    def _write(self, path: Path, data: bytes) -> None:
        self.ensure_directory()
        path.write_bytes(data)
