"""Helpers shared by endpoints that accept an optional image upload."""

from typing import Optional, Tuple

from fastapi import UploadFile


async def read_upload(upload: Optional[UploadFile]) -> Tuple[Optional[bytes], Optional[str]]:
    """Return ``(data, filename)`` of an uploaded file, or ``(None, None)``.

    Browsers send an empty file part with no filename when the file
    input was left blank; that counts as no upload.
    """
    if upload is None or not upload.filename:
        return None, None
    try:
        data = await upload.read()
    finally:
        await upload.close()
    return data, upload.filename
