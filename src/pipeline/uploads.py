"""
Tile image uploads.

Accepts JPEG, PNG and WebP payloads up to 10 MiB, checks that the bytes
really decode as the declared format, and stores them in the uploads
directory under a unique name. The returned path is a stable image
reference usable as a Tile image_url.
"""

from __future__ import annotations

import io
import logging
import mimetypes
import os
import time
import uuid
from pathlib import Path
from typing import Optional, Union

from PIL import Image, UnidentifiedImageError

from tile_showroom.validation import FileTooLarge, InvalidFileType, StorageError

logger = logging.getLogger(__name__)

MAX_UPLOAD_BYTES = 10 * 1024 * 1024

# content type -> (Pillow format, file extension)
ACCEPTED_TYPES = {
    "image/jpeg": ("JPEG", "jpg"),
    "image/png": ("PNG", "png"),
    "image/webp": ("WEBP", "webp"),
}


def get_uploads_dir(uploads_dir: Optional[Path] = None) -> Path:
    """
    Get the directory for storing uploaded images.

    Returns:
        The directory, created if it doesn't exist.
    """
    if uploads_dir is None:
        from tile_showroom.generators.textures.texture_settings import SHOWROOM_SETTINGS
        uploads_dir = SHOWROOM_SETTINGS.get_uploads_dir()
    uploads_dir = Path(uploads_dir)
    uploads_dir.mkdir(parents=True, exist_ok=True)
    return uploads_dir


def _normalize_type(content_type: str) -> str:
    """Media type without parameters, lowercased ('Image/PNG; q=1' -> 'image/png')."""
    return (content_type or "").split(";")[0].strip().lower()


def _check_image(data: bytes, content_type: str, expected_format: str) -> None:
    try:
        with Image.open(io.BytesIO(data)) as image:
            actual_format = image.format
            image.verify()
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as e:
        raise InvalidFileType(content_type, f"Payload is not a readable image: {e}") from e
    if actual_format != expected_format:
        raise InvalidFileType(
            content_type,
            f"Payload is {actual_format or 'unknown'} but was declared as {content_type}",
        )


class UploadStore:
    """Validate and store uploaded tile images."""

    def __init__(self, uploads_dir: Optional[Path] = None, max_bytes: int = MAX_UPLOAD_BYTES):
        self._uploads_dir = Path(uploads_dir) if uploads_dir is not None else None
        self.max_bytes = max_bytes

    @property
    def uploads_dir(self) -> Path:
        return get_uploads_dir(self._uploads_dir)

    def store(self, data: bytes, content_type: str) -> str:
        """
        Validate and store an image payload.

        Args:
            data: Raw image bytes
            content_type: Declared media type

        Returns:
            Path of the stored image

        Raises:
            InvalidFileType: If the type is not accepted or the bytes don't match it
            FileTooLarge: If the payload exceeds the size limit
            StorageError: If the file cannot be written
        """
        content_type = _normalize_type(content_type)
        accepted = ACCEPTED_TYPES.get(content_type)
        if accepted is None:
            raise InvalidFileType(content_type)
        if len(data) > self.max_bytes:
            raise FileTooLarge(len(data), self.max_bytes)
        pillow_format, extension = accepted
        _check_image(data, content_type, pillow_format)

        timestamp = int(time.time() * 1000)
        filename = f"tile-{timestamp}-{uuid.uuid4().hex[:8]}.{extension}"
        try:
            directory = self.uploads_dir
        except OSError as e:
            raise StorageError(f"Uploads directory unavailable: {e}") from e
        file_path = directory / filename
        tmp_path = directory / (filename + ".part")
        try:
            with open(tmp_path, 'wb') as f:
                f.write(data)
            os.replace(tmp_path, file_path)
        except OSError as e:
            try:
                tmp_path.unlink()
            except OSError:
                pass
            raise StorageError(f"Failed to store upload '{filename}': {e}") from e

        logger.info(f"Stored upload {filename} ({len(data)} bytes)")
        return str(file_path)

    def store_file(self, source: Union[str, Path], content_type: Optional[str] = None) -> str:
        """
        Store an image file from disk.

        Args:
            source: Path to the image
            content_type: Media type; guessed from the extension when omitted

        Raises:
            InvalidFileType / FileTooLarge / StorageError: As for store()
        """
        source = Path(source)
        if content_type is None:
            content_type = mimetypes.guess_type(source.name)[0] or ""
        content_type = _normalize_type(content_type)
        if content_type not in ACCEPTED_TYPES:
            raise InvalidFileType(content_type or "unknown")
        try:
            size = source.stat().st_size
            if size > self.max_bytes:
                raise FileTooLarge(size, self.max_bytes)
            data = source.read_bytes()
        except OSError as e:
            raise StorageError(f"Could not read '{source}': {e}") from e
        return self.store(data, content_type)
