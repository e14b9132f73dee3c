"""Blob store for employee avatars: store an uploaded image, return its URL."""
from __future__ import annotations

import io
import logging
import os
from pathlib import Path
from typing import Callable, Optional, Protocol

from PIL import Image, UnidentifiedImageError
from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

from ..common.datetime_utils import now_local
from ..core.constants import (
    ALLOWED_AVATAR_EXTENSIONS,
    DEFAULT_AVATAR_EXTENSION,
    MAX_AVATAR_BYTES,
    UPLOAD_URL_PREFIX,
)
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


class AvatarStorage(Protocol):
    def save(self, upload: Optional[FileStorage]) -> str:
        raise NotImplementedError

    def delete(self, url: str) -> None:
        raise NotImplementedError


def avatar_extension(filename: Optional[str]) -> str:
    ext = os.path.splitext(secure_filename(filename or ""))[1].lower()
    return ext if ext in ALLOWED_AVATAR_EXTENSIONS else DEFAULT_AVATAR_EXTENSION


class LocalAvatarStorage(AvatarStorage):
    """Stores avatars as files under ``upload_dir``; URLs are ``/uploads/<name>``."""

    def __init__(
        self,
        upload_dir: str | Path,
        *,
        max_bytes: int = MAX_AVATAR_BYTES,
        clock: Callable = now_local,
    ):
        self._dir = Path(upload_dir)
        self._max_bytes = int(max_bytes)
        self._clock = clock

    @property
    def upload_dir(self) -> Path:
        return self._dir

    def save(self, upload: Optional[FileStorage]) -> str:
        if upload is None or not upload.filename:
            raise ValidationError("Không có file ảnh")
        if not (upload.mimetype or "").startswith("image/"):
            raise ValidationError("Chỉ cho phép upload file ảnh")

        data = upload.stream.read(self._max_bytes + 1)
        if len(data) > self._max_bytes:
            raise ValidationError(f"Ảnh vượt quá dung lượng cho phép ({self._max_bytes // (1024 * 1024)}MB)")
        if not data:
            raise ValidationError("File ảnh rỗng")
        try:
            Image.open(io.BytesIO(data)).verify()
        except (UnidentifiedImageError, OSError, SyntaxError):
            raise ValidationError("Chỉ cho phép upload file ảnh")

        self._dir.mkdir(parents=True, exist_ok=True)
        target = self._next_path(avatar_extension(upload.filename))
        target.write_bytes(data)
        logger.info("Stored avatar %s (%d bytes)", target.name, len(data))
        return f"{UPLOAD_URL_PREFIX}/{target.name}"

    def delete(self, url: str) -> None:
        name = secure_filename(url.rsplit("/", 1)[-1])
        path = self._dir / name
        if name and path.is_file():
            path.unlink()
            logger.info("Removed avatar %s", name)

    def _next_path(self, ext: str) -> Path:
        stamp = int(self._clock().timestamp() * 1000)
        while True:
            path = self._dir / f"avatar_{stamp}{ext}"
            if not path.exists():
                return path
            stamp += 1
