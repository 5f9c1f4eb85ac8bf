# portfolio/services/local_storage.py
"""
Local filesystem storage for uploaded images.

Files live under ``{PUBLIC_DIR}/{UPLOAD_DIR}/{subdir}/`` and are served by the
``/public`` static mount, so the returned URL can be stored directly in a
profile or project row.

Rules:
    - At most ``MAX_UPLOAD_SIZE_MB`` per file
    - Extension must be one of ``ALLOWED_UPLOAD_EXTENSIONS``
    - Both are checked before anything is written
    - Stored name is ``{unix_nanos}_{sanitized original name}``
"""

import logging
import os
import re
import time
from pathlib import Path
from typing import List, Optional

from fastapi import UploadFile

from portfolio.core.config import settings
from portfolio.core.exceptions import UploadError
from portfolio.core.metrics import uploads_total

logger = logging.getLogger(__name__)

PUBLIC_URL_PREFIX = "/public"

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_-]")


def sanitize_filename(filename: str) -> str:
    """Keep letters, digits, ``_`` and ``-`` in the stem; the extension is kept as given."""
    base = os.path.basename(filename.replace("\\", "/"))
    stem, ext = os.path.splitext(base)
    return _UNSAFE_CHARS.sub("_", stem) + ext


class LocalStorageService:
    """
    Image storage on the local filesystem.

    Files are stored in: {public_dir}/{upload_dir}/{subdir}/{name}
    """

    def __init__(
        self,
        public_dir: Optional[str] = None,
        upload_dir: Optional[str] = None,
        max_size_bytes: Optional[int] = None,
        allowed_extensions: Optional[List[str]] = None,
    ):
        self.public_dir = Path(public_dir or settings.PUBLIC_DIR)
        self.upload_dir = (upload_dir or settings.UPLOAD_DIR).strip("/")
        self.max_size_bytes = max_size_bytes or settings.max_upload_size_bytes
        self.allowed_extensions = [
            ext.lower() if ext.startswith(".") else f".{ext.lower()}"
            for ext in (allowed_extensions or settings.ALLOWED_UPLOAD_EXTENSIONS)
        ]

    @property
    def max_size_mb(self) -> int:
        return self.max_size_bytes // (1024 * 1024)

    def _size_error(self) -> UploadError:
        uploads_total.labels(result="too_large").inc()
        return UploadError(f"file size exceeds maximum allowed size ({self.max_size_mb}MB)")

    def _type_error(self) -> UploadError:
        uploads_total.labels(result="bad_type").inc()
        allowed = ", ".join(ext.lstrip(".") for ext in self.allowed_extensions)
        return UploadError(f"file type not allowed. Allowed types: {allowed}")

    async def save_image(self, upload: UploadFile, subdir: str) -> str:
        """
        Validate and store an uploaded image.

        Args:
            upload: Multipart file from the request
            subdir: Folder under the upload directory, e.g. "profile" or "projects"

        Returns:
            str: URL path of the stored file (e.g. "/public/assets/uploads/profile/1700000000_me.png")

        Raises:
            UploadError: If the file is too large or of a disallowed type
        """
        filename = upload.filename or ""

        if upload.size is not None and upload.size > self.max_size_bytes:
            raise self._size_error()

        if os.path.splitext(filename)[1].lower() not in self.allowed_extensions:
            raise self._type_error()

        # Read one byte past the limit so oversize bodies without a declared size are caught
        data = await upload.read(self.max_size_bytes + 1)
        if len(data) > self.max_size_bytes:
            raise self._size_error()

        stored_name = f"{time.time_ns()}_{sanitize_filename(filename)}"
        relative_path = f"{self.upload_dir}/{subdir.strip('/')}/{stored_name}"
        file_path = self.public_dir / relative_path
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(file_path, "wb") as f:
            f.write(data)

        uploads_total.labels(result="stored").inc()
        logger.info(f"Image stored: {relative_path} ({len(data)} bytes)")
        return f"{PUBLIC_URL_PREFIX}/{relative_path}"

    def path_for_url(self, url: str) -> Optional[Path]:
        """Map a stored URL back to its file, or None if it points outside the public dir."""
        if not url or not url.startswith(PUBLIC_URL_PREFIX + "/"):
            return None

        root = self.public_dir.resolve()
        candidate = (root / url[len(PUBLIC_URL_PREFIX) + 1:]).resolve()
        if root not in candidate.parents:
            return None
        return candidate

    def delete_file(self, url: str) -> bool:
        """
        Delete a previously stored file.

        Returns:
            bool: True if deleted, False if the file didn't exist
        """
        file_path = self.path_for_url(url)
        if file_path is None or not file_path.is_file():
            return False

        file_path.unlink()
        logger.info(f"Image deleted: {url}")
        return True


# Singleton instance
_local_storage_service: Optional[LocalStorageService] = None


def get_local_storage_service() -> LocalStorageService:
    """
    Get or create singleton local storage service.

    Returns:
        LocalStorageService: Singleton instance
    """
    global _local_storage_service

    if _local_storage_service is None:
        _local_storage_service = LocalStorageService()

    return _local_storage_service
