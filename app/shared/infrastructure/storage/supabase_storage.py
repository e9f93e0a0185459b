# 📄 File: app/shared/infrastructure/storage/supabase_storage.py

# 🧭 Purpose (Layman Explanation):
# This file uploads pictures (owner avatars, lounge covers, gallery photos) to cloud storage,
# puts them in tidy per-user folders, and hands back the public link to show on the site.

# 🧪 Purpose (Technical Summary):
# Object Store abstraction plus its Supabase Storage implementation: path organization by
# category, size/MIME/integrity validation with Pillow, upsert uploads and public URL resolution.

# 🔗 Dependencies:
# - supabase: Storage client (through SupabaseManager)
# - PIL (Pillow): Image integrity validation
# - asyncio: Offloading the blocking storage client

# 🔄 Connected Modules / Calls From:
# Called by: onboarding submission service (staged file uploads)
# Connects to: Supabase cloud storage buckets 'profiles' and 'businesses'

import asyncio
import io
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, Optional

from PIL import Image

from app.shared.config.settings import get_settings
from app.shared.config.supabase import SupabaseManager, get_supabase_manager
from app.shared.core.exceptions import (
    FileStorageError,
    FileTooLargeError,
    InvalidFileTypeError,
)
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)

# Storage category -> settings attribute holding its bucket name
STORAGE_CATEGORIES: Dict[str, str] = {
    'avatars': 'PROFILES_BUCKET',
    'covers': 'BUSINESSES_BUCKET',
    'images': 'BUSINESSES_BUCKET',
}

_UNSAFE_FILENAME_CHARS = re.compile(r'[^A-Za-z0-9._-]+')


def bucket_for_category(category: str) -> str:
    """Resolve the bucket name a storage category lives in."""
    if category not in STORAGE_CATEGORIES:
        raise ValueError(f"Unknown storage category: {category}")
    return getattr(get_settings(), STORAGE_CATEGORIES[category])


def build_storage_path(category: str, user_id: str, filename: str, timestamp_ms: int) -> str:
    """
    Build the object path for an uploaded file.

    Layout is ``{category}/{user_id}/{timestamp_ms}-{filename}``; the filename is
    reduced to characters that are safe in storage keys.

    Args:
        category: One of ``avatars``, ``covers``, ``images``
        user_id: Owner of the file
        filename: Original client filename
        timestamp_ms: Upload time in epoch milliseconds

    Returns:
        str: Object path inside the bucket
    """
    if category not in STORAGE_CATEGORIES:
        raise ValueError(f"Unknown storage category: {category}")

    safe_name = _UNSAFE_FILENAME_CHARS.sub('-', Path(filename).name).strip('-') or 'upload'
    return f"{category}/{user_id}/{timestamp_ms}-{safe_name}"


def validate_image_file(
    data: bytes,
    content_type: str,
    filename: str,
    max_file_size: Optional[int] = None,
    allowed_types: Optional[Iterable[str]] = None
) -> None:
    """
    Validate file size, type, and content.

    Raises:
        FileTooLargeError: If the payload exceeds the size limit
        InvalidFileTypeError: If the MIME type is not allowed or Pillow cannot read the image
    """
    settings = get_settings()
    max_file_size = max_file_size or settings.MAX_IMAGE_SIZE
    allowed = set(allowed_types or settings.allowed_image_types)

    if len(data) > max_file_size:
        raise FileTooLargeError(
            max_size_mb=round(max_file_size / (1024 * 1024), 2),
            actual_size_mb=round(len(data) / (1024 * 1024), 2),
            filename=filename,
        )

    if content_type not in allowed:
        raise InvalidFileTypeError(
            filename=filename,
            expected_types=sorted(allowed),
            actual_type=content_type,
        )

    try:
        with Image.open(io.BytesIO(data)) as img:
            img.verify()
    except Exception as e:
        raise InvalidFileTypeError(f"Invalid image file: {e}", filename=filename)


class ObjectStore(ABC):
    """Blob storage that returns a public URL for every stored object."""

    @abstractmethod
    async def upload(self, bucket: str, path: str, data: bytes, content_type: str) -> str:
        """
        Store ``data`` at ``path`` in ``bucket``, replacing any existing object.

        Returns:
            str: Public URL of the stored object

        Raises:
            FileStorageError: If the upload is rejected
        """
        pass


class SupabaseObjectStore(ObjectStore):
    """
    Supabase Storage backed object store.

    Uploads go through the service-role client with ``upsert`` enabled. Images are
    validated for size, MIME type and integrity before anything leaves the process.
    """

    def __init__(
        self,
        manager: Optional[SupabaseManager] = None,
        max_file_size: Optional[int] = None,
        allowed_types: Optional[Iterable[str]] = None
    ):
        settings = get_settings()
        self.manager = manager or get_supabase_manager()
        self.max_file_size = max_file_size or settings.MAX_IMAGE_SIZE
        self.allowed_image_types = set(allowed_types or settings.allowed_image_types)

    def _validate_file(self, data: bytes, content_type: str, path: str) -> None:
        validate_image_file(data, content_type, path, self.max_file_size, self.allowed_image_types)

    def _upload_sync(self, bucket: str, path: str, data: bytes, content_type: str) -> str:
        storage = self.manager.get_storage_client(bucket)
        storage.upload(
            path=path,
            file=data,
            file_options={
                "content-type": content_type,
                "upsert": "true",
            },
        )
        return storage.get_public_url(path)

    async def upload(self, bucket: str, path: str, data: bytes, content_type: str) -> str:
        self._validate_file(data, content_type, path)

        try:
            # supabase-py storage client is blocking
            public_url = await asyncio.to_thread(
                self._upload_sync, bucket, path, data, content_type
            )
        except Exception as e:
            logger.error(f"Failed to upload {bucket}/{path}: {e}")
            raise FileStorageError(
                f"Upload failed: {e}",
                operation="upload",
                bucket=bucket,
                storage_path=path,
            )

        logger.info(
            f"File uploaded successfully: {bucket}/{path}",
            extra={'bucket': bucket, 'size_bytes': len(data)}
        )
        return public_url


def get_object_store() -> ObjectStore:
    """FastAPI dependency returning the Supabase-backed object store."""
    return SupabaseObjectStore()
