"""
StaffDesk Backend — File Storage Service
==========================================

What:  Writes uploaded employee photos into the static upload directory.
Why:   Centralizes all file system operations for uploads in one place.
How:   Generates a `<field>_<epoch ms><ext>` filename, writes the bytes with
       aiofiles, and returns the bare filename for the `employee.image` column.
Who:   Called by EmployeeService on create and on partial update.
When:  After the presence checks pass, before the insert/update statement.

Naming:
    image_1718000000000.png
    └─┬─┘ └─────┬─────┘ └┬┘
    field   epoch ms    original extension (as sent, case preserved)

    Names are collision-resistant only to millisecond granularity; two uploads
    in the same millisecond overwrite each other. Files are never removed by
    the API, including after a failed insert or an employee deletion.
"""

import logging
import time
from pathlib import Path
from typing import NamedTuple, Optional

import aiofiles

from app.config import settings
from app.exceptions import FileStorageError

logger = logging.getLogger(__name__)


class ImageUpload(NamedTuple):
    """An uploaded photo as read from the multipart body."""
    filename: Optional[str]
    content: bytes


class FileService:
    """
    Manages storage of uploaded images.

    Directory Structure:
        public/              ← static_root, served over HTTP
        └── images/          ← upload_subdir, mounted at /images
            ├── image_1718000000000.png
            └── image_1718000004321.jpg
    """

    def __init__(self, upload_dir: Optional[str] = None):
        """
        Args:
            upload_dir: Override the upload directory (used in tests).
                        If None, uses <static_root>/<upload_subdir>.
        """
        default_dir = Path(settings.static_root) / settings.upload_subdir
        self.upload_dir = Path(upload_dir or default_dir).resolve()
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        logger.info("FileService initialized with upload_dir=%s", self.upload_dir)

    def _timestamp_ms(self) -> int:
        return int(time.time() * 1000)

    def generate_filename(self, field_name: str, original_filename: Optional[str]) -> str:
        """
        Build the stored name for an upload.

        Only the extension of the client filename is kept; the stem is
        replaced so no client-controlled path segment reaches the disk.
        """
        extension = Path(original_filename or "").suffix
        return f"{field_name}_{self._timestamp_ms()}{extension}"

    async def store_upload(
        self,
        field_name: str,
        original_filename: Optional[str],
        content: bytes,
    ) -> str:
        """
        Write an uploaded file into the upload directory.

        Returns:
            The generated filename (relative to the upload directory).

        Raises:
            FileStorageError if the directory or file cannot be written.
        """
        filename = self.generate_filename(field_name, original_filename)
        destination = self.upload_dir / filename

        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(destination, "wb") as f:
                await f.write(content)
        except OSError as e:
            logger.error("Failed to store upload at %s: %s", destination, str(e))
            raise FileStorageError(
                context={"path": str(destination), "os_error": str(e)},
            ) from e

        logger.info("Upload stored: %s (%d bytes)", filename, len(content))
        return filename


# ── Singleton Instance ────────────────────────────────────────────────────
file_service = FileService()
