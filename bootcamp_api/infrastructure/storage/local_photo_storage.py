# Standard library imports
import logging
from pathlib import Path
from typing import Optional, Protocol

# Local application imports
from ...core.config import get_settings
from ...domain.exceptions import FileTooLargeError, InternalError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


class UploadedFile(Protocol):
    """The parts of starlette's UploadFile the storage relies on"""
    filename: Optional[str]
    content_type: Optional[str]
    size: Optional[int]

    async def read(self, size: int = -1) -> bytes: ...


class LocalPhotoStorage:
    """Writes uploaded photos into the configured upload directory."""

    def __init__(self, upload_dir: Optional[str] = None, max_bytes: Optional[int] = None) -> None:
        settings = get_settings()
        self.upload_dir = Path(upload_dir or settings.file_upload_path)
        self.max_bytes = max_bytes if max_bytes is not None else settings.max_file_upload

    async def save(self, upload: UploadedFile, filename: str) -> str:
        """
        Stream an upload to `<upload_dir>/<filename>`

        Args:
            upload: File received from the client
            filename: Target file name (no directory components)

        Returns:
            The stored file name

        Raises:
            FileTooLargeError: If more than max_bytes are received
            InternalError: If the file cannot be written
        """
        target = self.upload_dir / Path(filename).name

        size = 0
        try:
            self.upload_dir.mkdir(parents=True, exist_ok=True)
            with open(target, "wb") as f:
                while True:
                    chunk = await upload.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    size += len(chunk)
                    if size > self.max_bytes:
                        break
                    f.write(chunk)
        except OSError as e:
            logger.error(f"Problem writing upload to {target}: {e}", exc_info=True)
            target.unlink(missing_ok=True)
            raise InternalError("Problem with file upload")

        if size > self.max_bytes:
            target.unlink(missing_ok=True)
            raise FileTooLargeError(f"Please upload an image less than {self.max_bytes} bytes")

        logger.info(f"Stored upload {target} ({size} bytes)")
        return target.name
