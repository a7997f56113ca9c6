"""
Unit tests for LocalPhotoStorage (writes into pytest's tmp_path).
"""
import pytest

from bootcamp_api.domain.exceptions import FileTooLargeError
from bootcamp_api.infrastructure.storage.local_photo_storage import LocalPhotoStorage


class FakeUpload:
    """Async file-like upload that returns its payload in small chunks"""

    def __init__(self, payload: bytes, filename="photo.jpg", content_type="image/jpeg"):
        self.payload = payload
        self.filename = filename
        self.content_type = content_type
        self.size = None  # unknown size, as with chunked transfer
        self.offset = 0

    async def read(self, size: int = -1) -> bytes:
        if size < 0:
            size = len(self.payload) - self.offset
        chunk = self.payload[self.offset:self.offset + size]
        self.offset += len(chunk)
        return chunk


class TestLocalPhotoStorage:

    @pytest.mark.asyncio
    async def test_writes_file(self, tmp_path, mock_settings):
        storage = LocalPhotoStorage(upload_dir=str(tmp_path / "uploads"), max_bytes=100)

        name = await storage.save(FakeUpload(b"\xff\xd8jpeg-bytes"), "photo_abc.jpg")

        assert name == "photo_abc.jpg"
        assert (tmp_path / "uploads" / "photo_abc.jpg").read_bytes() == b"\xff\xd8jpeg-bytes"

    @pytest.mark.asyncio
    async def test_defaults_come_from_settings(self, mock_settings):
        storage = LocalPhotoStorage()
        assert storage.max_bytes == 1000
        assert str(storage.upload_dir) == mock_settings.file_upload_path

    @pytest.mark.asyncio
    async def test_oversized_stream_is_removed(self, tmp_path, mock_settings):
        storage = LocalPhotoStorage(upload_dir=str(tmp_path), max_bytes=10)

        with pytest.raises(FileTooLargeError, match="less than 10 bytes"):
            await storage.save(FakeUpload(b"x" * 11), "photo_big.jpg")

        assert not (tmp_path / "photo_big.jpg").exists()

    @pytest.mark.asyncio
    async def test_directory_components_are_dropped(self, tmp_path, mock_settings):
        storage = LocalPhotoStorage(upload_dir=str(tmp_path / "uploads"), max_bytes=100)

        name = await storage.save(FakeUpload(b"img"), "../../etc/photo_x.png")

        assert name == "photo_x.png"
        assert (tmp_path / "uploads" / "photo_x.png").exists()
