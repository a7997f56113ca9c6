from .local_photo_storage import LocalPhotoStorage

__all__ = ["LocalPhotoStorage"]
