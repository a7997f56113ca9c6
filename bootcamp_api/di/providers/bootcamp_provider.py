from typing import TYPE_CHECKING
from ...domain.repositories.bootcamp_repository import BootcampRepository
from ...application.use_cases.bootcamp import (
    CreateBootcampUseCase,
    DeleteBootcampUseCase,
    GetBootcampUseCase,
    GetBootcampsInRadiusUseCase,
    ListBootcampsUseCase,
    UpdateBootcampUseCase,
    UploadBootcampPhotoUseCase,
)
from ...infrastructure.external.geocoder_client import GeocoderClient
from ...infrastructure.storage.local_photo_storage import LocalPhotoStorage

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class BootcampProvider:
    """Bootcamp use case provider - registers external clients and all bootcamp use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register geocoder and photo storage singletons, then the use cases.
        Use cases are created on-demand via factories.
        """
        if not container.is_registered(GeocoderClient):
            container.register_singleton(GeocoderClient, GeocoderClient())

        if not container.is_registered(LocalPhotoStorage):
            container.register_singleton(LocalPhotoStorage, LocalPhotoStorage())

        container.register_factory(
            ListBootcampsUseCase,
            lambda: ListBootcampsUseCase(bootcamp_repository=container.get(BootcampRepository))
        )

        container.register_factory(
            GetBootcampUseCase,
            lambda: GetBootcampUseCase(bootcamp_repository=container.get(BootcampRepository))
        )

        container.register_factory(
            CreateBootcampUseCase,
            lambda: CreateBootcampUseCase(
                bootcamp_repository=container.get(BootcampRepository),
                geocoder=container.get(GeocoderClient),
            )
        )

        container.register_factory(
            UpdateBootcampUseCase,
            lambda: UpdateBootcampUseCase(bootcamp_repository=container.get(BootcampRepository))
        )

        container.register_factory(
            DeleteBootcampUseCase,
            lambda: DeleteBootcampUseCase(bootcamp_repository=container.get(BootcampRepository))
        )

        container.register_factory(
            GetBootcampsInRadiusUseCase,
            lambda: GetBootcampsInRadiusUseCase(
                bootcamp_repository=container.get(BootcampRepository),
                geocoder=container.get(GeocoderClient),
            )
        )

        container.register_factory(
            UploadBootcampPhotoUseCase,
            lambda: UploadBootcampPhotoUseCase(
                bootcamp_repository=container.get(BootcampRepository),
                photo_storage=container.get(LocalPhotoStorage),
            )
        )
