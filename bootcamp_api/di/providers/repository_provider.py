from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.bootcamp_repository import BootcampRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository
from ...infrastructure.db.mongo_bootcamp_repository import MongoBootcampRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets collections from database provider and creates repository instances.
        """
        container.register_singleton(
            UserRepository,
            MongoUserRepository(user_collection=container.get("user_collection"))
        )

        container.register_singleton(
            BootcampRepository,
            MongoBootcampRepository(bootcamp_collection=container.get("bootcamp_collection"))
        )
