from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .auth_provider import AuthProvider
from .bootcamp_provider import BootcampProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "AuthProvider",
    "BootcampProvider",
]
