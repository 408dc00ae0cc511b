from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .people_lab_provider import PeopleLabProvider

__all__ = ["DatabaseProvider", "RepositoryProvider", "PeopleLabProvider"]
