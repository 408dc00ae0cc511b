from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.person_repository import PersonRepository
from ...infrastructure.db.mongo_person_repository import MongoPersonRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets database client from database provider and creates repository instances.
        """
        mongo_client = container.get("mongo_client")
        
        container.register_singleton(
            PersonRepository,
            MongoPersonRepository(
                mongo_client=mongo_client,
                collection_name=get_settings().people_collection,
            )
        )
