from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.person_repository import PersonRepository
from ...application.services.people_lab_service import PeopleLabService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class PeopleLabProvider:
    """People lab service provider - registers the walkthrough service"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register PeopleLabService.
        Service is created with repository from container.
        """
        container.register_singleton(
            PeopleLabService,
            PeopleLabService(
                person_repository=container.get(PersonRepository),
                reset_collection=get_settings().reset_collection,
            )
        )
