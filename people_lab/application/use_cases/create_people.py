"""
Create People Use Case
======================

Inserts one person with insert_one and two more with insert_many.
"""
import logging
from typing import List, Optional

from people_lab.application.dto.step_results import CreateSummary
from people_lab.domain.constants.sample_people import CARLOS, JOAO, MARIA
from people_lab.domain.models.person import Person
from people_lab.domain.repositories.person_repository import PersonRepository
from people_lab.utils.json_utils import to_json

logger = logging.getLogger(__name__)


class CreatePeopleUseCase:
    """Use case for inserting the sample people."""
    
    def __init__(self, person_repository: PersonRepository):
        self._repository = person_repository
    
    def execute(
        self,
        single: Optional[Person] = None,
        bulk: Optional[List[Person]] = None,
    ) -> CreateSummary:
        """
        Insert one person on its own, then a batch in a single call.
        
        Args:
            single: Person for insert_one (defaults to João Silva)
            bulk: People for insert_many (defaults to Maria Oliveira and Carlos Souza)
            
        Returns:
            The inserted people with their ids
            
        Raises:
            ValueError: If the batch is empty
        """
        single = (single or JOAO).model_copy()
        bulk = [person.model_copy() for person in (bulk if bulk is not None else [MARIA, CARLOS])]
        if not bulk:
            raise ValueError("At least one person is required for a bulk insert")
        
        logger.info("=== CREATE DOCUMENTS ===")
        
        inserted = self._repository.create(single)
        logger.info(f"Document inserted: {to_json(inserted.to_mongo())}")
        
        inserted_many = self._repository.create_many(bulk)
        logger.info(f"{len(inserted_many)} documents inserted: {', '.join(p.name for p in inserted_many)}")
        
        return CreateSummary(single=inserted, bulk=inserted_many)
