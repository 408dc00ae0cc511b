"""
Create Indexes Use Case
=======================

Creates the unique name index and the profession/salary compound index,
then lists every index on the collection.
"""
import logging

from people_lab.application.dto.step_results import IndexSummary
from people_lab.domain.repositories.person_repository import PersonRepository
from people_lab.utils.json_utils import to_json

logger = logging.getLogger(__name__)


class CreateIndexesUseCase:
    """Use case for index management."""
    
    def __init__(self, person_repository: PersonRepository):
        self._repository = person_repository
    
    def execute(self) -> IndexSummary:
        logger.info("=== CREATE INDEXES ===")
        
        unique_name_index = self._repository.create_unique_name_index()
        logger.info(f"Unique index created on 'name': {unique_name_index}")
        
        compound_index = self._repository.create_profession_salary_index()
        logger.info(f"Compound index created on 'profession' and 'salary': {compound_index}")
        
        logger.info("Existing indexes:")
        indexes = self._repository.list_indexes()
        for index in indexes:
            logger.info(to_json(index))
        
        return IndexSummary(
            unique_name_index=unique_name_index,
            compound_index=compound_index,
            indexes=indexes,
        )
