"""
Delete People Use Case
======================

Deletes one person by name, then everyone below a salary threshold.
"""
import logging

from people_lab.application.dto.step_results import DeleteSummary
from people_lab.domain.constants.sample_people import CARLOS
from people_lab.domain.repositories.person_repository import PersonRepository

logger = logging.getLogger(__name__)


class DeletePeopleUseCase:
    """Use case for deleting people."""
    
    def __init__(self, person_repository: PersonRepository):
        self._repository = person_repository
    
    def execute(self, name: str = CARLOS.name, salary_threshold: float = 7000) -> DeleteSummary:
        """
        Run delete_one by name, then delete_many by salary.
        
        Raises:
            ValueError: If name is empty or salary_threshold is negative
        """
        if not name or not name.strip():
            raise ValueError("Name is required")
        if salary_threshold < 0:
            raise ValueError("Salary threshold cannot be negative")
        
        logger.info("=== DELETE DOCUMENTS ===")
        
        single_deleted = self._repository.delete_by_name(name)
        logger.info(f"Documents deleted: {single_deleted}")
        
        bulk_deleted = self._repository.delete_with_salary_below(salary_threshold)
        logger.info(f"Documents deleted (salary < {salary_threshold}): {bulk_deleted}")
        
        return DeleteSummary(single_deleted=single_deleted, bulk_deleted=bulk_deleted)
