"""
Read People Use Case
====================

Lists every document, then the ones above a salary threshold.
"""
import logging

from people_lab.application.dto.step_results import ReadSummary
from people_lab.domain.repositories.person_repository import PersonRepository
from people_lab.utils.json_utils import to_json

logger = logging.getLogger(__name__)

DEFAULT_SALARY_THRESHOLD = 6000


class ReadPeopleUseCase:
    """Use case for reading people back from the collection."""
    
    def __init__(self, person_repository: PersonRepository):
        self._repository = person_repository
    
    def execute(self, salary_threshold: float = DEFAULT_SALARY_THRESHOLD) -> ReadSummary:
        """
        Log every person, then every person earning more than salary_threshold.
        
        Raises:
            ValueError: If salary_threshold is negative
        """
        if salary_threshold < 0:
            raise ValueError("Salary threshold cannot be negative")
        
        logger.info("=== READ DOCUMENTS ===")
        
        logger.info("All documents:")
        everyone = self._repository.find_all()
        for person in everyone:
            logger.info(to_json(person.to_mongo()))
        
        logger.info(f"People with salary > {salary_threshold}:")
        above = self._repository.find_by_salary_above(salary_threshold)
        for person in above:
            logger.info(to_json(person.to_mongo()))
        
        return ReadSummary(
            everyone=everyone,
            salary_threshold=salary_threshold,
            above_threshold=above,
        )
