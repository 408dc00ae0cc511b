"""
Update People Use Case
======================

Sets one person's salary, then raises the salary of everyone above an age.
"""
import logging

from people_lab.application.dto.step_results import UpdateSummary
from people_lab.domain.constants.sample_people import JOAO
from people_lab.domain.repositories.person_repository import PersonRepository

logger = logging.getLogger(__name__)


class UpdatePeopleUseCase:
    """Use case for updating salaries."""
    
    def __init__(self, person_repository: PersonRepository):
        self._repository = person_repository
    
    def execute(
        self,
        name: str = JOAO.name,
        new_salary: float = 9000.00,
        min_age: int = 25,
        raise_amount: float = 500.00,
    ) -> UpdateSummary:
        """
        Run update_one by name, then update_many by age.
        
        Args:
            name: Person whose salary is set
            new_salary: Salary to set
            min_age: People strictly older than this get the raise
            raise_amount: Amount added to their salary
            
        Raises:
            ValueError: If name is empty
        """
        if not name or not name.strip():
            raise ValueError("Name is required")
        
        logger.info("=== UPDATE DOCUMENTS ===")
        
        single_modified = self._repository.update_salary_by_name(name, new_salary)
        logger.info(f"Documents modified: {single_modified}")
        
        bulk_modified = self._repository.increase_salary_for_age_above(min_age, raise_amount)
        logger.info(f"Documents modified (salary raise): {bulk_modified}")
        
        return UpdateSummary(single_modified=single_modified, bulk_modified=bulk_modified)
