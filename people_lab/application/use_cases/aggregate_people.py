"""
Aggregate People Use Case
=========================

Runs the two aggregation pipelines: salary statistics per profession and
headcount per city.
"""
import logging

from people_lab.application.dto.step_results import AggregationSummary
from people_lab.domain.repositories.person_repository import PersonRepository

logger = logging.getLogger(__name__)


class AggregatePeopleUseCase:
    """Use case for the aggregation examples."""
    
    def __init__(self, person_repository: PersonRepository):
        self._repository = person_repository
    
    def execute(self) -> AggregationSummary:
        logger.info("=== AGGREGATION EXAMPLES ===")
        
        logger.info("Average salary per profession:")
        salary_by_profession = self._repository.salary_stats_by_profession()
        for row in salary_by_profession:
            logger.info(row.model_dump_json())
        
        logger.info("Headcount per city:")
        headcount_by_city = self._repository.headcount_by_city()
        for row in headcount_by_city:
            logger.info(row.model_dump_json())
        
        return AggregationSummary(
            salary_by_profession=salary_by_profession,
            headcount_by_city=headcount_by_city,
        )
