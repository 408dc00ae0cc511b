"""
People Lab Service
==================

Application service that runs the document-database walkthrough.
This service orchestrates the step use cases in a fixed order.
"""
import logging
from typing import List, Tuple, Union

from people_lab.domain.repositories.person_repository import PersonRepository
from people_lab.application.dto.step_results import (
    AggregationSummary,
    CreateSummary,
    DeleteSummary,
    IndexSummary,
    ReadSummary,
    UpdateSummary,
)
from people_lab.application.use_cases.create_people import CreatePeopleUseCase
from people_lab.application.use_cases.read_people import ReadPeopleUseCase
from people_lab.application.use_cases.update_people import UpdatePeopleUseCase
from people_lab.application.use_cases.delete_people import DeletePeopleUseCase
from people_lab.application.use_cases.create_indexes import CreateIndexesUseCase
from people_lab.application.use_cases.aggregate_people import AggregatePeopleUseCase

logger = logging.getLogger(__name__)

StepSummary = Union[
    CreateSummary, ReadSummary, UpdateSummary, DeleteSummary, IndexSummary, AggregationSummary
]


class PeopleLabService:
    """
    Application service for the people walkthrough.
    
    Each public method is one step; run_demo() chains them in the order
    create, read, update, read, delete, read, indexes, aggregation.
    """
    
    def __init__(self, person_repository: PersonRepository, reset_collection: bool = False):
        """
        Initialize service with repository.
        
        Args:
            person_repository: Repository for person persistence
            reset_collection: Drop the collection before run_demo()
        """
        self._repository = person_repository
        self._reset_collection = reset_collection
        self._create_use_case = CreatePeopleUseCase(person_repository)
        self._read_use_case = ReadPeopleUseCase(person_repository)
        self._update_use_case = UpdatePeopleUseCase(person_repository)
        self._delete_use_case = DeletePeopleUseCase(person_repository)
        self._indexes_use_case = CreateIndexesUseCase(person_repository)
        self._aggregate_use_case = AggregatePeopleUseCase(person_repository)
    
    def create_documents(self) -> CreateSummary:
        return self._create_use_case.execute()
    
    def read_documents(self) -> ReadSummary:
        return self._read_use_case.execute()
    
    def update_documents(self) -> UpdateSummary:
        return self._update_use_case.execute()
    
    def delete_documents(self) -> DeleteSummary:
        return self._delete_use_case.execute()
    
    def create_indexes(self) -> IndexSummary:
        return self._indexes_use_case.execute()
    
    def run_aggregations(self) -> AggregationSummary:
        return self._aggregate_use_case.execute()
    
    def reset(self) -> None:
        """Drop the collection so a previous run's documents and indexes are gone."""
        self._repository.drop()
        logger.info("Collection reset")
    
    def run_demo(self) -> List[Tuple[str, StepSummary]]:
        """
        Run the full walkthrough.
        
        Errors from the driver propagate unchanged; closing the
        connection is the caller's job.
        
        Returns:
            (step name, summary) pairs in execution order
        """
        if self._reset_collection:
            self.reset()
        
        steps = [
            ("create", self.create_documents),
            ("read", self.read_documents),
            ("update", self.update_documents),
            ("read", self.read_documents),  # verify updates
            ("delete", self.delete_documents),
            ("read", self.read_documents),  # verify deletes
            ("indexes", self.create_indexes),
            ("aggregation", self.run_aggregations),
        ]
        return [(name, step()) for name, step in steps]
