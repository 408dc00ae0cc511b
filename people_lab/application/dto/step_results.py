"""
Step Result DTOs
================

Pydantic models summarising what each demo step did.
"""
from typing import Any, Dict, List
from pydantic import BaseModel, Field

from people_lab.domain.models.person import Person
from people_lab.domain.models.reports import CityHeadcount, ProfessionSalaryStats


class CreateSummary(BaseModel):
    """People inserted by the create step."""
    single: Person
    bulk: List[Person] = Field(default_factory=list)
    
    @property
    def inserted_count(self) -> int:
        return 1 + len(self.bulk)


class ReadSummary(BaseModel):
    """Documents returned by the read step."""
    everyone: List[Person] = Field(default_factory=list)
    salary_threshold: float
    above_threshold: List[Person] = Field(default_factory=list)


class UpdateSummary(BaseModel):
    """Modified counts reported by the update step."""
    single_modified: int
    bulk_modified: int


class DeleteSummary(BaseModel):
    """Deleted counts reported by the delete step."""
    single_deleted: int
    bulk_deleted: int


class IndexSummary(BaseModel):
    """Indexes created and listed by the index step."""
    unique_name_index: str
    compound_index: str
    indexes: List[Dict[str, Any]] = Field(default_factory=list)


class AggregationSummary(BaseModel):
    """Rows produced by the aggregation step."""
    salary_by_profession: List[ProfessionSalaryStats] = Field(default_factory=list)
    headcount_by_city: List[CityHeadcount] = Field(default_factory=list)
