"""
Report Models
=============

Shapes of the rows produced by the aggregation pipelines.
"""
from typing import Optional
from pydantic import BaseModel, Field


class ProfessionSalaryStats(BaseModel):
    """Salary statistics for one profession."""
    profession: Optional[str] = Field(None, description="Group key ($profession)")
    average_salary: Optional[float] = Field(None, description="Average salary in the group, None when no salary is numeric")
    total_salary: float = Field(0, description="Sum of salaries in the group")
    sample_name: Optional[str] = Field(None, description="First name seen in the group")


class CityHeadcount(BaseModel):
    """Number of people living in one city."""
    city: Optional[str] = Field(None, description="Group key ($city)")
    count: int = Field(..., description="Number of people in the city")
