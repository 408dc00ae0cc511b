"""
Person Repository Interface
===========================

Abstract interface for person data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from people_lab.domain.models.person import Person
from people_lab.domain.models.reports import CityHeadcount, ProfessionSalaryStats


class PersonRepository(ABC):
    """
    Abstract repository for person persistence operations.
    
    Write operations return the counts reported by the database so callers
    can log them; nothing here raises when a filter matches no document.
    """
    
    @abstractmethod
    def create(self, person: Person) -> Person:
        """
        Insert a single person.
        
        Args:
            person: Person entity to insert
            
        Returns:
            The person with its assigned id
        """
        pass
    
    @abstractmethod
    def create_many(self, people: List[Person]) -> List[Person]:
        """
        Insert several people in one call.
        
        Args:
            people: Person entities to insert
            
        Returns:
            The people with their assigned ids, in insertion order
        """
        pass
    
    @abstractmethod
    def find_all(self) -> List[Person]:
        """Return every person in the collection."""
        pass
    
    @abstractmethod
    def find_by_salary_above(self, threshold: float) -> List[Person]:
        """Return people whose salary is strictly greater than threshold."""
        pass
    
    @abstractmethod
    def update_salary_by_name(self, name: str, salary: float) -> int:
        """
        Set the salary of the first person with the given name.
        
        Returns:
            Number of documents modified (0 or 1)
        """
        pass
    
    @abstractmethod
    def increase_salary_for_age_above(self, age: int, amount: float) -> int:
        """
        Add amount to the salary of everyone strictly older than age.
        
        Returns:
            Number of documents modified
        """
        pass
    
    @abstractmethod
    def delete_by_name(self, name: str) -> int:
        """
        Delete the first person with the given name.
        
        Returns:
            Number of documents deleted (0 or 1)
        """
        pass
    
    @abstractmethod
    def delete_with_salary_below(self, threshold: float) -> int:
        """
        Delete everyone whose salary is strictly lower than threshold.
        
        Returns:
            Number of documents deleted
        """
        pass
    
    @abstractmethod
    def create_unique_name_index(self) -> str:
        """Create a unique ascending index on name and return its name."""
        pass
    
    @abstractmethod
    def create_profession_salary_index(self) -> str:
        """Create the (profession asc, salary desc) compound index and return its name."""
        pass
    
    @abstractmethod
    def list_indexes(self) -> List[Dict[str, Any]]:
        """Return the index descriptions of the collection."""
        pass
    
    @abstractmethod
    def salary_stats_by_profession(self) -> List[ProfessionSalaryStats]:
        """Average and total salary per profession, with one sample name each."""
        pass
    
    @abstractmethod
    def headcount_by_city(self) -> List[CityHeadcount]:
        """Number of people per city, largest first."""
        pass
    
    @abstractmethod
    def drop(self) -> None:
        """Drop the whole collection, indexes included."""
        pass
