"""
MongoDB Person Repository
=========================

Concrete implementation of PersonRepository using MongoDB.
Every method is a single driver call.
"""
import logging
from typing import Any, Dict, List
from pymongo import ASCENDING, DESCENDING
from pymongo.collection import Collection

from people_lab.domain.models.person import Person
from people_lab.domain.models.reports import CityHeadcount, ProfessionSalaryStats
from people_lab.domain.repositories.person_repository import PersonRepository
from people_lab.domain.constants.person_fields import PersonFields, ReportFields
from people_lab.infrastructure.db.mongo_connection import MongoClientManager

logger = logging.getLogger(__name__)


class MongoPersonRepository(PersonRepository):
    """
    MongoDB implementation of PersonRepository.
    
    Handles all person persistence operations using MongoDB.
    """
    
    COLLECTION_NAME = "people"
    
    def __init__(self, mongo_client: MongoClientManager, collection_name: str = COLLECTION_NAME):
        """
        Initialize repository with MongoDB client.
        
        Args:
            mongo_client: Client manager providing the collection
            collection_name: Name of the people collection
        """
        self._client = mongo_client
        self._collection: Collection = self._client.get_collection(collection_name)
    
    def _to_entity(self, doc: dict) -> Person:
        """Convert MongoDB document to Person entity; missing fields stay None."""
        doc = dict(doc)  # Make a copy to avoid modifying original
        doc["id"] = doc.pop(PersonFields.MONGO_ID, None)
        doc.setdefault(PersonFields.NAME, "")
        return Person(**doc)
    
    def create(self, person: Person) -> Person:
        """Insert a single person."""
        result = self._collection.insert_one(person.to_document())
        person.id = result.inserted_id
        return person
    
    def create_many(self, people: List[Person]) -> List[Person]:
        """Insert several people in one call."""
        result = self._collection.insert_many([person.to_document() for person in people])
        for person, inserted_id in zip(people, result.inserted_ids):
            person.id = inserted_id
        return people
    
    def find_all(self) -> List[Person]:
        """Return every person in the collection."""
        return [self._to_entity(doc) for doc in self._collection.find()]
    
    def find_by_salary_above(self, threshold: float) -> List[Person]:
        """Return people whose salary is strictly greater than threshold."""
        docs = self._collection.find({PersonFields.SALARY: {"$gt": threshold}})
        return [self._to_entity(doc) for doc in docs]
    
    def update_salary_by_name(self, name: str, salary: float) -> int:
        """Set the salary of the first person with the given name."""
        result = self._collection.update_one(
            {PersonFields.NAME: name},
            {"$set": {PersonFields.SALARY: salary}},
        )
        return result.modified_count
    
    def increase_salary_for_age_above(self, age: int, amount: float) -> int:
        """Add amount to the salary of everyone strictly older than age."""
        result = self._collection.update_many(
            {PersonFields.AGE: {"$gt": age}},
            {"$inc": {PersonFields.SALARY: amount}},
        )
        return result.modified_count
    
    def delete_by_name(self, name: str) -> int:
        """Delete the first person with the given name."""
        result = self._collection.delete_one({PersonFields.NAME: name})
        return result.deleted_count
    
    def delete_with_salary_below(self, threshold: float) -> int:
        """Delete everyone whose salary is strictly lower than threshold."""
        result = self._collection.delete_many({PersonFields.SALARY: {"$lt": threshold}})
        return result.deleted_count
    
    def create_unique_name_index(self) -> str:
        """Create a unique ascending index on name."""
        return self._collection.create_index([(PersonFields.NAME, ASCENDING)], unique=True)
    
    def create_profession_salary_index(self) -> str:
        """Create the (profession asc, salary desc) compound index."""
        return self._collection.create_index(
            [(PersonFields.PROFESSION, ASCENDING), (PersonFields.SALARY, DESCENDING)]
        )
    
    def list_indexes(self) -> List[Dict[str, Any]]:
        """Return the index descriptions of the collection."""
        return [dict(index) for index in self._collection.list_indexes()]
    
    def salary_stats_by_profession(self) -> List[ProfessionSalaryStats]:
        """Average and total salary per profession, with one sample name each."""
        pipeline = [
            {
                "$group": {
                    "_id": f"${PersonFields.PROFESSION}",
                    ReportFields.AVERAGE_SALARY: {"$avg": f"${PersonFields.SALARY}"},
                    ReportFields.TOTAL_SALARY: {"$sum": f"${PersonFields.SALARY}"},
                    ReportFields.SAMPLE_NAME: {"$first": f"${PersonFields.NAME}"},
                }
            }
        ]
        return [
            ProfessionSalaryStats(
                profession=doc["_id"],
                average_salary=doc.get(ReportFields.AVERAGE_SALARY),
                total_salary=doc.get(ReportFields.TOTAL_SALARY, 0),
                sample_name=doc.get(ReportFields.SAMPLE_NAME),
            )
            for doc in self._collection.aggregate(pipeline)
        ]
    
    def headcount_by_city(self) -> List[CityHeadcount]:
        """Number of people per city, largest first."""
        pipeline = [
            {"$group": {"_id": f"${PersonFields.CITY}", ReportFields.COUNT: {"$sum": 1}}},
            {"$sort": {ReportFields.COUNT: DESCENDING}},
        ]
        return [
            CityHeadcount(city=doc["_id"], count=doc[ReportFields.COUNT])
            for doc in self._collection.aggregate(pipeline)
        ]
    
    def drop(self) -> None:
        """Drop the whole collection, indexes included."""
        self._collection.drop()
        logger.debug(f"Collection '{self._collection.name}' dropped")
