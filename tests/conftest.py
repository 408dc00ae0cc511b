"""
Shared fixtures for the people_lab test suite.

Provides:
1. Environment isolation (settings, DI container and Mongo client singletons are reset per test)
2. A MagicMock-backed Mongo client manager for driver-call assertions
3. An in-memory PersonRepository for end-to-end walkthrough checks
"""
import copy
from typing import Any, Dict, List
from unittest.mock import MagicMock

import pytest

from people_lab.core.config import reset_settings
from people_lab.di import reset_container
from people_lab.domain.models.person import Person
from people_lab.domain.models.reports import CityHeadcount, ProfessionSalaryStats
from people_lab.domain.repositories.person_repository import PersonRepository
from people_lab.infrastructure.db.mongo_connection import MongoClientManager

ENV_VARS = ("MONGO_URI", "DB_NAME", "PEOPLE_COLLECTION", "RESET_COLLECTION", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Run every test against default settings and fresh singletons."""
    # Keep a developer's .env out of the tests
    monkeypatch.setattr("people_lab.core.config.load_dotenv", lambda *args, **kwargs: False)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    reset_container()
    MongoClientManager._instance = None
    yield
    reset_settings()
    reset_container()
    MongoClientManager._instance = None


@pytest.fixture
def mock_collection():
    return MagicMock(name="people_collection")


@pytest.fixture
def mock_mongo_client(mock_collection):
    """Stand-in for MongoClientManager whose get_collection returns mock_collection."""
    manager = MagicMock(spec=MongoClientManager)
    manager.get_collection.return_value = mock_collection
    return manager


class InMemoryPersonRepository(PersonRepository):
    """PersonRepository that mimics the server-side semantics on a list of dicts."""
    
    def __init__(self):
        self.documents: List[Dict[str, Any]] = []
        self.indexes: List[Dict[str, Any]] = [{"v": 2, "key": {"_id": 1}, "name": "_id_"}]
        self.dropped = 0
        self._next_id = 1
    
    def _insert(self, person: Person) -> Person:
        person.id = str(self._next_id)
        self._next_id += 1
        self.documents.append({"_id": person.id, **person.to_document()})
        return person
    
    def _entity(self, doc: Dict[str, Any]) -> Person:
        doc = copy.deepcopy(doc)
        doc["id"] = doc.pop("_id")
        return Person(**doc)
    
    def create(self, person):
        return self._insert(person)
    
    def create_many(self, people):
        return [self._insert(person) for person in people]
    
    def find_all(self):
        return [self._entity(doc) for doc in self.documents]
    
    def find_by_salary_above(self, threshold):
        return [self._entity(doc) for doc in self.documents if doc["salary"] > threshold]
    
    def update_salary_by_name(self, name, salary):
        for doc in self.documents:
            if doc["name"] == name:
                if doc["salary"] == salary:
                    return 0
                doc["salary"] = salary
                return 1
        return 0
    
    def increase_salary_for_age_above(self, age, amount):
        modified = 0
        for doc in self.documents:
            if doc["age"] > age and amount:
                doc["salary"] += amount
                modified += 1
        return modified
    
    def delete_by_name(self, name):
        for doc in self.documents:
            if doc["name"] == name:
                self.documents.remove(doc)
                return 1
        return 0
    
    def delete_with_salary_below(self, threshold):
        before = len(self.documents)
        self.documents = [doc for doc in self.documents if not doc["salary"] < threshold]
        return before - len(self.documents)
    
    def _add_index(self, name, key, **options):
        if not any(index["name"] == name for index in self.indexes):
            self.indexes.append({"v": 2, "key": key, "name": name, **options})
        return name
    
    def create_unique_name_index(self):
        return self._add_index("name_1", {"name": 1}, unique=True)
    
    def create_profession_salary_index(self):
        return self._add_index("profession_1_salary_-1", {"profession": 1, "salary": -1})
    
    def list_indexes(self):
        return copy.deepcopy(self.indexes)
    
    def salary_stats_by_profession(self):
        groups: Dict[str, List[Dict[str, Any]]] = {}
        for doc in self.documents:
            groups.setdefault(doc["profession"], []).append(doc)
        return [
            ProfessionSalaryStats(
                profession=profession,
                average_salary=sum(d["salary"] for d in docs) / len(docs),
                total_salary=sum(d["salary"] for d in docs),
                sample_name=docs[0]["name"],
            )
            for profession, docs in groups.items()
        ]
    
    def headcount_by_city(self):
        counts: Dict[str, int] = {}
        for doc in self.documents:
            counts[doc["city"]] = counts.get(doc["city"], 0) + 1
        rows = [CityHeadcount(city=city, count=count) for city, count in counts.items()]
        return sorted(rows, key=lambda row: row.count, reverse=True)
    
    def drop(self):
        self.documents = []
        self.indexes = self.indexes[:1]
        self.dropped += 1


@pytest.fixture
def memory_repository():
    return InMemoryPersonRepository()
