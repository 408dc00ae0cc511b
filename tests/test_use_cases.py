"""Tests for the individual walkthrough steps."""
import logging
from unittest.mock import MagicMock

import pytest
from bson import ObjectId

from people_lab.application.use_cases.aggregate_people import AggregatePeopleUseCase
from people_lab.application.use_cases.create_indexes import CreateIndexesUseCase
from people_lab.application.use_cases.create_people import CreatePeopleUseCase
from people_lab.application.use_cases.delete_people import DeletePeopleUseCase
from people_lab.application.use_cases.read_people import ReadPeopleUseCase
from people_lab.application.use_cases.update_people import UpdatePeopleUseCase
from people_lab.domain.constants.sample_people import JOAO
from people_lab.infrastructure.db.mongo_person_repository import MongoPersonRepository


class TestCreatePeople:

    def test_inserts_sample_people(self, memory_repository):
        summary = CreatePeopleUseCase(memory_repository).execute()
        assert summary.single.name == "João Silva"
        assert [p.name for p in summary.bulk] == ["Maria Oliveira", "Carlos Souza"]
        assert summary.inserted_count == 3
        assert len(memory_repository.documents) == 3

    def test_sample_constants_are_not_mutated(self, memory_repository):
        CreatePeopleUseCase(memory_repository).execute()
        assert JOAO.id is None

    def test_logs_inserted_document_with_object_id(self, mock_mongo_client, mock_collection, caplog):
        oid = ObjectId("65a1f0c2e4b0a1b2c3d4e5f6")
        mock_collection.insert_one.return_value = MagicMock(inserted_id=oid)
        mock_collection.insert_many.return_value = MagicMock(inserted_ids=[ObjectId(), ObjectId()])
        repository = MongoPersonRepository(mongo_client=mock_mongo_client, collection_name="people")
        with caplog.at_level(logging.INFO):
            CreatePeopleUseCase(repository).execute()
        assert 'Document inserted: {"_id": {"$oid": "65a1f0c2e4b0a1b2c3d4e5f6"}, "name": "João Silva"' in caplog.text

    def test_empty_bulk_is_rejected(self, memory_repository):
        with pytest.raises(ValueError):
            CreatePeopleUseCase(memory_repository).execute(bulk=[])
        assert memory_repository.documents == []


class TestReadPeople:

    def test_filters_by_salary(self, memory_repository):
        CreatePeopleUseCase(memory_repository).execute()
        summary = ReadPeopleUseCase(memory_repository).execute()
        assert len(summary.everyone) == 3
        assert summary.salary_threshold == 6000
        assert [p.name for p in summary.above_threshold] == ["João Silva", "Maria Oliveira"]

    def test_logs_every_document(self, memory_repository, caplog):
        CreatePeopleUseCase(memory_repository).execute()
        with caplog.at_level(logging.INFO):
            ReadPeopleUseCase(memory_repository).execute()
        assert "=== READ DOCUMENTS ===" in caplog.text
        assert '"name": "Carlos Souza"' in caplog.text

    def test_logs_stored_documents_as_extended_json(self, mock_mongo_client, mock_collection, caplog):
        oid = ObjectId("65a1f0c2e4b0a1b2c3d4e5f6")
        mock_collection.find.side_effect = lambda *args: iter([
            {"_id": oid, "name": "Ana", "age": 40, "city": "Recife", "profession": "Lawyer", "salary": 7000.0},
            {"_id": ObjectId(), "name": "Bia"},
        ])
        repository = MongoPersonRepository(mongo_client=mock_mongo_client, collection_name="people")
        with caplog.at_level(logging.INFO):
            summary = ReadPeopleUseCase(repository).execute()
        assert '{"_id": {"$oid": "65a1f0c2e4b0a1b2c3d4e5f6"}, "name": "Ana"' in caplog.text
        assert '"name": "Bia"}' in caplog.text
        assert len(summary.everyone) == 2

    def test_negative_threshold_is_rejected(self, memory_repository):
        with pytest.raises(ValueError):
            ReadPeopleUseCase(memory_repository).execute(salary_threshold=-1)


class TestUpdatePeople:

    def test_sets_then_raises_salaries(self, memory_repository):
        CreatePeopleUseCase(memory_repository).execute()
        summary = UpdatePeopleUseCase(memory_repository).execute()
        assert (summary.single_modified, summary.bulk_modified) == (1, 2)
        salaries = {doc["name"]: doc["salary"] for doc in memory_repository.documents}
        assert salaries == {"João Silva": 9500.0, "Maria Oliveira": 12500.0, "Carlos Souza": 5500.0}

    def test_unknown_name_modifies_nothing(self, memory_repository):
        summary = UpdatePeopleUseCase(memory_repository).execute(name="Nobody")
        assert summary.single_modified == 0

    def test_blank_name_is_rejected(self, memory_repository):
        with pytest.raises(ValueError):
            UpdatePeopleUseCase(memory_repository).execute(name="  ")


class TestDeletePeople:

    def test_deletes_by_name_then_salary(self, memory_repository):
        CreatePeopleUseCase(memory_repository).execute()
        summary = DeletePeopleUseCase(memory_repository).execute()
        assert (summary.single_deleted, summary.bulk_deleted) == (1, 0)
        assert [doc["name"] for doc in memory_repository.documents] == ["João Silva", "Maria Oliveira"]

    def test_salary_threshold_removes_low_earners(self, memory_repository):
        CreatePeopleUseCase(memory_repository).execute()
        summary = DeletePeopleUseCase(memory_repository).execute(name="Nobody", salary_threshold=9000)
        assert (summary.single_deleted, summary.bulk_deleted) == (0, 2)

    def test_invalid_arguments_are_rejected(self, memory_repository):
        with pytest.raises(ValueError):
            DeletePeopleUseCase(memory_repository).execute(name="")
        with pytest.raises(ValueError):
            DeletePeopleUseCase(memory_repository).execute(salary_threshold=-5)


class TestIndexesAndAggregations:

    def test_creates_and_lists_indexes(self, memory_repository):
        summary = CreateIndexesUseCase(memory_repository).execute()
        assert summary.unique_name_index == "name_1"
        assert summary.compound_index == "profession_1_salary_-1"
        assert [index["name"] for index in summary.indexes] == ["_id_", "name_1", "profession_1_salary_-1"]

    def test_aggregations(self, memory_repository):
        CreatePeopleUseCase(memory_repository).execute()
        summary = AggregatePeopleUseCase(memory_repository).execute()
        stats = {row.profession: row for row in summary.salary_by_profession}
        assert stats["Physician"].average_salary == 12000.0
        assert stats["Developer"].sample_name == "Carlos Souza"
        assert sum(row.count for row in summary.headcount_by_city) == 3
