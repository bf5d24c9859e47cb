"""Tests for the in-memory repository."""

import pytest

from recordkeeper.core.exceptions import RecordNotFoundError
from recordkeeper.storage import InMemoryRepository


def test_insert_assigns_increasing_ids():
    """Ids start at 1 and are never reused after a delete."""
    repo = InMemoryRepository("employee")
    first = repo.insert({"name": "Ada"})
    second = repo.insert({"name": "Bob"})
    assert (first["id"], second["id"]) == (1, 2)
    repo.delete(2)
    assert repo.insert({"name": "Cy"})["id"] == 3
    assert len(repo) == 2


def test_insert_with_explicit_id():
    """Seeded records keep their id; the counter moves past it."""
    repo = InMemoryRepository("employee", [{"id": 10, "name": "Ada"}])
    assert repo.get(10)["name"] == "Ada"
    assert repo.insert({"name": "Bob"})["id"] == 11
    with pytest.raises(ValueError, match="id already in use"):
        repo.insert({"id": 10, "name": "Dup"})


def test_returned_records_are_copies():
    """Mutating a returned record does not change the stored one."""
    repo = InMemoryRepository("employee")
    source = {"name": "Ada", "tags": ["a"]}
    created = repo.insert(source)
    source["tags"].append("b")
    created["name"] = "changed"
    repo.find()[0]["tags"].append("c")
    assert repo.get(created["id"]) == {"id": 1, "name": "Ada", "tags": ["a"]}


def test_find_filters():
    """Keyword filters and a predicate must all match."""
    repo = InMemoryRepository(
        "attendance",
        [
            {"employeeId": 1, "status": "present"},
            {"employeeId": 1, "status": "absent"},
            {"employeeId": 2, "status": "present"},
        ],
    )
    assert len(repo.find(status="present")) == 2
    assert [r["id"] for r in repo.find(employeeId=1, status="absent")] == [2]
    assert [r["id"] for r in repo.find(lambda r: r["employeeId"] == 2)] == [3]
    assert repo.find(status="late") == []


def test_update_ignores_id_and_returns_record():
    """Updates merge fields but cannot change the id."""
    repo = InMemoryRepository("employee", [{"name": "Ada", "position": "Dev"}])
    updated = repo.update(1, {"id": 99, "position": "Lead"})
    assert updated == {"id": 1, "name": "Ada", "position": "Lead"}


def test_missing_records_raise():
    """get, update and delete of an unknown id raise RecordNotFoundError."""
    repo = InMemoryRepository("employee")
    for call in (lambda: repo.get(5), lambda: repo.update(5, {}), lambda: repo.delete(5)):
        with pytest.raises(RecordNotFoundError, match="employee record not found: 5"):
            call()
