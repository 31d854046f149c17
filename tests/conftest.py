"""
Shared fixtures for the API tests.

Environment variables are set BEFORE importing the app so that settings are
built with test values. The HTTP tests never reach MongoDB: the repository
dependencies are overridden with an in-memory repository that follows the
same contract as ``ResourceRepository``.
"""

import os

os.environ["ENVIRONMENT"] = "test"
os.environ["JWT_SECRET_KEY"] = "test-secret-key-for-unit-tests"
os.environ["MONGO_URI"] = "mongodb://localhost:27017"
os.environ["LOG_LEVEL"] = "WARNING"

import copy
from typing import Any, Dict, List, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from main import app
from repositories.base import StoreFailure
from repositories.resources import get_bookings_repository, get_services_repository
from services.security import issue_access_token


class InMemoryRepository:
    """Dict-backed stand-in for ResourceRepository."""

    def __init__(self, collection: str) -> None:
        self.collection = collection
        self.docs: Dict[ObjectId, Dict[str, Any]] = {}

    async def insert(self, doc: Dict[str, Any]) -> ObjectId:
        object_id = ObjectId()
        stored = {k: v for k, v in doc.items() if k != "_id"}
        stored["_id"] = object_id
        self.docs[object_id] = stored
        return object_id

    async def find_all(self) -> List[Dict[str, Any]]:
        return [copy.deepcopy(d) for d in self.docs.values()]

    async def find_one(self, object_id: ObjectId) -> Optional[Dict[str, Any]]:
        doc = self.docs.get(object_id)
        return copy.deepcopy(doc) if doc is not None else None

    async def update_merge(self, object_id: ObjectId, partial: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        if object_id not in self.docs:
            return None
        self.docs[object_id].update({k: v for k, v in partial.items() if k != "_id"})
        return copy.deepcopy(self.docs[object_id])

    async def update_field(self, object_id: ObjectId, key: str, value: Any) -> int:
        if object_id not in self.docs:
            return 0
        self.docs[object_id][key] = value
        return 1

    async def delete(self, object_id: ObjectId) -> int:
        return 1 if self.docs.pop(object_id, None) is not None else 0


class FailingRepository(InMemoryRepository):
    """Every operation fails the way a broken store connection would."""

    async def insert(self, doc):
        raise StoreFailure(self.collection, "insert")

    async def find_all(self):
        raise StoreFailure(self.collection, "find_all")

    async def find_one(self, object_id):
        raise StoreFailure(self.collection, "find_one")

    async def update_merge(self, object_id, partial):
        raise StoreFailure(self.collection, "update_merge")

    async def update_field(self, object_id, key, value):
        raise StoreFailure(self.collection, "update_field")

    async def delete(self, object_id):
        raise StoreFailure(self.collection, "delete")


@pytest.fixture
def services_repo() -> InMemoryRepository:
    return InMemoryRepository("services")


@pytest.fixture
def bookings_repo() -> InMemoryRepository:
    return InMemoryRepository("bookings")


@pytest.fixture
def client(services_repo, bookings_repo):
    """
    Test client wired to in-memory repositories.

    Startup events are not run, so no MongoDB connection is attempted.
    """
    app.dependency_overrides[get_services_repository] = lambda: services_repo
    app.dependency_overrides[get_bookings_repository] = lambda: bookings_repo
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def failing_client():
    app.dependency_overrides[get_services_repository] = lambda: FailingRepository("services")
    app.dependency_overrides[get_bookings_repository] = lambda: FailingRepository("bookings")
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> Dict[str, str]:
    token = issue_access_token("tester@example.com")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def service_payload() -> Dict[str, Any]:
    return {
        "name": "Landing page redesign",
        "category": "Web",
        "type": "Fixed",
        "description": "Responsive redesign of a marketing landing page",
        "duration": "2 weeks",
        "budget": 1500,
        "level": "Intermediate",
        "price": 1200,
        "date": "2025-09-01",
    }


@pytest.fixture
def booking_payload() -> Dict[str, Any]:
    return {
        "serviceId": "64f1c2a9e4b0a1b2c3d4e5f6",
        "userName": "Jamie Doe",
        "userEmail": "jamie@example.com",
        "message": "Is next week possible?",
    }
