"""
Pytest configuration and shared fixtures.
"""

import re
from types import SimpleNamespace
from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.services.job_store import JobStore, get_job_store
from app.utils.security import get_api_key

TEST_API_KEY = "test-secret-key"


class FakeCursor:
    def __init__(self, documents: List[Dict[str, Any]]):
        self.documents = documents

    async def to_list(self, length=None):
        return [dict(document) for document in self.documents]


class FakeCollection:
    """In-memory stand-in for a motor collection, insertion ordered.

    Understands the equality and ``$regex`` filters the job store sends.
    """

    def __init__(self):
        self.documents: Dict[str, Dict[str, Any]] = {}
        self.calls: List[str] = []

    def _matches(self, document: Dict[str, Any], query: Dict[str, Any]) -> bool:
        for field, condition in query.items():
            value = document.get(field)
            if isinstance(condition, dict) and "$regex" in condition:
                if not isinstance(value, str) or not re.search(condition["$regex"], value):
                    return False
            elif value != condition:
                return False
        return True

    def find(self, query: Dict[str, Any]):
        self.calls.append("find")
        return FakeCursor([d for d in self.documents.values() if self._matches(d, query)])

    async def find_one(self, query: Dict[str, Any]):
        self.calls.append("find_one")
        for document in self.documents.values():
            if self._matches(document, query):
                return dict(document)
        return None

    async def insert_one(self, document: Dict[str, Any]):
        self.calls.append("insert_one")
        self.documents[document["_id"]] = dict(document)

    async def replace_one(self, query: Dict[str, Any], document: Dict[str, Any], upsert=False):
        self.calls.append("replace_one")
        self.documents[query["_id"]] = dict(document)

    async def update_one(self, query: Dict[str, Any], update: Dict[str, Any]):
        self.calls.append("update_one")
        document = self.documents.get(query["_id"])
        if document is None:
            return SimpleNamespace(matched_count=0, modified_count=0)
        modified = 0
        for field, value in update.get("$addToSet", {}).items():
            values = document.setdefault(field, [])
            if value not in values:
                values.append(value)
                modified = 1
        return SimpleNamespace(matched_count=1, modified_count=modified)

    async def delete_one(self, query: Dict[str, Any]):
        self.calls.append("delete_one")
        self.documents.pop(query["_id"], None)


@pytest.fixture
def collection() -> FakeCollection:
    return FakeCollection()


@pytest.fixture
def client(collection):
    """TestClient with the store and API key swapped for test doubles."""
    app.dependency_overrides[get_job_store] = lambda: JobStore(collection)
    app.dependency_overrides[get_api_key] = lambda: TEST_API_KEY
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> Dict[str, str]:
    return {"Authorization": TEST_API_KEY}


@pytest.fixture
def job_payload() -> Dict[str, Any]:
    """Valid job body as a client would send it."""
    return {
        "title": "Engineer",
        "company": "Acme Corp",
        "location": "Remote",
        "description": "Build and run backend services.",
        "requirements": "3+ years of Python",
        "type": "FULL_TIME",
        "salary": "100k-120k",
        "experienceLevel": "MID",
        "skills": ["python", "mongodb"],
        "postedDate": "2026-01-05T09:00:00",
        "expiryDate": "2026-03-05T09:00:00",
        "companyId": "acme",
        "applicants": [],
    }


def stored_job(job_id: str, title: str, location: str = "Remote", job_type: str = "FULL_TIME") -> Dict[str, Any]:
    """A job document as it sits in the collection."""
    return {
        "_id": job_id,
        "title": title,
        "company": "Acme Corp",
        "location": location,
        "description": "Some description",
        "type": job_type,
        "expiryDate": "2026-03-05T09:00:00",
        "skills": [],
        "applicants": [],
        "active": True,
    }


@pytest.fixture
def seeded_collection(collection) -> FakeCollection:
    """Five jobs covering the search filters."""
    for document in [
        stored_job("j1", "Engineer", "Remote"),
        stored_job("j2", "Engineering Manager", "New York", "FULL_TIME"),
        stored_job("j3", "Software Engineer", "Remote"),
        stored_job("j4", "Designer", "remote", "CONTRACT"),
        stored_job("j5", "English Teacher", "Remote Office", "PART_TIME"),
    ]:
        collection.documents[document["_id"]] = document
    return collection
