"""
Shared fixtures: in-memory document store, deterministic clock, API client
"""
import itertools
import os

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

os.environ.setdefault("JWT_SECRET", "test-secret")

from notes_app.database import DocumentNotFoundError, DocumentStoreError  # noqa: E402
from notes_app.main import app  # noqa: E402
from notes_app.routes.notes import get_note_service  # noqa: E402
from notes_app.services.auth import create_access_token  # noqa: E402
from notes_app.services.notes import NoteService  # noqa: E402

DATABASE_ID = "test-db"
COLLECTION_ID = "notes"


class FakeDocumentStore:
    """In-memory stand-in for DocumentStore with switchable failures"""

    def __init__(self):
        self.collections = {}
        self.fail_on = set()
        self._ids = itertools.count(1)

    def unique_id(self) -> str:
        return f"note-{next(self._ids)}"

    def _check(self, operation):
        if operation in self.fail_on:
            raise DocumentStoreError(f"{operation} failed")

    def _coll(self, database_id, collection_id):
        return self.collections.setdefault((database_id, collection_id), {})

    async def create_document(self, database_id, collection_id, document_id, data):
        self._check("create")
        document = {"id": document_id, **data}
        self._coll(database_id, collection_id)[document_id] = dict(document)
        return document

    async def list_documents(self, database_id, collection_id, filters=None):
        self._check("list")
        filters = filters or {}
        return [
            dict(doc)
            for doc in self._coll(database_id, collection_id).values()
            if all(doc.get(key) == value for key, value in filters.items())
        ]

    async def get_document(self, database_id, collection_id, document_id):
        self._check("get")
        coll = self._coll(database_id, collection_id)
        if document_id not in coll:
            raise DocumentNotFoundError(collection_id, document_id)
        return dict(coll[document_id])

    async def update_document(self, database_id, collection_id, document_id, data):
        self._check("update")
        coll = self._coll(database_id, collection_id)
        if document_id not in coll:
            raise DocumentNotFoundError(collection_id, document_id)
        coll[document_id].update(data)
        return dict(coll[document_id])

    async def delete_document(self, database_id, collection_id, document_id):
        self._check("delete")
        coll = self._coll(database_id, collection_id)
        if document_id not in coll:
            raise DocumentNotFoundError(collection_id, document_id)
        del coll[document_id]

    def documents(self):
        return self._coll(DATABASE_ID, COLLECTION_ID)


@pytest.fixture
def store():
    return FakeDocumentStore()


@pytest.fixture
def clock():
    """Clock that moves forward one second per call"""
    ticks = itertools.count()
    return lambda: f"2026-01-01T00:00:{next(ticks):02d}.000Z"


@pytest.fixture
def service(store, clock):
    return NoteService(store, DATABASE_ID, COLLECTION_ID, clock=clock)


@pytest_asyncio.fixture
async def client(service):
    """HTTP client talking to the app with the fake store injected"""
    app.dependency_overrides[get_note_service] = lambda: service
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


def auth_headers(user_id: str) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


@pytest.fixture
def user1_headers():
    return auth_headers("user_1")


@pytest.fixture
def user2_headers():
    return auth_headers("user_2")
