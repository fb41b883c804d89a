# tests/conftest.py

import os
import sys
from types import SimpleNamespace

# Add the project root (where `app/` lives) to PYTHONPATH
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from app.db.mongo import get_messages_collection
from app.main import app


def _matches(doc, query):
    for key, expected in query.items():
        value = doc.get(key)
        if isinstance(expected, dict):
            if "$lt" in expected and not (value is not None and value < expected["$lt"]):
                return False
        elif value != expected:
            return False
    return True


class FakeCursor:
    def __init__(self, docs):
        self._docs = list(docs)
        self._skip = 0
        self._limit = None

    def sort(self, keys):
        # stable sort, least significant key first
        for key, direction in reversed(keys):
            self._docs.sort(key=lambda d: d[key], reverse=direction < 0)
        return self

    def skip(self, n):
        self._skip = n
        return self

    def limit(self, n):
        self._limit = n
        return self

    async def to_list(self, length=None):
        end = None if self._limit is None else self._skip + self._limit
        return [dict(d) for d in self._docs[self._skip:end]]


class FakeCollection:
    """Just enough of a Motor collection for the message store."""

    def __init__(self):
        self.docs = []

    async def insert_one(self, doc):
        self.docs.append(dict(doc))
        return SimpleNamespace(inserted_id=doc.get("_id"))

    async def find_one(self, query):
        for doc in self.docs:
            if _matches(doc, query):
                return dict(doc)
        return None

    def find(self, query=None):
        return FakeCursor(d for d in self.docs if _matches(d, query or {}))

    async def count_documents(self, query):
        return sum(1 for d in self.docs if _matches(d, query))

    async def delete_one(self, query):
        for i, doc in enumerate(self.docs):
            if _matches(doc, query):
                del self.docs[i]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)

    async def delete_many(self, query):
        keep = [d for d in self.docs if not _matches(d, query)]
        deleted = len(self.docs) - len(keep)
        self.docs = keep
        return SimpleNamespace(deleted_count=deleted)


@pytest.fixture
def collection():
    return FakeCollection()


@pytest.fixture(autouse=True)
def override_collection(collection):
    async def _get_collection():
        return collection

    app.dependency_overrides[get_messages_collection] = _get_collection
    yield
    app.dependency_overrides.pop(get_messages_collection, None)
