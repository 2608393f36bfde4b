"""Shared test fixtures"""
import asyncio
import copy
from datetime import datetime, UTC
from types import SimpleNamespace

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from review_service.core.rate_limit import limiter
from review_service.db.mongodb import get_reaction_collection, get_review_collection
from review_service.repositories.reaction import ReactionRepository
from review_service.repositories.review import ReviewRepository
from review_service.schemas.review import ReplySubmission, ReviewSubmission
from review_service.services.reaction import ReactionService
from review_service.services.review import ReviewService


class InMemoryCursor:
    """Subset of the Motor cursor API used by the repositories"""

    def __init__(self, docs):
        self._docs = docs

    def sort(self, keys):
        for key, direction in reversed(keys):
            self._docs.sort(key=lambda doc: doc.get(key), reverse=direction < 0)
        return self

    async def to_list(self, length=None):
        await asyncio.sleep(0)
        return [copy.deepcopy(doc) for doc in self._docs]


class InMemoryCollection:
    """
    Async document collection supporting the operations the repositories use.

    Every operation yields to the event loop once before touching the data,
    so concurrent callers interleave between operations but each single
    operation is atomic, as it is on a real server.
    """

    def __init__(self):
        self.docs = []

    @staticmethod
    def _matches(doc, query):
        return all(doc.get(key) == value for key, value in query.items())

    def _find_doc(self, query):
        return next((doc for doc in self.docs if self._matches(doc, query)), None)

    @staticmethod
    def _apply(doc, update):
        for field, value in update.get("$push", {}).items():
            doc.setdefault(field, []).append(copy.deepcopy(value))
        for path, amount in update.get("$inc", {}).items():
            target = doc
            *parents, leaf = path.split(".")
            for part in parents:
                target = target.setdefault(part, {})
            target[leaf] = target.get(leaf, 0) + amount

    async def insert_one(self, doc):
        await asyncio.sleep(0)
        doc.setdefault("_id", ObjectId())
        self.docs.append(copy.deepcopy(doc))
        return SimpleNamespace(inserted_id=doc["_id"])

    def find(self, query):
        return InMemoryCursor([doc for doc in self.docs if self._matches(doc, query)])

    async def find_one(self, query):
        await asyncio.sleep(0)
        doc = self._find_doc(query)
        return copy.deepcopy(doc) if doc else None

    async def find_one_and_update(self, query, update, upsert=False, return_document=None):
        await asyncio.sleep(0)
        doc = self._find_doc(query)
        if doc is None:
            if not upsert:
                return None
            doc = {"_id": ObjectId(), **query}
            self.docs.append(doc)
        self._apply(doc, update)
        return copy.deepcopy(doc)


@pytest.fixture
def review_collection():
    return InMemoryCollection()


@pytest.fixture
def reaction_collection():
    return InMemoryCollection()


@pytest.fixture
def review_service(review_collection):
    return ReviewService(ReviewRepository(review_collection))


@pytest.fixture
def reaction_service(reaction_collection):
    return ReactionService(ReactionRepository(reaction_collection))


@pytest.fixture
def review_submission():
    return ReviewSubmission(text="A slow burn worth it", name="Sam", email="sam@example.com", rating=8)


@pytest.fixture
def reply_submission():
    return ReplySubmission(text="Agreed, great ending", name="Robin", email="robin@example.com")


@pytest.fixture
def review_doc():
    """Review document as stored in MongoDB"""
    return {
        "_id": ObjectId("507f1f77bcf86cd799439011"),
        "source": "tmdb",
        "external_id": "603",
        "text": "Still holds up",
        "name": "Sam",
        "email": "sam@example.com",
        "rating": 9,
        "created_at": datetime(2024, 5, 1, 12, 0, tzinfo=UTC),
        "replies": [
            {
                "_id": ObjectId("507f1f77bcf86cd799439012"),
                "text": "It really does",
                "name": "Robin",
                "email": "robin@example.com",
                "created_at": datetime(2024, 5, 2, 8, 30, tzinfo=UTC),
            }
        ],
    }


@pytest.fixture
def client(review_collection, reaction_collection):
    """HTTP client against the app with the database swapped for in-memory collections"""
    from main import app

    async def override_review_collection():
        return review_collection

    async def override_reaction_collection():
        return reaction_collection

    app.dependency_overrides[get_review_collection] = override_review_collection
    app.dependency_overrides[get_reaction_collection] = override_reaction_collection
    limiter.enabled = False

    yield TestClient(app)

    app.dependency_overrides.clear()
    limiter.enabled = True
