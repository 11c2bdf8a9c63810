"""
Shared pytest fixtures for bloglist tests.
"""
import copy
from collections import defaultdict
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock, patch

import pytest
from bson import ObjectId

from bloglist.core.security import hash_password
from bloglist.domain.exceptions import DuplicateKeyError
from bloglist.domain.repositories.blog_repository import BlogRepository
from bloglist.domain.repositories.document_store import DocumentStore
from bloglist.domain.repositories.user_registry import UserRegistry


INITIAL_BLOGS = [
    {
        "title": "React patterns",
        "author": "Michael Chan",
        "url": "https://reactpatterns.com/",
        "likes": 7,
    },
    {
        "title": "Go To Statement Considered Harmful",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
        "likes": 5,
    },
]


class InMemoryDocumentStore(DocumentStore):
    """Dict-backed DocumentStore honoring unique indexes, for tests"""

    def __init__(self) -> None:
        self.collections: Dict[str, Dict[str, Dict[str, Any]]] = defaultdict(dict)
        self.unique_fields: Dict[str, set] = defaultdict(set)

    def seed(self, collection: str, documents: List[Dict[str, Any]]) -> List[str]:
        ids = []
        for document in documents:
            document_id = str(ObjectId())
            self.collections[collection][document_id] = {**copy.deepcopy(document), "_id": document_id}
            ids.append(document_id)
        return ids

    def count(self, collection: str) -> int:
        return len(self.collections[collection])

    async def find_all(self, collection: str) -> List[Dict[str, Any]]:
        return [copy.deepcopy(d) for d in self.collections[collection].values()]

    async def find_by_id(self, collection: str, document_id: str) -> Optional[Dict[str, Any]]:
        document = self.collections[collection].get(document_id)
        return copy.deepcopy(document) if document is not None else None

    async def find_one(self, collection: str, criteria: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        for document in self.collections[collection].values():
            if all(document.get(k) == v for k, v in criteria.items()):
                return copy.deepcopy(document)
        return None

    async def insert(self, collection: str, document: Dict[str, Any]) -> Dict[str, Any]:
        new_document = {k: copy.deepcopy(v) for k, v in document.items() if k != "_id"}
        for field_name in self.unique_fields[collection]:
            for existing in self.collections[collection].values():
                if existing.get(field_name) == new_document.get(field_name):
                    raise DuplicateKeyError(collection, {field_name: new_document.get(field_name)})
        document_id = str(ObjectId())
        new_document["_id"] = document_id
        self.collections[collection][document_id] = new_document
        return copy.deepcopy(new_document)

    async def update_by_id(
        self, collection: str, document_id: str, patch: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        document = self.collections[collection].get(document_id)
        if document is None:
            return None
        document.update({k: copy.deepcopy(v) for k, v in patch.items() if k != "_id"})
        return copy.deepcopy(document)

    async def delete_by_id(self, collection: str, document_id: str) -> bool:
        return self.collections[collection].pop(document_id, None) is not None

    async def ensure_unique_index(self, collection: str, field_name: str) -> None:
        self.unique_fields[collection].add(field_name)


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_bloglist"
    mock.mongo_timeout_ms = 1000
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 60
    mock.bcrypt_rounds = 4
    mock.log_level = "INFO"
    mock.cors_origins = ["http://localhost:5173"]

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("bloglist.core.config.get_settings", return_value=mock), patch(
        "bloglist.core.security.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def store():
    """Empty in-memory document store with the username index declared."""
    memory_store = InMemoryDocumentStore()
    memory_store.unique_fields["users"].add("username")
    return memory_store


@pytest.fixture
def seeded_store(store):
    """Store holding INITIAL_BLOGS and no users."""
    store.seed("blogs", INITIAL_BLOGS)
    return store


@pytest.fixture
def blog_repository(seeded_store):
    return BlogRepository(store=seeded_store)


@pytest.fixture
def user_registry(seeded_store):
    return UserRegistry(store=seeded_store, password_hasher=hash_password)


@pytest.fixture
def initial_blogs():
    return INITIAL_BLOGS
