from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class DocumentStore(ABC):
    """
    Store adapter interface - opaque CRUD over named collections.

    Documents come back as plain dicts carrying the store's own identifier
    under ``_id``. Implementations raise ``StoreError`` for infrastructure
    failures and ``DuplicateKeyError`` when an insert hits a unique index.
    A malformed identifier behaves like an absent one.
    """

    @abstractmethod
    async def find_all(self, collection: str) -> List[Dict[str, Any]]:
        """Return every document of a collection in storage order"""
        pass

    @abstractmethod
    async def find_by_id(self, collection: str, document_id: str) -> Optional[Dict[str, Any]]:
        """Find a document by its store-assigned identifier"""
        pass

    @abstractmethod
    async def find_one(self, collection: str, criteria: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Find the first document whose fields equal all of ``criteria``"""
        pass

    @abstractmethod
    async def insert(self, collection: str, document: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a document and return it with its fresh identifier"""
        pass

    @abstractmethod
    async def update_by_id(
        self, collection: str, document_id: str, patch: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """Set the fields of ``patch`` and return the updated document, or None if absent"""
        pass

    @abstractmethod
    async def delete_by_id(self, collection: str, document_id: str) -> bool:
        """Delete a document; True if one was removed"""
        pass

    @abstractmethod
    async def ensure_unique_index(self, collection: str, field_name: str) -> None:
        """Make the store reject a second document with the same value of ``field_name``"""
        pass
