from typing import TYPE_CHECKING, Optional
from ...domain.repositories.document_store import DocumentStore
from ...infrastructure.db.mongo_connection import get_database
from ...infrastructure.db.mongo_document_store import MongoDocumentStore

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized store provider - single source of truth for the persistence handle"""

    @staticmethod
    def register(container: "BaseContainer", store: Optional[DocumentStore] = None) -> None:
        """
        Register the document store in the container.
        An explicitly passed store (tests, alternative backends) wins over MongoDB.
        """
        if store is None:
            store = MongoDocumentStore(database=get_database())

        container.register_singleton(DocumentStore, store)
