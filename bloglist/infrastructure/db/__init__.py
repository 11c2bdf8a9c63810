from .mongo_connection import get_database, close_connection
from .mongo_document_store import MongoDocumentStore

__all__ = [
    "get_database",
    "close_connection",
    "MongoDocumentStore",
]
