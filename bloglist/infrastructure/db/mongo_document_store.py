# Standard library imports
import logging
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorDatabase
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError as MongoDuplicateKeyError, PyMongoError

# Local application imports
from ...domain.exceptions import DuplicateKeyError, StoreError
from ...domain.repositories.document_store import DocumentStore
from .mongo_connection import get_database

logger = logging.getLogger(__name__)

MONGO_ID = "_id"


class MongoDocumentStore(DocumentStore):
    """MongoDB implementation of DocumentStore"""

    def __init__(self, database: Optional[AsyncIOMotorDatabase] = None) -> None:
        self.database = database if database is not None else get_database()

    async def find_all(self, collection: str) -> List[Dict[str, Any]]:
        try:
            cursor = self.database[collection].find({})
            return [document async for document in cursor]
        except PyMongoError as e:
            raise self._store_error("find_all", collection, e)

    async def find_by_id(self, collection: str, document_id: str) -> Optional[Dict[str, Any]]:
        object_id = self._to_object_id(document_id)
        if object_id is None:
            return None

        try:
            return await self.database[collection].find_one({MONGO_ID: object_id})
        except PyMongoError as e:
            raise self._store_error("find_by_id", collection, e)

    async def find_one(self, collection: str, criteria: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        try:
            return await self.database[collection].find_one(criteria)
        except PyMongoError as e:
            raise self._store_error("find_one", collection, e)

    async def insert(self, collection: str, document: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a document; MongoDB always generates the _id

        Raises:
            DuplicateKeyError: If a unique index rejects the document
            StoreError: On any other driver failure
        """
        new_document = {k: v for k, v in document.items() if k != MONGO_ID}
        try:
            result = await self.database[collection].insert_one(new_document)
        except MongoDuplicateKeyError as e:
            key = (e.details or {}).get("keyValue")
            logger.info(f"Insert into '{collection}' rejected by unique index: {key}")
            raise DuplicateKeyError(collection, key) from e
        except PyMongoError as e:
            raise self._store_error("insert", collection, e)

        # insert_one sets _id on the dict it was given
        new_document[MONGO_ID] = result.inserted_id
        return new_document

    async def update_by_id(
        self, collection: str, document_id: str, patch: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        object_id = self._to_object_id(document_id)
        if object_id is None:
            return None

        fields = {k: v for k, v in patch.items() if k != MONGO_ID}
        if not fields:
            return await self.find_by_id(collection, document_id)

        try:
            return await self.database[collection].find_one_and_update(
                {MONGO_ID: object_id},
                {"$set": fields},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise self._store_error("update_by_id", collection, e)

    async def delete_by_id(self, collection: str, document_id: str) -> bool:
        object_id = self._to_object_id(document_id)
        if object_id is None:
            return False

        try:
            result = await self.database[collection].delete_one({MONGO_ID: object_id})
        except PyMongoError as e:
            raise self._store_error("delete_by_id", collection, e)
        return result.deleted_count > 0

    async def ensure_unique_index(self, collection: str, field_name: str) -> None:
        try:
            await self.database[collection].create_index(field_name, unique=True)
        except PyMongoError as e:
            raise self._store_error("ensure_unique_index", collection, e)
        logger.info(f"Unique index on '{collection}.{field_name}' ensured")

    @staticmethod
    def _to_object_id(document_id: str) -> Optional[ObjectId]:
        # ObjectId(None) would mint a new id
        if not document_id:
            return None
        try:
            return ObjectId(document_id)
        except (InvalidId, TypeError):
            return None

    @staticmethod
    def _store_error(operation: str, collection: str, error: Exception) -> StoreError:
        # Driver details stay in the log
        logger.error(f"MongoDB {operation} on '{collection}' failed: {error}", exc_info=error)
        return StoreError(
            "Document store operation failed",
            details={"operation": operation, "collection": collection},
        )
