"""
Database Connection and Document Store
"""
from motor.motor_asyncio import AsyncIOMotorClient
from typing import Any, Dict, List, Optional
import logging
import asyncio
import uuid
from pymongo import ReturnDocument
from pymongo.errors import ServerSelectionTimeoutError, ConnectionFailure, PyMongoError

from .config import settings

logger = logging.getLogger(__name__)


class DocumentStoreError(Exception):
    """Raised when the document store cannot complete an operation"""


class DocumentNotFoundError(DocumentStoreError):
    """Raised when a document id does not exist in the collection"""

    def __init__(self, collection_id: str, document_id: str):
        self.collection_id = collection_id
        self.document_id = document_id
        super().__init__(f"Document {document_id} not found in {collection_id}")


class Database:
    """MongoDB database connection manager"""

    client: Optional[AsyncIOMotorClient] = None
    _connected: bool = False

    async def connect(self, max_retries: int = 3, retry_delay: int = 2):
        """Establish database connection with retry logic"""
        if self.client is not None:
            return

        for attempt in range(max_retries):
            try:
                logger.info(f"Connecting to MongoDB (attempt {attempt + 1}/{max_retries}): {settings.mongo_url}")
                self.client = AsyncIOMotorClient(
                    settings.mongo_url,
                    serverSelectionTimeoutMS=5000,
                    connectTimeoutMS=5000
                )

                await self.client.admin.command('ping')
                self._connected = True
                logger.info(f"Connected to database: {settings.database_id}")
                return

            except (ServerSelectionTimeoutError, ConnectionFailure) as e:
                logger.warning(f"MongoDB connection attempt {attempt + 1} failed: {e}")
                if attempt < max_retries - 1:
                    logger.info(f"Retrying in {retry_delay} seconds...")
                    await asyncio.sleep(retry_delay)
                else:
                    logger.error("Failed to connect to MongoDB after all retries")
                    self._connected = False
                    # The client stays usable; requests fail per call until the server is reachable

    async def disconnect(self):
        """Close database connection"""
        if self.client is not None:
            self.client.close()
            self.client = None
            self._connected = False
            logger.info("Disconnected from MongoDB")

    def get_client(self) -> AsyncIOMotorClient:
        """Get client instance"""
        if self.client is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self.client

    def is_connected(self) -> bool:
        """Check if database is connected"""
        return self._connected

    async def check_connection(self) -> bool:
        """Check if database connection is alive"""
        if self.client is None:
            return False
        try:
            await self.client.admin.command('ping')
            self._connected = True
            return True
        except PyMongoError:
            self._connected = False
            return False


class DocumentStore:
    """
    Schemaless document storage on top of MongoDB.

    Every call is addressed by a database id and a collection id. Documents
    carry their own string ``id``; Mongo's ``_id`` is never returned.
    """

    def __init__(self, client: AsyncIOMotorClient):
        self.client = client

    @staticmethod
    def unique_id() -> str:
        """Generate a fresh document id"""
        return uuid.uuid4().hex

    def _collection(self, database_id: str, collection_id: str):
        return self.client[database_id][collection_id]

    async def create_document(
        self, database_id: str, collection_id: str, document_id: str, data: Dict[str, Any]
    ) -> Dict[str, Any]:
        document = {"id": document_id, **data}
        try:
            # insert_one adds _id to the dict it is given
            await self._collection(database_id, collection_id).insert_one(dict(document))
        except PyMongoError as e:
            raise DocumentStoreError(str(e)) from e
        return document

    async def list_documents(
        self, database_id: str, collection_id: str, filters: Optional[Dict[str, Any]] = None
    ) -> List[Dict[str, Any]]:
        try:
            cursor = self._collection(database_id, collection_id).find(filters or {}, {"_id": 0})
            return await cursor.to_list(length=None)
        except PyMongoError as e:
            raise DocumentStoreError(str(e)) from e

    async def get_document(self, database_id: str, collection_id: str, document_id: str) -> Dict[str, Any]:
        try:
            document = await self._collection(database_id, collection_id).find_one(
                {"id": document_id}, {"_id": 0}
            )
        except PyMongoError as e:
            raise DocumentStoreError(str(e)) from e

        if document is None:
            raise DocumentNotFoundError(collection_id, document_id)
        return document

    async def update_document(
        self, database_id: str, collection_id: str, document_id: str, data: Dict[str, Any]
    ) -> Dict[str, Any]:
        try:
            document = await self._collection(database_id, collection_id).find_one_and_update(
                {"id": document_id},
                {"$set": data},
                projection={"_id": 0},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise DocumentStoreError(str(e)) from e

        if document is None:
            raise DocumentNotFoundError(collection_id, document_id)
        return document

    async def delete_document(self, database_id: str, collection_id: str, document_id: str) -> None:
        try:
            result = await self._collection(database_id, collection_id).delete_one({"id": document_id})
        except PyMongoError as e:
            raise DocumentStoreError(str(e)) from e

        if result.deleted_count == 0:
            raise DocumentNotFoundError(collection_id, document_id)


# Singleton connection manager
database = Database()


def get_document_store() -> DocumentStore:
    """Dependency for getting the document store in routes"""
    return DocumentStore(database.get_client())
