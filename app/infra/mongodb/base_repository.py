"""
Base Repository Pattern

Base class for all MongoDB repositories.
Provides the common CRUD helpers the domain repositories build on.
"""
import logging
from typing import Optional, List, Dict, Any, TypeVar, Generic
from datetime import datetime
from pymongo import ReturnDocument
from pymongo.collection import Collection

from app.infra.mongodb.connection import get_collection

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=Dict[str, Any])


def _serialize(document: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Stringify the ObjectId so documents can be returned as JSON."""
    if document and "_id" in document:
        document["_id"] = str(document["_id"])
    return document


class BaseRepository(Generic[T]):
    """
    Base repository with common CRUD operations.

    Subclasses set the collection_name class attribute.
    """

    collection_name: str = None  # Override in subclass

    def __init__(self, collection: Collection = None):
        if not self.collection_name:
            raise ValueError(f"collection_name must be set in {self.__class__.__name__}")
        self._collection = collection

    @property
    def collection(self) -> Collection:
        """Get the MongoDB collection (an injected one wins)."""
        if self._collection is not None:
            return self._collection
        return get_collection(self.collection_name)

    def insert_one(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a single document, stamping created_at.

        Returns:
            The stored document with its _id as a string
        """
        document["created_at"] = datetime.utcnow()
        result = self.collection.insert_one(document)
        document["_id"] = str(result.inserted_id)
        return document

    def find_one(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Find a single document matching query."""
        return _serialize(self.collection.find_one(query))

    def find_many(
        self,
        query: Dict[str, Any] = None,
        skip: int = 0,
        limit: int = 50,
        sort: List[tuple] = None
    ) -> List[Dict[str, Any]]:
        """
        Find multiple documents.

        Args:
            query: MongoDB query dict
            skip: Number of documents to skip
            limit: Maximum documents to return
            sort: List of (field, direction) tuples

        Returns:
            List of documents
        """
        cursor = self.collection.find(query or {})

        if sort:
            cursor = cursor.sort(sort)

        cursor = cursor.skip(skip).limit(limit)
        return [_serialize(doc) for doc in cursor]

    def update_and_return(
        self,
        query: Dict[str, Any],
        fields: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """
        $set fields on the first match and return the updated document.

        Returns:
            Updated document, or None when nothing matched
        """
        update = {"$set": {**fields, "updated_at": datetime.utcnow()}}
        result = self.collection.find_one_and_update(
            query,
            update,
            return_document=ReturnDocument.AFTER
        )
        return _serialize(result)

    def count(self, query: Dict[str, Any] = None) -> int:
        """Count documents matching query."""
        return self.collection.count_documents(query or {})
