"""
MongoDB Connection Management

Centralized, lazily created client shared by all repositories.
"""
import logging
from typing import Optional, Dict, Any
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import ConnectionFailure, ServerSelectionTimeoutError
import certifi

from app.config import settings

logger = logging.getLogger(__name__)

# Global connection instance
_client: Optional[MongoClient] = None
_database: Optional[Database] = None


def _client_options() -> Dict[str, Any]:
    options: Dict[str, Any] = {
        "serverSelectionTimeoutMS": 10000,
        "connectTimeoutMS": 15000,
        "socketTimeoutMS": 15000,
        "retryWrites": True,
        "maxPoolSize": 50,
    }
    if settings.MONGODB_TLS:
        options["tls"] = True
        options["tlsCAFile"] = certifi.where()
    return options


def connect(
    connection_string: str = None,
    db_name: str = None
) -> Database:
    """
    Establish the MongoDB connection.

    Args:
        connection_string: MongoDB URI (defaults to settings)
        db_name: Database name (defaults to settings)

    Returns:
        MongoDB Database instance

    Raises:
        ConnectionFailure: If the server cannot be reached
    """
    global _client, _database

    if _database is not None:
        return _database

    conn_str = connection_string or settings.MONGODB_URI
    database_name = db_name or settings.MONGODB_DB_NAME

    try:
        _client = MongoClient(conn_str, **_client_options())
        _client.admin.command("ping")
        _database = _client[database_name]

        logger.info(f"Connected to MongoDB: {database_name}")
        return _database

    except (ConnectionFailure, ServerSelectionTimeoutError) as e:
        logger.error(f"Failed to connect to MongoDB: {str(e)}")
        _client = None
        raise


def get_database() -> Database:
    """Get the database instance, connecting if necessary."""
    if _database is None:
        return connect()
    return _database


def close_database():
    """Close the database connection."""
    global _client, _database
    if _client:
        _client.close()
        _client = None
        _database = None
        logger.info("Disconnected from MongoDB")


def get_collection(collection_name: str) -> Collection:
    """Get a collection from the database."""
    return get_database()[collection_name]
