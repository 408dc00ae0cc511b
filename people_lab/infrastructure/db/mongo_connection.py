"""
MongoDB Connection
==================

Singleton MongoDB client manager for database connections.
"""
import logging
from typing import Optional
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.collection import Collection

from people_lab.core.config import get_settings

logger = logging.getLogger(__name__)


class MongoClientManager:
    """
    Singleton MongoDB client manager.
    
    Owns the single MongoClient of the process and hands out the
    configured database and its collections.
    """
    _instance: Optional["MongoClientManager"] = None
    _client: Optional[MongoClient] = None
    _database: Optional[Database] = None
    
    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance
    
    def __init__(self):
        if self._client is None:
            self._initialize_client()
    
    def _initialize_client(self) -> None:
        """Initialize MongoDB client connection."""
        if self._client is not None:
            return  # Already initialized
        
        settings = get_settings()
        
        self._client = MongoClient(settings.mongo_uri)
        logger.info("✅ Connected to MongoDB")
        
        self._database = self._client[settings.mongo_database_name]
        logger.info(f"Database '{settings.mongo_database_name}' selected/created")
    
    @property
    def is_connected(self) -> bool:
        """True while the client has not been closed."""
        return self._client is not None
    
    def get_database(self) -> Database:
        """Get MongoDB database instance."""
        if self._database is None:
            self._initialize_client()
        return self._database
    
    def get_collection(self, collection_name: str) -> Collection:
        """
        Get a MongoDB collection.
        
        Collections are created lazily by the server on first write.
        
        Args:
            collection_name: Name of the collection
            
        Returns:
            MongoDB Collection object
        """
        database = self.get_database()
        collection = database[collection_name]
        logger.info(f"Collection '{collection_name}' selected/created")
        return collection
    
    def close(self) -> None:
        """Close MongoDB connection. Safe to call more than once."""
        if not self.is_connected:
            return
        self._client.close()
        self._client = None
        self._database = None
        logger.info("🔌 MongoDB connection closed")


def get_mongo_client() -> MongoClientManager:
    """Get singleton MongoDB client manager."""
    return MongoClientManager()
