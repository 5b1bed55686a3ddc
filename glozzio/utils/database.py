# glozzio/utils/database.py
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient

from glozzio import config

logger = logging.getLogger("glozzio.database")


class Database:
    """
    Handle over the MongoDB client and the collections the API works with.

    Opened once at startup and shared by every request; call ``connect()``
    before touching a collection and ``close()`` on shutdown. A client can
    be injected (tests pass an in-memory one), otherwise one is built from
    ``uri``.
    """

    def __init__(self, uri: str = config.MONGO_URI, db_name: str = config.MONGO_DB_NAME, client=None):
        self.uri = uri
        self.db_name = db_name
        self.client = client
        self._owns_client = client is None
        self._users = None
        self._products = None

    async def connect(self):
        if self.client is None:
            self.client = AsyncIOMotorClient(self.uri)
        db = self.client[self.db_name]
        self._users = db["users"]
        self._products = db["products"]
        # Backs the check-then-insert in UserStore.create.
        await self._users.create_index("email", unique=True)
        logger.info(f"Connected to MongoDB database '{self.db_name}'")

    async def close(self):
        if self.client is not None and self._owns_client:
            self.client.close()  # Motor client's close() is not async
            logger.info("MongoDB connection closed")
        self.client = None
        self._users = None
        self._products = None

    @property
    def users(self):
        return self._collection(self._users, "users")

    @property
    def products(self):
        return self._collection(self._products, "products")

    @staticmethod
    def _collection(collection: Optional[object], name: str):
        if collection is None:
            raise RuntimeError(f"Database not connected; cannot access '{name}' collection")
        return collection
