# glozzio/services/user_store.py
import logging
from typing import List, Optional

from pymongo.errors import DuplicateKeyError

from glozzio.errors import ConflictError
from glozzio.models.user import User

logger = logging.getLogger("glozzio.user_store")


class UserStore:
    """Credential store over the ``users`` collection."""

    def __init__(self, collection):
        self.collection = collection

    async def find_by_email(self, email: str) -> Optional[User]:
        doc = await self.collection.find_one({"email": email})
        return User.from_document(doc) if doc else None

    async def create(self, email: str, password_hash: str) -> User:
        """Insert a new user, raising ConflictError if the email is taken.

        The lookup and the insert are separate operations; the unique index
        on ``email`` catches whatever slips between them.
        """
        if await self.find_by_email(email):
            raise ConflictError("User already exists", key="message")
        try:
            result = await self.collection.insert_one({"email": email, "password": password_hash})
        except DuplicateKeyError as e:
            logger.warning(f"Duplicate insert for {email} rejected by unique index")
            raise ConflictError("User already exists", key="message") from e
        return User(_id=str(result.inserted_id), email=email, password=password_hash)

    async def list_all(self) -> List[dict]:
        # Password hashes are returned as stored.
        return await self.collection.find({}).to_list(length=None)
