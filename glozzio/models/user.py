# glozzio/models/user.py
from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """A stored user account. The bcrypt hash lives in the ``password`` field of the document."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    email: str
    password_hash: str = Field(alias="password")

    @classmethod
    def from_document(cls, doc: dict) -> "User":
        return cls(_id=str(doc["_id"]), email=doc["email"], password=doc["password"])
