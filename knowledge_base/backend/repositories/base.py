"""
Base Repository.

Base class for repositories bound to one MongoDB collection.
"""

from bson import ObjectId
from pymongo.asynchronous.collection import AsyncCollection

from knowledge_base.backend.core.database import ConnectionHolder
from knowledge_base.backend.core.exceptions import InvalidIdError

def parse_object_id(value: str) -> ObjectId:
    """
    Parse a note id from its string form.

    Raises:
        InvalidIdError: If the string is not a valid ObjectId
    """
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise InvalidIdError(f"Invalid note id format: {value!r}")
    return ObjectId(value)


class BaseRepository:
    """
    Base repository resolving its collection from the shared connection.

    Subclasses set the default collection name:

        class TagRepository(BaseRepository):
            collection_name = "tags"
    """

    collection_name: str

    def __init__(
        self,
        holder: ConnectionHolder,
        database_name: str,
        collection_name: str | None = None,
    ) -> None:
        self.holder = holder
        self.database_name = database_name
        if collection_name is not None:
            self.collection_name = collection_name

    def collection(self) -> AsyncCollection:
        """
        Select the collection on a snapshot of the shared client.

        Raises:
            NotConnectedError: If no client is held
        """
        client = self.holder.snapshot()
        return client.get_database(self.database_name).get_collection(
            self.collection_name
        )
