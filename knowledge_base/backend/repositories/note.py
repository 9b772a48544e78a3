"""
Note Repository.

Data access layer for notes. Handles all document store operations
for the Note model. Driver errors (PyMongoError) propagate to the
service layer, which converts them to StoreError.
"""

from pymongo.errors import OperationFailure

from knowledge_base.backend.core.exceptions import NotFoundError, StoreError
from knowledge_base.backend.models.note import Note
from knowledge_base.backend.repositories.base import BaseRepository, parse_object_id

# Server error code returned when a $text query runs without a text index.
INDEX_NOT_FOUND_CODE = 27

TEXT_SCORE_SORT = [("score", {"$meta": "textScore"})]


class NoteRepository(BaseRepository):
    """Repository for the notes collection."""

    collection_name = "notes"

    async def create(self, title: str, content: str, tags: list[str]) -> str:
        """
        Insert a new note.

        Returns:
            The store-assigned id in string form
        """
        collection = self.collection()
        note = Note(title=title, content=content, tags=tags)
        result = await collection.insert_one(note.to_document())
        return str(result.inserted_id)

    async def list_all(self) -> list[Note]:
        """
        Get every note in store order.

        All-or-nothing: a fault while iterating propagates and the
        partially accumulated list is dropped.
        """
        collection = self.collection()
        notes: list[Note] = []
        async for document in collection.find({}):
            notes.append(Note.from_document(document))
        return notes

    async def delete(self, id: str) -> None:
        """
        Delete a note by id.

        Raises:
            InvalidIdError: If id is not a valid ObjectId
            NotFoundError: If no note has this id
        """
        collection = self.collection()
        object_id = parse_object_id(id)
        result = await collection.delete_one({"_id": object_id})
        if result.deleted_count != 1:
            raise NotFoundError()

    async def update(
        self,
        id: str,
        title: str,
        content: str,
        tags: list[str],
    ) -> None:
        """
        Replace title, content and tags of a note. The id is untouched.

        Raises:
            InvalidIdError: If id is not a valid ObjectId
            NotFoundError: If no note has this id
        """
        collection = self.collection()
        object_id = parse_object_id(id)
        result = await collection.update_one(
            {"_id": object_id},
            {"$set": {"title": title, "content": content, "tags": list(tags)}},
        )
        if result.matched_count != 1:
            raise NotFoundError()

    async def search(self, query: str) -> list[Note]:
        """
        Full-text search ranked by descending text score.

        Requires a text index on the collection. A blank query matches
        nothing and returns an empty list without a store round-trip.

        Raises:
            StoreError: If the collection has no text index
        """
        collection = self.collection()
        if not query.strip():
            return []

        notes: list[Note] = []
        try:
            cursor = collection.find(
                {"$text": {"$search": query}},
                sort=TEXT_SCORE_SORT,
            )
            async for document in cursor:
                notes.append(Note.from_document(document))
        except OperationFailure as e:
            if e.code == INDEX_NOT_FOUND_CODE:
                raise StoreError(
                    f"Text index required for search on "
                    f"'{self.database_name}.{self.collection_name}': {e}"
                ) from e
            raise
        return notes

    async def has_text_index(self) -> bool:
        """Check whether the collection carries a text index."""
        collection = self.collection()
        indexes = await collection.index_information()
        return any(
            direction == "text"
            for index in indexes.values()
            for _, direction in index.get("key", [])
        )
