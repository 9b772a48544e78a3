"""
Note Service.

Business logic layer for notes. Orchestrates the note repository,
converts store failures to StoreError, and logs every operation.
"""

from knowledge_base.backend.core.database import ConnectionHolder
from knowledge_base.backend.models.note import Note
from knowledge_base.backend.repositories.note import NoteRepository
from knowledge_base.backend.schemas.note import NoteCreate, NoteUpdate
from knowledge_base.backend.services.base import BaseService

DELETED_MESSAGE = "Deleted"
UPDATED_MESSAGE = "Updated successfully"


class NoteService(BaseService):
    """
    Service for note business logic.

    Stateless between calls: every method re-reads or re-writes the store.
    """

    def __init__(
        self,
        holder: ConnectionHolder,
        database_name: str = "knowledge_base",
        collection_name: str = "notes",
    ) -> None:
        super().__init__(holder)
        self.repo = NoteRepository(holder, database_name, collection_name)

    async def check_connection(self) -> str:
        """
        Probe the store.

        Returns:
            Human-readable list of databases

        Raises:
            NotConnectedError: If no client is held
            StoreError: If the store cannot be reached
        """
        self._log_debug("Checking store connection")
        return await self.holder.probe()

    async def create_note(self, data: NoteCreate) -> str:
        """
        Create a new note.

        Args:
            data: Note creation data

        Returns:
            Id of the created note
        """
        self._log_operation("Creating note", title=data.title)

        note_id = await self._execute_store_operation(
            "create_note",
            self.repo.create(
                title=data.title,
                content=data.content,
                tags=data.tags,
            ),
        )

        self._log_debug("Note created", note_id=note_id)
        return note_id

    async def list_notes(self) -> list[Note]:
        """List every note in store order."""
        return await self._execute_store_operation(
            "list_notes",
            self.repo.list_all(),
        )

    async def delete_note(self, note_id: str) -> str:
        """
        Delete a note.

        Args:
            note_id: Note id in string form

        Returns:
            Acknowledgement message

        Raises:
            InvalidIdError: If note_id is malformed
            NotFoundError: If note not found
        """
        self._log_operation("Deleting note", note_id=note_id)

        await self._execute_store_operation(
            "delete_note",
            self.repo.delete(note_id),
        )
        return DELETED_MESSAGE

    async def update_note(self, note_id: str, data: NoteUpdate) -> str:
        """
        Replace title, content and tags of a note.

        Args:
            note_id: Note id in string form
            data: New field values

        Returns:
            Acknowledgement message

        Raises:
            InvalidIdError: If note_id is malformed
            NotFoundError: If note not found
        """
        self._log_operation("Updating note", note_id=note_id)

        await self._execute_store_operation(
            "update_note",
            self.repo.update(
                note_id,
                title=data.title,
                content=data.content,
                tags=data.tags,
            ),
        )
        return UPDATED_MESSAGE

    async def search_notes(self, query: str) -> list[Note]:
        """
        Full-text search, best matches first.

        Args:
            query: Search text

        Returns:
            Matching notes ranked by relevance
        """
        self._log_debug("Searching notes", query=query)
        return await self._execute_store_operation(
            "search_notes",
            self.repo.search(query),
        )

    async def has_text_index(self) -> bool:
        """Check the search precondition: a text index on the collection."""
        return await self._execute_store_operation(
            "has_text_index",
            self.repo.has_text_index(),
        )
