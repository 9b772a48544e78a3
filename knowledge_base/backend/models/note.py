"""
Note Model.

Document model for notes, the only record type in the store.
Translates between the wire-facing note (string id) and the stored
document (`{_id: ObjectId, title, content, tags}`).
"""

from typing import Any

from pydantic import BaseModel, Field


class Note(BaseModel):
    """
    Note document.

    `id` is assigned by the store on insert and is None on a note that
    has not been persisted yet.
    """

    id: str | None = None
    title: str
    content: str
    tags: list[str] = Field(default_factory=list)

    def to_document(self) -> dict[str, Any]:
        """Build the stored document. `_id` is left for the store to assign."""
        return {
            "title": self.title,
            "content": self.content,
            "tags": list(self.tags),
        }

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Note":
        """Build a note from a stored document."""
        return cls(
            id=str(document["_id"]),
            title=document.get("title", ""),
            content=document.get("content", ""),
            tags=list(document.get("tags") or []),
        )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r})>"
