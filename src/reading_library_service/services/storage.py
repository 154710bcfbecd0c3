"""Storage collaborator interface.

Persistence lives outside this package. Any keyed CRUD store can back the
library as long as it implements DocumentStore and scopes every call to the
owning user: a user may only read or mutate their own records, and deleting a
document deletes its highlights, notes and tag links.

User tags are named, colored labels a user attaches to documents. They are
unrelated to the topic tags computed during ingestion. Deleting a tag removes
its document links; linking returns False when either the document or the tag
is not the user's.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from ..annotations import HighlightAnchor, NoteAnchor
from ..extraction.content_type import ContentType


@dataclass(frozen=True)
class NewDocument:
    """Document fields produced by ingestion."""

    title: str
    content: str
    content_type: ContentType
    reading_time_minutes: int
    tags: frozenset[str]
    original_url: str | None = None


@dataclass
class StoredDocument:
    """Document as returned by the store."""

    id: int
    user_id: int
    title: str
    content: str
    content_type: ContentType
    reading_time_minutes: int
    tags: frozenset[str] = frozenset()
    original_url: str | None = None
    reading_progress: int = 0
    is_read: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class StoredHighlight:
    """Highlight as returned by the store."""

    id: int
    user_id: int
    anchor: HighlightAnchor
    created_at: datetime | None = None


@dataclass
class StoredNote:
    """Note as returned by the store."""

    id: int
    user_id: int
    anchor: NoteAnchor
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class StoredTag:
    """User tag as returned by the store."""

    id: int
    user_id: int
    name: str
    color: str
    created_at: datetime | None = None


@dataclass(frozen=True)
class DocumentUpdate:
    """Partial update of a stored document. None leaves a field unchanged."""

    title: str | None = None
    reading_progress: int | None = None
    is_read: bool | None = None


class DocumentStore(Protocol):
    """Keyed CRUD for documents, annotations and user tags, scoped by user."""

    async def create_document(self, user_id: int, document: NewDocument) -> StoredDocument: ...

    async def get_document(self, user_id: int, document_id: int) -> StoredDocument | None: ...

    async def list_documents(self, user_id: int) -> list[StoredDocument]: ...

    async def update_document(
        self, user_id: int, document_id: int, update: DocumentUpdate
    ) -> StoredDocument | None: ...

    async def delete_document(self, user_id: int, document_id: int) -> bool: ...

    async def create_highlight(self, user_id: int, anchor: HighlightAnchor) -> StoredHighlight: ...

    async def list_highlights(self, user_id: int, document_id: int) -> list[StoredHighlight]: ...

    async def delete_highlight(self, user_id: int, highlight_id: int) -> bool: ...

    async def create_note(self, user_id: int, anchor: NoteAnchor) -> StoredNote: ...

    async def list_notes(self, user_id: int, document_id: int) -> list[StoredNote]: ...

    async def update_note(self, user_id: int, note_id: int, content: str) -> StoredNote | None: ...

    async def delete_note(self, user_id: int, note_id: int) -> bool: ...

    async def create_tag(self, user_id: int, name: str, color: str) -> StoredTag: ...

    async def list_tags(self, user_id: int) -> list[StoredTag]: ...

    async def delete_tag(self, user_id: int, tag_id: int) -> bool: ...

    async def add_document_tag(self, user_id: int, document_id: int, tag_id: int) -> bool: ...

    async def remove_document_tag(self, user_id: int, document_id: int, tag_id: int) -> bool: ...

    async def list_document_tags(self, user_id: int, document_id: int) -> list[StoredTag]: ...
