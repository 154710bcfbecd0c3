"""Service layer: library operations over a storage collaborator."""

from .exceptions import DocumentNotFoundError, TagNotFoundError
from .library_service import LibraryService, to_ingestion_response
from .storage import (
    DocumentStore,
    DocumentUpdate,
    NewDocument,
    StoredDocument,
    StoredHighlight,
    StoredNote,
    StoredTag,
)

__all__ = [
    "DocumentNotFoundError",
    "TagNotFoundError",
    "LibraryService",
    "to_ingestion_response",
    "DocumentStore",
    "DocumentUpdate",
    "NewDocument",
    "StoredDocument",
    "StoredHighlight",
    "StoredNote",
    "StoredTag",
]
