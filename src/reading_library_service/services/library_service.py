"""Library operations: ingestion, documents, user tags and annotations.

Ties the extraction pipeline and the anchoring model to a DocumentStore. The
store is the only thing that mutates state; every method here validates its
input, computes values and hands them over.
"""

from ..annotations import (
    AnnotationError,
    build_highlight,
    build_note,
    plain_text_projection,
)
from ..extraction import ExtractionPipeline, IngestionError, IngestionResult
from ..extraction.content_type import ContentType
from ..extraction.exceptions import UnsupportedSourceError
from ..logging_config import get_logger
from ..metadata import Heading, extract_headings
from ..schemas import (
    DocumentUpdateRequest,
    HeadingResponse,
    HighlightCreateRequest,
    IngestionRequest,
    IngestionResponse,
    NoteCreateRequest,
    NoteUpdateRequest,
    TagCreateRequest,
)
from ..schemas.ingestion import FileIngestionRequest, TextIngestionRequest, UrlIngestionRequest
from .exceptions import DocumentNotFoundError, TagNotFoundError
from .storage import (
    DocumentStore,
    DocumentUpdate,
    NewDocument,
    StoredDocument,
    StoredHighlight,
    StoredNote,
    StoredTag,
)

logger = get_logger(__name__)

READ_COMPLETE_PROGRESS = 100


class LibraryService:
    """Per-user library operations on top of a DocumentStore."""

    def __init__(self, store: DocumentStore, pipeline: ExtractionPipeline | None = None) -> None:
        self.store = store
        self.pipeline = pipeline or ExtractionPipeline()

    # -------------------------------------------------------------------------
    # Ingestion
    # -------------------------------------------------------------------------

    async def preview(self, request: IngestionRequest) -> IngestionResponse:
        """Run the ingestion pipeline without storing anything."""
        result = await self._run_pipeline(request)
        return to_ingestion_response(result)

    async def ingest(self, user_id: int, request: IngestionRequest) -> StoredDocument:
        """Extract a document and store it for the user."""
        result = await self._run_pipeline(request)
        document = result.document

        stored = await self.store.create_document(
            user_id,
            NewDocument(
                title=document.title,
                content=document.content,
                content_type=document.content_type,
                reading_time_minutes=result.metadata.reading_time_minutes,
                tags=result.metadata.tags,
                original_url=document.original_url,
            ),
        )
        logger.info(
            "document_stored",
            user_id=user_id,
            document_id=stored.id,
            content_type=document.content_type.value,
        )
        return stored

    async def _run_pipeline(self, request: IngestionRequest) -> IngestionResult:
        if not isinstance(
            request, (UrlIngestionRequest, TextIngestionRequest, FileIngestionRequest)
        ):
            raise UnsupportedSourceError(f"Unsupported ingestion request: {type(request).__name__}")

        try:
            return await self.pipeline.ingest(request.to_source())
        except IngestionError as e:
            logger.warning("ingestion_failed", error_type=type(e).__name__, error=str(e))
            raise

    # -------------------------------------------------------------------------
    # Documents
    # -------------------------------------------------------------------------

    async def get_document(self, user_id: int, document_id: int) -> StoredDocument:
        """Fetch one of the user's documents.

        Raises:
            DocumentNotFoundError: Missing or owned by someone else
        """
        document = await self.store.get_document(user_id, document_id)
        if document is None:
            raise DocumentNotFoundError(document_id)
        return document

    async def table_of_contents(self, user_id: int, document_id: int) -> list[Heading]:
        """Compute headings for the reader UI on demand."""
        document = await self.get_document(user_id, document_id)
        if document.content_type != ContentType.URL:
            return []
        return extract_headings(document.content)

    async def update_document(
        self, user_id: int, document_id: int, request: DocumentUpdateRequest
    ) -> StoredDocument:
        """Apply a title or reading-progress update.

        Reaching 100% progress marks the document read unless is_read is given.
        """
        is_read = request.is_read
        if is_read is None and request.reading_progress == READ_COMPLETE_PROGRESS:
            is_read = True

        updated = await self.store.update_document(
            user_id,
            document_id,
            DocumentUpdate(
                title=request.title,
                reading_progress=request.reading_progress,
                is_read=is_read,
            ),
        )
        if updated is None:
            raise DocumentNotFoundError(document_id)
        return updated

    async def list_documents(self, user_id: int) -> list[StoredDocument]:
        return await self.store.list_documents(user_id)

    async def delete_document(self, user_id: int, document_id: int) -> None:
        """Delete a document; the store cascades to its anchors and tag links."""
        if not await self.store.delete_document(user_id, document_id):
            raise DocumentNotFoundError(document_id)

    # -------------------------------------------------------------------------
    # User tags
    # -------------------------------------------------------------------------

    async def create_tag(self, user_id: int, request: TagCreateRequest) -> StoredTag:
        tag = await self.store.create_tag(user_id, request.name, request.color)
        logger.info("tag_created", user_id=user_id, tag_id=tag.id, name=tag.name)
        return tag

    async def list_tags(self, user_id: int) -> list[StoredTag]:
        return await self.store.list_tags(user_id)

    async def delete_tag(self, user_id: int, tag_id: int) -> bool:
        return await self.store.delete_tag(user_id, tag_id)

    async def tag_document(self, user_id: int, document_id: int, tag_id: int) -> None:
        """Attach one of the user's tags to one of their documents.

        Raises:
            DocumentNotFoundError: Missing document
            TagNotFoundError: Missing tag or owned by someone else
        """
        await self.get_document(user_id, document_id)
        if not await self.store.add_document_tag(user_id, document_id, tag_id):
            raise TagNotFoundError(tag_id)

    async def untag_document(self, user_id: int, document_id: int, tag_id: int) -> bool:
        await self.get_document(user_id, document_id)
        return await self.store.remove_document_tag(user_id, document_id, tag_id)

    async def list_document_tags(self, user_id: int, document_id: int) -> list[StoredTag]:
        await self.get_document(user_id, document_id)
        return await self.store.list_document_tags(user_id, document_id)

    # -------------------------------------------------------------------------
    # Annotations
    # -------------------------------------------------------------------------

    async def add_highlight(self, user_id: int, request: HighlightCreateRequest) -> StoredHighlight:
        """Anchor and store a highlight.

        Raises:
            DocumentNotFoundError: Missing document
            EmptySelectionError: Zero-length selection
            InvalidSelectionError: Selection outside the document
            SelectionMismatchError: Selected text differs from the document
        """
        document = await self.get_document(user_id, request.document_id)
        rendered = plain_text_projection(document.content, document.content_type)

        try:
            anchor = build_highlight(rendered, request)
        except AnnotationError as e:
            logger.warning(
                "highlight_rejected",
                document_id=request.document_id,
                error_type=type(e).__name__,
                error=str(e),
            )
            raise

        return await self.store.create_highlight(user_id, anchor)

    async def add_note(self, user_id: int, request: NoteCreateRequest) -> StoredNote:
        """Anchor and store a note."""
        document = await self.get_document(user_id, request.document_id)
        rendered = plain_text_projection(document.content, document.content_type)
        anchor = build_note(rendered, request)
        return await self.store.create_note(user_id, anchor)

    async def list_highlights(self, user_id: int, document_id: int) -> list[StoredHighlight]:
        await self.get_document(user_id, document_id)
        return await self.store.list_highlights(user_id, document_id)

    async def list_notes(self, user_id: int, document_id: int) -> list[StoredNote]:
        await self.get_document(user_id, document_id)
        return await self.store.list_notes(user_id, document_id)

    async def update_note(
        self, user_id: int, note_id: int, request: NoteUpdateRequest
    ) -> StoredNote | None:
        return await self.store.update_note(user_id, note_id, request.content)

    async def delete_highlight(self, user_id: int, highlight_id: int) -> bool:
        return await self.store.delete_highlight(user_id, highlight_id)

    async def delete_note(self, user_id: int, note_id: int) -> bool:
        return await self.store.delete_note(user_id, note_id)


def to_ingestion_response(result: IngestionResult) -> IngestionResponse:
    """Shape a pipeline result for the storage collaborator or the UI."""
    document = result.document
    metadata = result.metadata
    return IngestionResponse(
        title=document.title,
        content=document.content,
        content_type=document.content_type.value,
        original_url=document.original_url,
        reading_time_minutes=metadata.reading_time_minutes,
        tags=sorted(metadata.tags),
        headings=[HeadingResponse.model_validate(heading) for heading in metadata.headings],
        warnings=list(document.warnings),
    )
