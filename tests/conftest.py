"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from dataclasses import replace
from datetime import UTC, datetime

import fitz  # PyMuPDF
import httpx
import pytest

from reading_library_service.annotations import HighlightAnchor, NoteAnchor
from reading_library_service.extraction import ExtractionPipeline
from reading_library_service.services import (
    DocumentUpdate,
    LibraryService,
    NewDocument,
    StoredDocument,
    StoredHighlight,
    StoredNote,
    StoredTag,
)

ARTICLE_HTML = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>Understanding Offsets | Example Blog</title>
</head>
<body>
<nav class="site-nav"><ul><li><a href="/">Home</a></li><li><a href="/about">About us</a></li></ul></nav>
<div class="sidebar"><p>Subscribe to our newsletter for weekly updates, tips, and tricks.</p></div>
<article class="post">
<h1>Understanding Offsets</h1>
<h2 id="intro">Introduction</h2>
<p>Highlights are stored as character offsets, measured in the plain text of the rendered article, so they survive re-rendering.</p>
<h2>Computing positions</h2>
<p>The start offset is the length of the text preceding the selection end, minus the length of the selection itself.</p>
<p>Because markup is ignored, the same offsets work regardless of how the article is styled in the reader.</p>
</article>
<footer class="footer"><p>Copyright 2024 Example Blog. All rights reserved, everywhere, always.</p></footer>
<script>var tracking = "should never appear in content";</script>
</body>
</html>
"""


def make_pdf(*pages: str) -> bytes:
    """Build an in-memory PDF with one text block per page."""
    doc = fitz.open()
    for text in pages:
        page = doc.new_page()
        if text:
            page.insert_text((72, 72), text, fontsize=11)
    data = doc.tobytes()
    doc.close()
    return data


def mock_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    """HTTP client whose requests are answered by `handler`."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class InMemoryDocumentStore:
    """DocumentStore backed by dicts, scoped by user like a real store."""

    def __init__(self) -> None:
        self.documents: dict[int, StoredDocument] = {}
        self.highlights: dict[int, StoredHighlight] = {}
        self.notes: dict[int, StoredNote] = {}
        self.tags: dict[int, StoredTag] = {}
        self.document_tags: set[tuple[int, int]] = set()
        self._next_id = 1

    def _new_id(self) -> int:
        new_id = self._next_id
        self._next_id += 1
        return new_id

    async def create_document(self, user_id: int, document: NewDocument) -> StoredDocument:
        now = datetime.now(UTC)
        stored = StoredDocument(
            id=self._new_id(),
            user_id=user_id,
            title=document.title,
            content=document.content,
            content_type=document.content_type,
            reading_time_minutes=document.reading_time_minutes,
            tags=document.tags,
            original_url=document.original_url,
            created_at=now,
            updated_at=now,
        )
        self.documents[stored.id] = stored
        return stored

    async def get_document(self, user_id: int, document_id: int) -> StoredDocument | None:
        document = self.documents.get(document_id)
        if document is None or document.user_id != user_id:
            return None
        return document

    async def list_documents(self, user_id: int) -> list[StoredDocument]:
        return [d for d in self.documents.values() if d.user_id == user_id]

    async def update_document(
        self, user_id: int, document_id: int, update: DocumentUpdate
    ) -> StoredDocument | None:
        document = await self.get_document(user_id, document_id)
        if document is None:
            return None
        changes = {
            field: value
            for field, value in (
                ("title", update.title),
                ("reading_progress", update.reading_progress),
                ("is_read", update.is_read),
            )
            if value is not None
        }
        updated = replace(document, updated_at=datetime.now(UTC), **changes)
        self.documents[document_id] = updated
        return updated

    async def delete_document(self, user_id: int, document_id: int) -> bool:
        if await self.get_document(user_id, document_id) is None:
            return False
        del self.documents[document_id]
        self.highlights = {
            k: h for k, h in self.highlights.items() if h.anchor.document_id != document_id
        }
        self.notes = {k: n for k, n in self.notes.items() if n.anchor.document_id != document_id}
        self.document_tags = {link for link in self.document_tags if link[0] != document_id}
        return True

    async def create_highlight(self, user_id: int, anchor: HighlightAnchor) -> StoredHighlight:
        stored = StoredHighlight(
            id=self._new_id(), user_id=user_id, anchor=anchor, created_at=datetime.now(UTC)
        )
        self.highlights[stored.id] = stored
        return stored

    async def list_highlights(self, user_id: int, document_id: int) -> list[StoredHighlight]:
        return [
            h
            for h in self.highlights.values()
            if h.user_id == user_id and h.anchor.document_id == document_id
        ]

    async def delete_highlight(self, user_id: int, highlight_id: int) -> bool:
        highlight = self.highlights.get(highlight_id)
        if highlight is None or highlight.user_id != user_id:
            return False
        del self.highlights[highlight_id]
        return True

    async def create_note(self, user_id: int, anchor: NoteAnchor) -> StoredNote:
        now = datetime.now(UTC)
        stored = StoredNote(
            id=self._new_id(), user_id=user_id, anchor=anchor, created_at=now, updated_at=now
        )
        self.notes[stored.id] = stored
        return stored

    async def list_notes(self, user_id: int, document_id: int) -> list[StoredNote]:
        return [
            n
            for n in self.notes.values()
            if n.user_id == user_id and n.anchor.document_id == document_id
        ]

    async def update_note(self, user_id: int, note_id: int, content: str) -> StoredNote | None:
        note = self.notes.get(note_id)
        if note is None or note.user_id != user_id:
            return None
        updated = replace(
            note,
            anchor=replace(note.anchor, content=content),
            updated_at=datetime.now(UTC),
        )
        self.notes[note_id] = updated
        return updated

    async def delete_note(self, user_id: int, note_id: int) -> bool:
        note = self.notes.get(note_id)
        if note is None or note.user_id != user_id:
            return False
        del self.notes[note_id]
        return True

    async def create_tag(self, user_id: int, name: str, color: str) -> StoredTag:
        stored = StoredTag(
            id=self._new_id(),
            user_id=user_id,
            name=name,
            color=color,
            created_at=datetime.now(UTC),
        )
        self.tags[stored.id] = stored
        return stored

    async def list_tags(self, user_id: int) -> list[StoredTag]:
        return [t for t in self.tags.values() if t.user_id == user_id]

    def _own_tag(self, user_id: int, tag_id: int) -> StoredTag | None:
        tag = self.tags.get(tag_id)
        if tag is None or tag.user_id != user_id:
            return None
        return tag

    async def delete_tag(self, user_id: int, tag_id: int) -> bool:
        if self._own_tag(user_id, tag_id) is None:
            return False
        del self.tags[tag_id]
        self.document_tags = {link for link in self.document_tags if link[1] != tag_id}
        return True

    async def add_document_tag(self, user_id: int, document_id: int, tag_id: int) -> bool:
        document = await self.get_document(user_id, document_id)
        if document is None or self._own_tag(user_id, tag_id) is None:
            return False
        self.document_tags.add((document_id, tag_id))
        return True

    async def remove_document_tag(self, user_id: int, document_id: int, tag_id: int) -> bool:
        if await self.get_document(user_id, document_id) is None:
            return False
        if (document_id, tag_id) not in self.document_tags:
            return False
        self.document_tags.discard((document_id, tag_id))
        return True

    async def list_document_tags(self, user_id: int, document_id: int) -> list[StoredTag]:
        if await self.get_document(user_id, document_id) is None:
            return []
        return [t for t in self.tags.values() if (document_id, t.id) in self.document_tags]


@pytest.fixture
def article_html() -> str:
    """Article page with navigation, sidebar, footer and script noise."""
    return ARTICLE_HTML


@pytest.fixture
def pdf_bytes() -> bytes:
    """Two-page PDF with known text."""
    return make_pdf("Quarterly results\nRevenue grew steadily.", "Second page text")


@pytest.fixture
def store() -> InMemoryDocumentStore:
    """Empty in-memory document store."""
    return InMemoryDocumentStore()


@pytest.fixture
def article_client() -> httpx.AsyncClient:
    """HTTP client that serves ARTICLE_HTML for every request."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, html=ARTICLE_HTML)

    return mock_client(handler)


@pytest.fixture
def library(store: InMemoryDocumentStore, article_client: httpx.AsyncClient) -> LibraryService:
    """LibraryService over the in-memory store with mocked HTTP."""
    return LibraryService(store, ExtractionPipeline(client=article_client))


@pytest.fixture
def pdf_factory() -> Callable[..., bytes]:
    """Build PDFs with the given page texts."""
    return make_pdf


@pytest.fixture
def client_factory() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]:
    """Build HTTP clients answered by a request handler."""
    return mock_client
