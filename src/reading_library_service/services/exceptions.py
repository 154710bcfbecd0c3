"""Custom exceptions for the library service."""


class DocumentNotFoundError(Exception):
    """Document does not exist or belongs to another user."""

    def __init__(self, document_id: int) -> None:
        super().__init__(f"Document {document_id} not found")
        self.document_id = document_id


class TagNotFoundError(Exception):
    """Tag does not exist or belongs to another user."""

    def __init__(self, tag_id: int) -> None:
        super().__init__(f"Tag {tag_id} not found")
        self.tag_id = tag_id
