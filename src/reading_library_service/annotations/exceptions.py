"""Custom exceptions for annotation anchoring."""


class AnnotationError(Exception):
    """Base exception for anchoring errors."""

    pass


class EmptySelectionError(AnnotationError):
    """Highlight requested from a zero-length selection."""

    pass


class InvalidSelectionError(AnnotationError):
    """Selection or offset falls outside the document's plain-text projection."""

    pass


class SelectionMismatchError(AnnotationError):
    """Selected text does not match the document text at the given range."""

    pass
