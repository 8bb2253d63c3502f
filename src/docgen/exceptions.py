"""Custom exceptions for docgen."""


class DocgenError(Exception):
    """Base exception for all docgen errors."""

    pass


class ParseError(DocgenError):
    """Raised when reading a serialized API model fails."""

    pass


class ValidationError(DocgenError):
    """Raised when validation fails."""

    pass


class MissingReferenceError(ValidationError):
    """Raised when a referenced ID does not exist."""

    pass
