"""
Document errors. Each one maps to exactly one HTTP response.

Raised by the pipelines in services/, translated to JSON by the
handler registered in factory.create_app().
"""


class DocumentError(Exception):
    """Base class. Carries the response status and message."""

    status_code: int = 500
    message: str = "Error adding document."

    def __init__(self, detail: str = ""):
        super().__init__(detail or self.message)


class NotFound(DocumentError):
    status_code = 404
    message = "Document not found."


class PayloadTooLarge(DocumentError):
    status_code = 400
    message = "Document exceeds maximum length."


class StorageError(DocumentError):
    """A store write failed. Not retried."""

    status_code = 500
    message = "Error adding document."


class KeySpaceExhausted(StorageError):
    """Every candidate key drawn was already taken."""


class UploadConnectionError(DocumentError):
    """The client stream broke before the upload completed."""

    status_code = 500
    message = "Connection error."
