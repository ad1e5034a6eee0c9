"""
Document models and store key layout.
"""

from .document import (
    FILE_PREFIX,
    TYPE_SUFFIX,
    FileDocument,
    TextDocument,
    Upload,
    file_key,
    file_type_key,
)

__all__ = [
    "FILE_PREFIX", "TYPE_SUFFIX",
    "Upload", "TextDocument", "FileDocument",
    "file_key", "file_type_key",
]
