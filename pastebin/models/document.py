"""
Documents — in-memory shapes passed between the pipelines.
The store itself only ever sees strings; see services/documents.py for the layout.
"""

from dataclasses import dataclass
from typing import Optional

FILE_PREFIX = "file-"
TYPE_SUFFIX = "-type"


def file_key(key: str) -> str:
    return FILE_PREFIX + key


def file_type_key(key: str) -> str:
    return FILE_PREFIX + key + TYPE_SUFFIX


@dataclass
class Upload:
    """An accumulated request body."""

    payload: bytes = b""
    content_type: Optional[str] = None  # only set by a multipart file part

    def __len__(self) -> int:
        return len(self.payload)


@dataclass
class TextDocument:
    key: str
    data: str


@dataclass
class FileDocument:
    key: str
    payload: bytes
    content_type: str
