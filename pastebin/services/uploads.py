"""
Upload accumulation — turns a request body into a single in-memory payload.

Two shapes are accepted:
  multipart/form-data — a "data" text field and/or a file part
  anything else       — the raw body, read as one flat stream

Only a multipart file part sets a content type.
"""

import logging
import sys

from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException
from starlette.formparsers import MultiPartException
from starlette.requests import ClientDisconnect, Request

from ..core.errors import UploadConnectionError
from ..models import Upload

logger = logging.getLogger(__name__)

MULTIPART = "multipart/form-data"
DATA_FIELD = "data"
DEFAULT_FILE_TYPE = "text/plain"

CHUNK_SIZE = 64 * 1024
# No per-part cap; max_length is enforced after accumulation.
MAX_PART_SIZE = sys.maxsize


def is_multipart(content_type: str) -> bool:
    return content_type.split(";")[0].strip().lower() == MULTIPART


async def accumulate(request: Request) -> Upload:
    """
    Read the whole request body.

    Raises UploadConnectionError if the client goes away mid-stream or the
    multipart body cannot be parsed. Nothing is returned in that case, so
    the caller never sees a partial upload.
    """
    content_type = request.headers.get("content-type", "")
    try:
        if is_multipart(content_type):
            return await _accumulate_multipart(request)
        return await _accumulate_flat(request)
    except ClientDisconnect:
        logger.error("Connection error: client disconnected during upload")
        raise UploadConnectionError("client disconnected")
    except MultiPartException as e:
        logger.error("Connection error: %s", e.message)
        raise UploadConnectionError(e.message)
    except HTTPException as e:
        # Inside an app, starlette re-raises MultiPartException as a 400
        logger.error("Connection error: %s", e.detail)
        raise UploadConnectionError(e.detail)


async def _accumulate_flat(request: Request) -> Upload:
    chunks = []
    async for chunk in request.stream():
        chunks.append(chunk)
    return Upload(payload=b"".join(chunks))


async def _accumulate_multipart(request: Request) -> Upload:
    upload = Upload()
    file_chunks: list[bytes] = []

    async with request.form(max_part_size=MAX_PART_SIZE) as form:
        # multi_items() keeps arrival order, so the last part written wins
        for name, value in form.multi_items():
            if isinstance(value, UploadFile):
                while True:
                    chunk = await value.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    file_chunks.append(chunk)
                upload.payload = b"".join(file_chunks)
                upload.content_type = value.content_type or DEFAULT_FILE_TYPE
                logger.debug(
                    "File part %r (%s, %d bytes so far)",
                    value.filename, upload.content_type, len(upload.payload),
                )
            elif name == DATA_FIELD:
                upload.payload = value.encode("utf-8")

    return upload
