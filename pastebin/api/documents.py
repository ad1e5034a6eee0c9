"""
Document endpoints.

GET  /documents/{key} — Text document wrapped in JSON
GET  /raw/{key}       — Text document as plain text
GET  /file/{key}      — File document with its original content type
POST /documents       — Store a text document (flat body or multipart "data" field)
POST /file            — Store a file document (multipart file part)

Failures are raised as DocumentError and rendered by the app-level handler.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse, Response
from pydantic import BaseModel

from ..core.dependencies import get_document_handler, is_static_key
from ..services.documents import DocumentHandler

documents_router = APIRouter(tags=["documents"])


# ── Response models ───────────────────────────────────────────────────

class DocumentResponse(BaseModel):
    data: str
    key: str


class KeyResponse(BaseModel):
    key: str


class MessageResponse(BaseModel):
    message: str


ERROR_RESPONSES = {
    400: {"model": MessageResponse},
    404: {"model": MessageResponse},
    500: {"model": MessageResponse},
}


# ── Retrieval ─────────────────────────────────────────────────────────

@documents_router.api_route(
    "/documents/{key}",
    methods=["GET", "HEAD"],
    response_model=DocumentResponse,
    responses=ERROR_RESPONSES,
)
async def get_document(
    key: str,
    skip_expire: bool = Depends(is_static_key),
    handler: DocumentHandler = Depends(get_document_handler),
):
    """Fetch a text document as {data, key}."""
    doc = await handler.handle_get(key, skip_expire=skip_expire)
    return DocumentResponse(data=doc.data, key=doc.key)


@documents_router.api_route(
    "/raw/{key}",
    methods=["GET", "HEAD"],
    response_class=PlainTextResponse,
    responses=ERROR_RESPONSES,
)
async def get_raw_document(
    key: str,
    skip_expire: bool = Depends(is_static_key),
    handler: DocumentHandler = Depends(get_document_handler),
):
    """Fetch a text document verbatim."""
    data = await handler.handle_raw_get(key, skip_expire=skip_expire)
    return PlainTextResponse(content=data)


@documents_router.get("/file/{key}", responses=ERROR_RESPONSES)
async def get_file(
    key: str,
    skip_expire: bool = Depends(is_static_key),
    handler: DocumentHandler = Depends(get_document_handler),
):
    """Serve a file document's bytes under its original content type."""
    doc = await handler.handle_get_file(key, skip_expire=skip_expire)
    return Response(content=doc.payload, media_type=doc.content_type)


# ── Ingestion ─────────────────────────────────────────────────────────

@documents_router.post("/documents", response_model=KeyResponse, responses=ERROR_RESPONSES)
async def post_document(
    request: Request,
    handler: DocumentHandler = Depends(get_document_handler),
):
    """
    Store a text document.

    Example:
        curl -X POST http://localhost:7777/documents --data-binary @notes.txt
    """
    key = await handler.handle_post(request)
    return KeyResponse(key=key)


@documents_router.post("/file", response_model=KeyResponse, responses=ERROR_RESPONSES)
async def post_file(
    request: Request,
    handler: DocumentHandler = Depends(get_document_handler),
):
    """
    Store a file document. The key is the same short key used by GET /file/{key}.

    Example:
        curl -X POST http://localhost:7777/file -F "file=@image.png;type=image/png"
    """
    key = await handler.handle_post_file(request)
    return KeyResponse(key=key)
