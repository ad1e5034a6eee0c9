"""
Shared fixtures: a recording in-memory store, a scripted key generator,
raw ASGI requests, and an app wired to both.
"""

from typing import Callable, Optional

import pytest
from fastapi.testclient import TestClient
from starlette.requests import Request

from pastebin.core.config import Settings
from pastebin.core.dependencies import (
    get_key_generator_dep,
    get_settings_dep,
    get_store_dep,
)
from pastebin.core.storage import MemoryDocumentStore
from pastebin.factory import create_app


class RecordingStore(MemoryDocumentStore):
    """Memory store that records every call and can be told to fail writes."""

    def __init__(self, fail_when: Optional[Callable[[str], bool]] = None, **kwargs):
        super().__init__(**kwargs)
        self.fail_when = fail_when
        self.gets: list[tuple[str, bool]] = []
        self.sets: list[tuple[str, str]] = []

    async def get(self, key, skip_expire=False):
        self.gets.append((key, skip_expire))
        return await super().get(key, skip_expire=skip_expire)

    async def set(self, key, value, skip_expire=False):
        self.sets.append((key, value))
        if self.fail_when and self.fail_when(key):
            return False
        return await super().set(key, value, skip_expire=skip_expire)


class ScriptedKeyGenerator:
    """Hands out keys from a list, in order."""

    def __init__(self, keys):
        self.keys = list(keys)
        self.lengths: list[int] = []

    def create_key(self, length):
        self.lengths.append(length)
        return self.keys.pop(0)


class ConstantKeyGenerator:
    def __init__(self, key):
        self.key = key
        self.calls = 0

    def create_key(self, length):
        self.calls += 1
        return self.key


def make_request(chunks, content_type: Optional[str] = None, disconnect: bool = False) -> Request:
    """Build a starlette Request whose body arrives as the given chunks."""
    headers = []
    if content_type is not None:
        headers.append((b"content-type", content_type.encode("latin-1")))

    messages = [
        {"type": "http.request", "body": chunk, "more_body": True}
        for chunk in chunks
    ]
    if disconnect:
        messages.append({"type": "http.disconnect"})
    else:
        messages.append({"type": "http.request", "body": b"", "more_body": False})

    async def receive():
        if messages:
            return messages.pop(0)
        return {"type": "http.disconnect"}

    scope = {
        "type": "http",
        "method": "POST",
        "path": "/",
        "query_string": b"",
        "headers": headers,
    }
    return Request(scope, receive)


BOUNDARY = "pastebin-test-boundary"
MULTIPART_TYPE = f"multipart/form-data; boundary={BOUNDARY}"


def encode_multipart(parts) -> bytes:
    """
    parts: list of (name, value) for fields or
           (name, data, filename, content_type) for file parts.
    """
    body = b""
    for part in parts:
        body += f"--{BOUNDARY}\r\n".encode()
        if len(part) == 2:
            name, value = part
            body += f'Content-Disposition: form-data; name="{name}"\r\n\r\n'.encode()
            body += value.encode("utf-8")
        else:
            name, data, filename, ctype = part
            body += (
                f'Content-Disposition: form-data; name="{name}"; filename="{filename}"\r\n'
            ).encode()
            if ctype:
                body += f"Content-Type: {ctype}\r\n".encode()
            body += b"\r\n" + data
        body += b"\r\n"
    body += f"--{BOUNDARY}--\r\n".encode()
    return body


@pytest.fixture()
def store():
    return RecordingStore()


@pytest.fixture()
def settings():
    return Settings()


@pytest.fixture()
def make_client(store):
    """Build a TestClient with the store, key generator and settings overridden."""
    clients = []

    def _make(settings: Optional[Settings] = None, key_generator=None) -> TestClient:
        app = create_app()
        app.dependency_overrides[get_store_dep] = lambda: store
        if settings is not None:
            app.dependency_overrides[get_settings_dep] = lambda: settings
        if key_generator is not None:
            app.dependency_overrides[get_key_generator_dep] = lambda: key_generator
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)
