import pytest

from pastebin.core.storage import MemoryDocumentStore
from pastebin.services.static_documents import load_static_documents

from conftest import RecordingStore


@pytest.mark.asyncio
async def test_loads_files_without_expiry(tmp_path):
    about = tmp_path / "about.md"
    about.write_text("# About\n", encoding="utf-8")

    now = [0.0]
    store = MemoryDocumentStore(expire=10, clock=lambda: now[0])
    loaded = await load_static_documents(store, {"about": str(about)})

    assert loaded == ["about"]
    now[0] = 1000.0
    assert await store.get("about") == "# About\n"


@pytest.mark.asyncio
async def test_missing_file_is_skipped(tmp_path):
    present = tmp_path / "present.txt"
    present.write_text("here", encoding="utf-8")
    store = RecordingStore()

    loaded = await load_static_documents(store, {
        "gone": str(tmp_path / "gone.txt"),
        "present": str(present),
    })

    assert loaded == ["present"]
    assert store.sets == [("present", "here")]


@pytest.mark.asyncio
async def test_failed_write_is_skipped(tmp_path):
    doc = tmp_path / "doc.txt"
    doc.write_text("x", encoding="utf-8")
    store = RecordingStore(fail_when=lambda k: True)

    assert await load_static_documents(store, {"doc": str(doc)}) == []
