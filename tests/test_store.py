# tests/test_store.py
import asyncio

import pytest

from product_api.database import JsonFileStore, MemoryStore
from product_api.errors import StorageError

PRODUCTS = [
    {"id": 2, "name": "B", "description": "", "price": 2, "category": "x", "stock": 0},
    {"id": 1, "name": "A", "description": "a", "price": 1.25, "category": "y", "stock": 7},
]

def test_write_then_read_preserves_order(tmp_path):
    store = JsonFileStore(tmp_path / "data.json")
    asyncio.run(store.write(PRODUCTS))
    assert asyncio.run(store.read()) == PRODUCTS

def test_read_creates_missing_file_and_parents(tmp_path):
    path = tmp_path / "nested" / "dir" / "data.json"
    store = JsonFileStore(path)
    assert asyncio.run(store.read()) == []
    assert path.read_text(encoding="utf-8") == "[]"

@pytest.mark.parametrize("content", ["{broken", "{\"id\": 1}", "", "[1, null]", "[{\"id\": 1}, \"x\"]"])
def test_read_rejects_malformed_or_non_array(tmp_path, content):
    path = tmp_path / "data.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(StorageError):
        asyncio.run(JsonFileStore(path).read())

def test_write_failure_is_a_storage_error(tmp_path):
    # the target path is a directory, so opening it for writing fails
    store = JsonFileStore(tmp_path)
    with pytest.raises(StorageError):
        asyncio.run(store.write(PRODUCTS))

def test_memory_store_hands_out_copies():
    store = MemoryStore(PRODUCTS)
    data = asyncio.run(store.read())
    data.pop()
    assert asyncio.run(store.read()) == PRODUCTS

    asyncio.run(store.write(data))
    assert asyncio.run(store.read()) == PRODUCTS[:1]
