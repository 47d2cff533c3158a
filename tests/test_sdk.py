# tests/test_sdk.py
import asyncio
from unittest import mock

import httpx
import pytest
import requests

import cli
from product_api.database import MemoryStore, get_store
from product_api.main import app
from sdk.products import ProductClient

PEN = {"id": 7, "name": "Pen", "description": "Blue pen", "price": 1.5, "category": "stationery", "stock": 100}

def _response(status, body=None):
    r = mock.Mock()
    r.status_code = status
    r.json.return_value = body
    if status >= 400:
        r.raise_for_status.side_effect = requests.HTTPError(f"HTTP {status}")
    else:
        r.raise_for_status.return_value = None
    return r

def test_create_posts_full_payload():
    c = ProductClient(base_url="http://api.test/")
    with mock.patch.object(c.session, "post", return_value=_response(201, PEN)) as post:
        assert c.create_product("Pen", "Blue pen", 1.5, "stationery", 100) == PEN
    post.assert_called_once_with(
        "http://api.test/products",
        json={"name": "Pen", "description": "Blue pen", "price": 1.5, "category": "stationery", "stock": 100},
        timeout=10,
    )

def test_update_targets_the_id():
    c = ProductClient(base_url="http://api.test")
    with mock.patch.object(c.session, "put", return_value=_response(200, PEN)) as put:
        c.update_product(7, "Pen", "Blue pen", 1.5, "stationery", 100)
    assert put.call_args[0][0] == "http://api.test/products/7"

def test_delete_not_found_raises():
    c = ProductClient(base_url="http://api.test")
    with mock.patch.object(c.session, "delete", return_value=_response(404, {"message": "Product not found"})):
        with pytest.raises(requests.HTTPError):
            c.delete_product(7)

def test_get_product_filters_listing():
    c = ProductClient(base_url="http://api.test")
    with mock.patch.object(c.session, "get", return_value=_response(200, [PEN])):
        assert c.get_product(7) == PEN
        assert c.get_product(8) is None

def test_cli_create_uses_client():
    with mock.patch.object(ProductClient, "create_product", return_value=PEN) as create:
        code = cli.main(["--url", "http://api.test", "create", "--name", "Pen", "--description", "Blue pen",
                         "--price", "1.5", "--category", "stationery", "--stock", "100"])
    assert code == 0
    create.assert_called_once_with("Pen", "Blue pen", 1.5, "stationery", 100)

def test_cli_list_reports_failure():
    with mock.patch.object(ProductClient, "list_products", side_effect=requests.ConnectionError("down")):
        assert cli.main(["--url", "http://api.test", "list"]) == 1

def test_create_async_against_the_app():
    store = MemoryStore()
    app.dependency_overrides[get_store] = lambda: store
    try:
        c = ProductClient(base_url="http://api.test", async_transport=httpx.ASGITransport(app=app))
        created = asyncio.run(c.create_product_async("Pen", "Blue pen", 1.5, "stationery", 100))
    finally:
        app.dependency_overrides.clear()

    assert isinstance(created["id"], int)
    assert asyncio.run(store.read()) == [created]

def test_create_async_raises_on_bad_request():
    def handler(request):
        return httpx.Response(400, json={"message": "All fields are required"})

    c = ProductClient(base_url="http://api.test", async_transport=httpx.MockTransport(handler))
    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(c.create_product_async("Pen", "Blue pen", 1.5, "stationery", 100))
