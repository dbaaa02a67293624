from __future__ import annotations

import pytest
from fakes import HOST, FakeBackend

from webdantic import BackendError, Instance, get_instance


def test_host_trailing_slash_is_removed(instance: Instance) -> None:
    assert instance.host == HOST


def test_get_database_is_local(instance: Instance, backend: FakeBackend) -> None:
    database = instance.get_database("shop", auth="token")

    assert database.get_name() == "shop"
    assert database.auth == "token"
    assert backend.requests == []


@pytest.mark.asyncio
async def test_add_database_uses_master_password(instance: Instance, backend: FakeBackend) -> None:
    backend.route("POST", "/", status=201)
    backend.route("GET", "/shop/collections", json={"data": []})

    database = await instance.add_database("shop", auth="token", master_password="root")

    request = backend.requests[0]
    assert request.headers["authentication"] == "root"
    assert backend.body() == {"name": "shop", "auth": "token"}

    await database.list_collections()
    assert backend.requests[-1].headers["authentication"] == "token"


@pytest.mark.asyncio
async def test_add_database_without_credentials(instance: Instance, backend: FakeBackend) -> None:
    backend.route("POST", "/", status=201)

    database = await instance.add_database("shop", auth="")

    assert backend.requests[0].headers["authentication"] == ""
    assert backend.body() == {"name": "shop", "auth": None}
    assert database.auth == ""


@pytest.mark.asyncio
async def test_add_database_failure(instance: Instance, backend: FakeBackend) -> None:
    backend.route("POST", "/", status=401, json={"error": "bad master password"})

    with pytest.raises(BackendError) as excinfo:
        await instance.add_database("shop", master_password="wrong")
    assert excinfo.value.status == 401
    assert excinfo.value.body == {"error": "bad master password"}


@pytest.mark.asyncio
async def test_host_with_path_prefix(backend: FakeBackend) -> None:
    backend.route("DELETE", "/api/shop")

    instance = get_instance(HOST + "/api/", transport=backend.transport)
    await instance.get_database("shop").remove()

    assert backend.calls == [("DELETE", "/api/shop")]


@pytest.mark.asyncio
async def test_shop_walkthrough(instance: Instance, backend: FakeBackend) -> None:
    backend.route("POST", "/", status=201)
    backend.route("POST", "/shop/collections", status=201)
    backend.route("POST", "/shop/collections/orders/setDocument", json={"data": "d1"})

    database = await instance.add_database("shop", master_password="root")
    collection = await database.add_collection("orders")
    document = await collection.add_document({"item": "x"})

    assert document.get_id() == "d1"
    assert backend.calls == [
        ("POST", "/"),
        ("POST", "/shop/collections"),
        ("POST", "/shop/collections/orders/setDocument"),
    ]

    backend.route("DELETE", "/shop/collections/orders/documents/d1")
    backend.route("POST", "/shop/collections/orders/setDocument", json={"data": "d2"})

    await collection.get_document("d1").set({"id": "d2", "item": "y"})
    assert backend.calls[-2:] == [
        ("DELETE", "/shop/collections/orders/documents/d1"),
        ("POST", "/shop/collections/orders/setDocument"),
    ]
