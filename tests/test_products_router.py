"""
HTTP tests for the /products router using a temporary products file.
"""
from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Garante que o pacote catalog seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from catalog.app import create_app  # noqa: E402


@pytest.fixture()
def products_file(tmp_path):
    return tmp_path / "data" / "products.json"


@pytest.fixture()
def client(products_file):
    app = create_app(products_file)
    with TestClient(app) as c:
        yield c


def test_startup_creates_products_file(client, products_file):
    assert products_file.exists()
    assert client.get("/products").json() == []


def test_add_and_list_products(client):
    resp = client.post("/products", json={"code": 180, "title": "Product 1", "price": 1200})
    assert resp.status_code == 201
    assert resp.json() == {"code": 180, "title": "Product 1", "price": 1200, "id": 1}

    resp = client.post("/products", json={"code": 181, "title": "Product 2"})
    assert resp.status_code == 201
    assert resp.json()["id"] == 2

    products = client.get("/products").json()
    assert [p["id"] for p in products] == [1, 2]


def test_duplicate_code_returns_409(client, products_file):
    client.post("/products", json={"code": 180, "title": "Product 1"})
    resp = client.post("/products", json={"code": 180, "title": "Copia"})
    assert resp.status_code == 409
    assert len(json.loads(products_file.read_text(encoding="utf-8"))) == 1


def test_get_product_by_id(client):
    client.post("/products", json={"code": 180, "title": "Product 1"})

    resp = client.get("/products/1")
    assert resp.status_code == 200
    assert resp.json()["title"] == "Product 1"

    resp = client.get("/products/99")
    assert resp.status_code == 404


def test_update_product(client):
    client.post("/products", json={"code": 180, "title": "Product 1", "description": "old"})

    resp = client.put("/products/1", json={"description": "X"})
    assert resp.status_code == 200
    assert resp.json() == {"code": 180, "title": "Product 1", "description": "X", "id": 1}

    resp = client.put("/products/5", json={"description": "X"})
    assert resp.status_code == 404


def test_non_object_body_is_rejected(client):
    resp = client.post("/products", json=[1, 2, 3])
    assert resp.status_code == 422
