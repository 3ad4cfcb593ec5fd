"""
Smoke tests for the maintenance scripts (demo driver and products reset).
"""
from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

# Garante que os pacotes catalog/scripts sejam importáveis durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from scripts.demo import run_demo  # noqa: E402
from scripts.reset_products import reset_products  # noqa: E402


def test_demo_adds_two_products_and_updates_first(tmp_path):
    path = str(tmp_path / "products.json")

    products = asyncio.run(run_demo(path))

    assert [p["id"] for p in products] == [1, 2]
    assert [p["code"] for p in products] == [180, 181]
    assert products[0]["description"] == "Descrição atualizada do Product 1"
    assert products[1]["description"] == "Descrição do Product 2"


def test_demo_is_idempotent_for_codes(tmp_path, capsys):
    path = str(tmp_path / "products.json")
    asyncio.run(run_demo(path))

    products = asyncio.run(run_demo(path))

    assert len(products) == 2
    assert "ja existe" in capsys.readouterr().out


def test_reset_products_recreates_empty_file(tmp_path):
    path = tmp_path / "products.json"
    asyncio.run(run_demo(str(path)))

    dropped = asyncio.run(reset_products(str(path)))

    assert dropped == 2
    assert json.loads(path.read_text(encoding="utf-8")) == []


def test_reset_products_handles_corrupted_file(tmp_path):
    path = tmp_path / "products.json"
    path.write_text("{oops", encoding="utf-8")

    assert asyncio.run(reset_products(str(path))) == 0
    assert json.loads(path.read_text(encoding="utf-8")) == []
