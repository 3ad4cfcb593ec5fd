#!/usr/bin/env python3
"""
Demonstracao do catalogo: cadastra dois produtos, atualiza o primeiro e lista tudo.

Uso:
  python scripts/demo.py [--file ./products.json]
"""
from __future__ import annotations

import argparse
import asyncio
import json
import sys

from catalog.core.config import get_settings
from catalog.core.logging_setup import setup_logging
from catalog.repositories.product_repository import ProductRepository

SAMPLE_PRODUCTS = [
    {
        "title": "Product 1",
        "description": "Descrição do Product 1",
        "price": 1200,
        "thumbnail": "product1.jpg",
        "stock": 10,
        "code": 180,
    },
    {
        "title": "Product 2",
        "description": "Descrição do Product 2",
        "price": 1500,
        "thumbnail": "product2.jpg",
        "stock": 20,
        "code": 181,
    },
]


async def run_demo(path: str) -> list:
    repo = await ProductRepository.open(path)
    for product in SAMPLE_PRODUCTS:
        result = await repo.add(product)
        if not result.ok:
            print(f"Ignorado: codigo {product['code']} ja existe")

    result = await repo.update(1, {"description": "Descrição atualizada do Product 1"})
    if not result.ok:
        print("Produto 1 nao encontrado")
    return await repo.list_all()


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Demonstracao do catalogo de produtos")
    ap.add_argument("--file", default=settings.products_file, help="Arquivo JSON de produtos")
    args = ap.parse_args()

    setup_logging(settings.log_level)
    products = asyncio.run(run_demo(args.file))
    print(json.dumps(products, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
