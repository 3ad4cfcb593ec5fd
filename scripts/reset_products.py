#!/usr/bin/env python3
"""
Resetar o arquivo de produtos: apaga o JSON e recria com uma lista vazia.

Uso:
  python scripts/reset_products.py --yes [--file ./products.json]
"""
from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from catalog.core.config import get_settings
from catalog.repositories import json_storage


async def reset_products(path: str) -> int:
    """Delete the file (when present) and recreate it empty. Returns how many records were dropped."""
    dropped = 0
    if Path(path).exists():
        try:
            dropped = len(await json_storage.read(path))
        except json_storage.StorageParseError:
            print(f"Aviso: {path} estava corrompido, recriando")
        await json_storage.delete(path)
    await json_storage.create(path)
    return dropped


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Resetar arquivo de produtos")
    ap.add_argument("--file", default=settings.products_file, help="Arquivo JSON de produtos")
    ap.add_argument("--yes", action="store_true", help="Confirma a remocao de todos os produtos")
    args = ap.parse_args()

    if not args.yes:
        raise SystemExit("Use --yes para confirmar o reset")
    dropped = asyncio.run(reset_products(args.file))
    print("OK: produtos resetados")
    print(f"  Arquivo: {args.file}")
    print(f"  Removidos: {dropped}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
