"""Product records persisted as a JSON array in a single file."""
from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Mapping, Union

from catalog.domain.products import (
    Added,
    DuplicateCode,
    Found,
    NotFound,
    Updated,
    find_by_code,
    find_by_id,
    find_index,
    merge_patch,
    next_id,
)
from catalog.repositories import json_storage
from catalog.repositories.json_storage import PathLike

logger = logging.getLogger(__name__)


class ProductRepository:
    """
    Add/list/get/update helpers over the products file.

    Every call re-reads the whole file; mutations write the whole list back.
    Nothing is cached between calls.
    """

    def __init__(self, path: PathLike) -> None:
        self.path = Path(path)
        # Serializa read-modify-write dentro desta instancia
        self._write_lock = asyncio.Lock()

    @classmethod
    async def open(cls, path: PathLike) -> "ProductRepository":
        """Build a repository and make sure its backing file exists."""
        repo = cls(path)
        await repo.init()
        return repo

    async def init(self) -> None:
        await json_storage.create(self.path)

    async def add(self, record: Mapping[str, Any]) -> Union[Added, DuplicateCode]:
        async with self._write_lock:
            products = await json_storage.read(self.path)
            code = record.get("code")
            if find_by_code(products, code) is not None:
                logger.info("Product with code %r already exists", code)
                return DuplicateCode(code)

            product = dict(record)
            product["id"] = next_id(products)
            products.append(product)
            await json_storage.write(self.path, products)
            logger.debug("Added product id=%s code=%r", product["id"], code)
            return Added(product)

    async def list_all(self) -> list:
        return await json_storage.read(self.path)

    async def get_by_id(self, product_id: Any) -> Union[Found, NotFound]:
        product = find_by_id(await self.list_all(), product_id)
        if product is None:
            return NotFound(product_id)
        return Found(dict(product))

    async def update(self, product_id: Any, patch: Mapping[str, Any]) -> Union[Updated, NotFound]:
        """
        Overlay ``patch`` on the stored product. Unmentioned fields are kept;
        an ``id`` inside the patch replaces the product's id.
        """
        async with self._write_lock:
            products = await self.list_all()
            idx = find_index(products, product_id)
            if idx == -1:
                logger.info("Product %r not found", product_id)
                return NotFound(product_id)

            products[idx] = merge_patch(products[idx], patch)
            await json_storage.write(self.path, products)
            logger.debug("Updated product id=%s fields=%s", product_id, sorted(patch))
            return Updated(dict(products[idx]))
