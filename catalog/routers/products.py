from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Body, HTTPException, Request

from catalog.domain.products import DuplicateCode, NotFound
from catalog.repositories.product_repository import ProductRepository

router = APIRouter(prefix="/products", tags=["products"])


def _get_repository(request: Request) -> ProductRepository:
    repo = getattr(getattr(request.app, "state", None), "product_repository", None)
    if not repo:
        raise RuntimeError("ProductRepository nao configurado")
    return repo


@router.get("")
async def list_products(request: Request):
    return await _get_repository(request).list_all()


@router.get("/{product_id}")
async def get_product(product_id: int, request: Request):
    result = await _get_repository(request).get_by_id(product_id)
    if isinstance(result, NotFound):
        raise HTTPException(404, "Produto nao encontrado")
    return result.record


@router.post("", status_code=201)
async def add_product(request: Request, payload: Dict[str, Any] = Body(...)):
    result = await _get_repository(request).add(payload)
    if isinstance(result, DuplicateCode):
        raise HTTPException(409, "Produto com este codigo ja existe")
    return result.record


@router.put("/{product_id}")
async def update_product(product_id: int, request: Request, patch: Dict[str, Any] = Body(...)):
    result = await _get_repository(request).update(product_id, patch)
    if isinstance(result, NotFound):
        raise HTTPException(404, "Produto nao encontrado")
    return result.record
