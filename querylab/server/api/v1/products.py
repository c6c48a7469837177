"""
API endpoints for products.

Plain CRUD over the product table plus an optional price range filter.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from querylab.core.database.entities import Product
from querylab.core.logging_config import get_logger
from querylab.core.models.io import ProductCreate, ProductRead, ProductUpdate
from querylab.server.deps import RepositoriesDep

logger = get_logger(__name__)

router = APIRouter(tags=["products"])


@router.post(
    "",
    response_model=ProductRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Product",
)
async def create_product(product_data: ProductCreate, repos: RepositoriesDep) -> ProductRead:
    product = await repos.products.create(Product.model_validate(product_data))
    await repos.session.commit()
    logger.info(f"Created product {product.id} ({product.name})")
    return ProductRead.model_validate(product)


@router.get(
    "",
    response_model=list[ProductRead],
    summary="List Products",
    description="List products, cheapest first when a price bound is given, otherwise by id.",
)
async def list_products(
    repos: RepositoriesDep,
    name: Optional[str] = None,
    min_price: Optional[int] = Query(default=None, ge=0),
    max_price: Optional[int] = Query(default=None, ge=0),
) -> list[ProductRead]:
    if min_price is not None or max_price is not None:
        products = await repos.products.find_by_price_range(min_price, max_price, name=name)
    elif name is not None:
        products = await repos.products.find_by_name(name)
    else:
        products = await repos.products.list()
    return [ProductRead.model_validate(p) for p in products]


@router.get(
    "/{product_id}",
    response_model=ProductRead,
    summary="Get Product",
    responses={404: {"description": "Product not found"}},
)
async def get_product(product_id: int, repos: RepositoriesDep) -> ProductRead:
    product = await repos.products.get_by_id(product_id)
    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Product {product_id} not found")
    return ProductRead.model_validate(product)


@router.patch(
    "/{product_id}",
    response_model=ProductRead,
    summary="Update Product",
    description="Partially update a product. Only provided fields are updated.",
    responses={404: {"description": "Product not found"}},
)
async def update_product(product_id: int, product_update: ProductUpdate, repos: RepositoriesDep) -> ProductRead:
    product = await repos.products.get_by_id(product_id)
    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Product {product_id} not found")

    for key, value in product_update.model_dump(exclude_unset=True).items():
        setattr(product, key, value)

    product = await repos.products.update(product)
    await repos.session.commit()
    return ProductRead.model_validate(product)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Product",
    responses={404: {"description": "Product not found"}},
)
async def delete_product(product_id: int, repos: RepositoriesDep) -> None:
    deleted = await repos.products.delete(product_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Product {product_id} not found")
    await repos.session.commit()
