# shopassist/api/v1/routers/products.py
from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional
import time
import logging

from shopassist.api.deps import catalog_dep
from shopassist.api.v1.schemas.catalog import (
    CategoriesOut,
    ClassificationOut,
    ProductColumnsOut,
    TagsOut,
    product_list,
)
from shopassist.domain.services.classifier import classify, determine_gender, is_clothing
from shopassist.domain.services.constants import ALL_CATEGORY
from shopassist.domain.services.filters import all_tags, categories_with_counts, match, split_columns

logger = logging.getLogger(__name__)

router = APIRouter(tags=["products"])


@router.get("/products")
async def list_products(
    category: str = Query(ALL_CATEGORY, description="Category name, or 'All'"),
    tag: Optional[List[str]] = Query(None, description="Selected tags (all must match)"),
    q: Optional[str] = Query(None, description="Free-text search; overrides category/tags"),
    columns: bool = Query(False, description="Split the result into two masonry columns"),
    store = Depends(catalog_dep),
):
    """
    Browse the catalog. Results are always ordered by product_id.
    """
    logger.info("Request: list_products category=%s tags=%s q=%r columns=%s", category, tag, q, columns)
    t0 = time.perf_counter()
    items = match(store.all(), category=category, tags=tag or (), query=q)
    dt = time.perf_counter() - t0
    logger.info("Response: list_products returned %s items in %.4fs", len(items), dt)

    if columns:
        left, right = split_columns(items)
        return ProductColumnsOut(left=left, right=right, count=len(items))
    return product_list(items)


@router.get("/products/{product_id}")
async def get_product(product_id: str, store = Depends(catalog_dep)):
    product = store.get(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail=f"Product {product_id} not found.")
    return product


@router.get("/categories")
async def list_categories(store = Depends(catalog_dep)):
    return CategoriesOut(items=categories_with_counts(store.all()))


@router.get("/tags")
async def list_tags(store = Depends(catalog_dep)):
    items = all_tags(store.all())
    return TagsOut(items=items, count=len(items))


@router.get("/classify")
async def classify_label(
    label: str = Query(..., min_length=1, description="Raw category label or free text"),
    title: str = Query("", description="Optional product title for the gender axis"),
):
    return ClassificationOut(
        label=label,
        category=classify(label),
        gender=determine_gender(label, title),
        is_clothing=is_clothing(label),
    )
