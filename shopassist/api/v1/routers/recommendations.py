from fastapi import APIRouter, Depends, Query
from typing import Optional
from shopassist.api.deps import catalog_dep
from shopassist.api.v1.schemas.catalog import AskOut, CategorizedOut, product_list
from shopassist.core.config import get_settings
from shopassist.domain.services.classifier import classify_query
from shopassist.domain.services.constants import RELEVANT_LIMIT
from shopassist.domain.services.filters import by_category, on_sale, with_delivery, with_pickup
from shopassist.domain.services.ranking_svc import best_sellers_by_category, categorize, discounted, top_rated
from shopassist.domain.services.recommend_svc import categorize_query, find_relevant_products, recommend

import logging
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recommendations", tags=["recommendations"])


@router.get("/top-rated")
async def get_top_rated(
    limit: Optional[int] = Query(None, ge=1, le=200),
    store = Depends(catalog_dep),
):
    n = limit or get_settings().top_rated_limit
    items = top_rated(store.all(), n)
    logger.info("Response: top_rated limit=%s returned %s items", n, len(items))
    return product_list(items)


@router.get("/best-sellers")
async def get_best_sellers(
    category: str = Query(..., min_length=1),
    limit: Optional[int] = Query(None, ge=1, le=200),
    store = Depends(catalog_dep),
):
    n = limit or get_settings().best_sellers_limit
    items = best_sellers_by_category(store.all(), category, n)
    logger.info("Response: best_sellers category=%s limit=%s returned %s items", category, n, len(items))
    return product_list(items)


@router.get("/discounted")
async def get_discounted(store = Depends(catalog_dep)):
    return product_list(discounted(store.all()))


@router.get("/on-sale")
async def get_on_sale(store = Depends(catalog_dep)):
    return product_list(on_sale(store.all()))


@router.get("/delivery")
async def get_free_delivery(store = Depends(catalog_dep)):
    return product_list(with_delivery(store.all()))


@router.get("/pickup")
async def get_pickup(store = Depends(catalog_dep)):
    return product_list(with_pickup(store.all()))


@router.get("/categorized")
async def get_categorized(
    category: Optional[str] = Query(None, description="Exact category (or 'All') to bucket"),
    q: Optional[str] = Query(None, description="Free text naming a category"),
    store = Depends(catalog_dep),
):
    """
    Hidden Gems / Value Vault / Trending Now buckets (max 3 each, may overlap).
    `category` wins over `q`; with neither, the whole catalog is bucketed.
    """
    if category:
        return CategorizedOut(category=category, buckets=categorize(by_category(store.all(), category)))
    return CategorizedOut(category=classify_query(q), buckets=categorize_query(store, q or ""))


@router.get("/relevant")
async def get_relevant(
    q: str = Query(..., min_length=1),
    limit: int = Query(RELEVANT_LIMIT, ge=1, le=50),
    store = Depends(catalog_dep),
):
    return product_list(find_relevant_products(store, q, limit))


@router.get("/ask")
async def ask(
    q: str = Query(..., min_length=1, description="Free-text shopping question"),
    limit: int = Query(RELEVANT_LIMIT, ge=1, le=50),
    store = Depends(catalog_dep),
):
    """
    Category questions ("any beauty products?") are answered with the three
    buckets; anything else with a flat list of relevant products.
    """
    products, categorized = recommend(store, q, limit)
    if categorized is not None:
        return AskOut(query=q, categorized=CategorizedOut(category=classify_query(q), buckets=categorized))
    return AskOut(query=q, products=products)
