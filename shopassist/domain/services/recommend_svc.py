import logging
import time
from typing import List, Optional, Tuple

from shopassist.domain.models.product import CategorizedProducts, Product
from shopassist.domain.repositories.product_store import ProductStore
from shopassist.domain.services.classifier import classify_query, has_keyword, is_category_query
from shopassist.domain.services.constants import RELEVANT_LIMIT
from shopassist.domain.services.filters import search
from shopassist.domain.services.ranking_svc import (
    best_sellers_by_category,
    categorize,
    discounted,
    top_rated,
)

logger = logging.getLogger(__name__)

# (keywords, category) checked in order by find_relevant_products
_BEST_SELLER_RULES = (
    (("beauty", "makeup"), "Beauty"),
    (("home", "decor"), "Home"),
    (("clothing", "clothes"), "Clothing"),
    (("electronics", "tv"), "Electronics"),
    (("shoes", "footwear"), "Shoes"),
)
_DEAL_KEYWORDS = ("discount", "sale", "deal")
_TOP_KEYWORDS = ("top", "best")


def find_relevant_products(store: ProductStore, query: str, limit: int = RELEVANT_LIMIT) -> List[Product]:
    """
    Flat product list for a free-text request.

    Category words -> best sellers of that category; deal words -> discounted
    products; "top"/"best" -> top rated; anything else -> conjunctive search.
    First rule that matches wins.
    """
    t0 = time.perf_counter()
    products = store.all()
    q = (query or "").lower()

    rule = "search"
    result: List[Product] = []
    for keywords, category in _BEST_SELLER_RULES:
        if any(has_keyword(q, k) for k in keywords):
            rule = f"best_sellers:{category}"
            result = best_sellers_by_category(products, category, limit)
            break
    else:
        if any(has_keyword(q, k) for k in _DEAL_KEYWORDS):
            rule = "discounted"
            result = discounted(products)[:limit]
        elif any(has_keyword(q, k) for k in _TOP_KEYWORDS):
            rule = "top_rated"
            result = top_rated(products, limit)
        else:
            result = search(products, query)[:limit]

    logger.info("relevant query=%r rule=%s items=%s time=%.4fs", query, rule, len(result), time.perf_counter() - t0)
    return result


def categorize_query(store: ProductStore, query: str) -> CategorizedProducts:
    """
    Buckets for the category a query is about (exact category match), or for
    the whole catalog when the query names no known category.
    """
    products = store.all()
    category = classify_query(query)
    if category is not None:
        products = [p for p in products if p.category == category]
    logger.info("categorize_query query=%r category=%s candidates=%s", query, category, len(products))
    return categorize(products)


def recommend(
    store: ProductStore, query: str, limit: int = RELEVANT_LIMIT
) -> Tuple[Optional[List[Product]], Optional[CategorizedProducts]]:
    """Category questions get the three buckets, anything else a flat list."""
    if is_category_query(query):
        return None, categorize_query(store, query)
    return find_relevant_products(store, query, limit), None
