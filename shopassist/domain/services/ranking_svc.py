import logging
from typing import List, Sequence

from shopassist.domain.models.product import CategorizedProducts, Product
from shopassist.domain.services.constants import (
    BEST_SELLERS_LIMIT,
    BUCKET_SIZE,
    HIDDEN_GEMS_MIN_RATING,
    HIDDEN_GEMS_MIN_REVIEWS,
    TOP_RATED_LIMIT,
    TRENDING_MIN_REVIEWS,
)
from shopassist.domain.services.filters import by_category
from shopassist.domain.services.pricing import discount_amount

logger = logging.getLogger(__name__)

# All sorts below rely on sorted() being stable: equal keys keep input order,
# which for store-backed inputs is the catalog load order.


def top_rated(products: Sequence[Product], n: int = TOP_RATED_LIMIT) -> List[Product]:
    """Rated products (rating > 0), best first, at most n."""
    rated = [p for p in products if p.rating > 0]
    return sorted(rated, key=lambda p: p.rating, reverse=True)[:max(n, 0)]


def best_sellers_by_category(
    products: Sequence[Product], category: str, n: int = BEST_SELLERS_LIMIT
) -> List[Product]:
    return top_rated(by_category(products, category), n)


def discounted(products: Sequence[Product]) -> List[Product]:
    """
    Every product whose numeric final price is below its price, in input
    order. Unparseable prices are skipped.
    """
    return [p for p in products if discount_amount(p) is not None]


def hidden_gems(products: Sequence[Product], size: int = BUCKET_SIZE) -> List[Product]:
    """Well-reviewed, highly rated products ("Hidden Gems")."""
    gems = [
        p for p in products
        if p.rating >= HIDDEN_GEMS_MIN_RATING and p.review_count >= HIDDEN_GEMS_MIN_REVIEWS
    ]
    return sorted(gems, key=lambda p: p.rating, reverse=True)[:size]


def value_vault(products: Sequence[Product], size: int = BUCKET_SIZE) -> List[Product]:
    """Biggest absolute discounts ("Value Vault")."""
    scored = [(p, discount_amount(p)) for p in products]
    scored = [(p, amount) for p, amount in scored if amount is not None]
    scored.sort(key=lambda x: x[1], reverse=True)
    return [p for p, _ in scored[:size]]


def trending_now(products: Sequence[Product], size: int = BUCKET_SIZE) -> List[Product]:
    """Most reviewed products ("Trending Now")."""
    popular = [p for p in products if p.review_count >= TRENDING_MIN_REVIEWS]
    return sorted(popular, key=lambda p: p.review_count, reverse=True)[:size]


def categorize(products: Sequence[Product]) -> CategorizedProducts:
    """
    Build the three recommendation buckets from one candidate set.
    Buckets are computed independently and may share products.
    """
    result = CategorizedProducts(
        hidden_gems=hidden_gems(products),
        value_vault=value_vault(products),
        trending_now=trending_now(products),
    )
    logger.debug(
        "categorize candidates=%s hidden_gems=%s value_vault=%s trending_now=%s",
        len(products), len(result.hidden_gems), len(result.value_vault), len(result.trending_now),
    )
    return result
