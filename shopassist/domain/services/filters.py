from collections import Counter
from typing import Iterable, List, Optional, Sequence, Tuple

from shopassist.domain.models.product import CategoryCount, Product
from shopassist.domain.services.constants import ALL_CATEGORY


def _tokenize(query: str) -> List[str]:
    return query.lower().split()


def by_category(products: Sequence[Product], name: str) -> List[Product]:
    """
    Products whose normalized category is `name`, or whose category path
    contains `name`. "All" returns everything. Input order is kept.
    """
    if name == ALL_CATEGORY:
        return list(products)
    return [p for p in products if p.category == name or name in p.categories]


def by_tag(products: Sequence[Product], tag: str) -> List[Product]:
    """Exact tag match (stored tags are lowercase)."""
    return [p for p in products if tag in p.tags]


def by_tags(products: Sequence[Product], tags: Iterable[str]) -> List[Product]:
    """Products carrying every tag in `tags` (AND, applied one tag at a time)."""
    result = list(products)
    for tag in tags:
        result = by_tag(result, tag)
    return result


def search(products: Sequence[Product], query: Optional[str]) -> List[Product]:
    """
    Conjunctive free-text search: every whitespace-separated token must be a
    substring of "title brand category tags" (lowercased). Blank query -> all.
    """
    terms = _tokenize(query or "")
    if not terms:
        return list(products)
    return [p for p in products if all(t in p.searchable_text for t in terms)]


def sort_by_id(products: Iterable[Product]) -> List[Product]:
    return sorted(products, key=lambda p: p.product_id)


def match(
    products: Sequence[Product],
    *,
    category: str = ALL_CATEGORY,
    tags: Sequence[str] = (),
    query: Optional[str] = None,
) -> List[Product]:
    """
    Browse-screen filtering:
      - a non-blank query wins and searches the whole catalog
      - otherwise selected tags narrow the selected category
      - otherwise the category alone
    The result is always re-sorted by product_id so repeated calls (and the
    two-column layout built from them) are stable.
    """
    if query and query.strip():
        result = search(products, query)
    elif tags:
        result = by_tags(by_category(products, category), tags)
    else:
        result = by_category(products, category)
    return sort_by_id(result)


def split_columns(products: Sequence[Product]) -> Tuple[List[Product], List[Product]]:
    """Even indexes go left, odd indexes go right (masonry grid)."""
    return list(products[0::2]), list(products[1::2])


def on_sale(products: Sequence[Product]) -> List[Product]:
    """Products flagged with the reduced-price marker."""
    return [p for p in products if p.is_on_sale]


def with_delivery(products: Sequence[Product]) -> List[Product]:
    return [p for p in products if p.available_for_delivery]


def with_pickup(products: Sequence[Product]) -> List[Product]:
    return [p for p in products if p.available_for_pickup]


def categories_with_counts(products: Sequence[Product]) -> List[CategoryCount]:
    """
    "All" with the total first, then each category by product count (desc).
    Equal counts keep first-seen order.
    """
    counts = Counter(p.category for p in products)
    ordered = sorted(counts.items(), key=lambda kv: -kv[1])  # stable on first-seen
    return [CategoryCount(name=ALL_CATEGORY, count=len(products))] + [
        CategoryCount(name=name, count=count) for name, count in ordered
    ]


def all_tags(products: Sequence[Product]) -> List[str]:
    return sorted({t for p in products for t in p.tags})
