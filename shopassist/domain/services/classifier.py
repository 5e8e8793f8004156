"""
Keyword-based category classification.

Every lookup is a case-insensitive keyword test (substring, or whole word for
very short keywords) against an ordered table. The first entry that matches
wins, so table order is part of the behavior.
"""
import re
from typing import Optional

from shopassist.domain.services.constants import OTHER_CLOTHING, UNCLASSIFIED

# Path separator used by raw category labels ("Clothing|Footwear|Running")
PATH_SEPARATOR = "|"

# Ordered (keyword, category) table for catalog labels.
# Beauty, electronics and home come first so that e.g. "laptop" never hits
# the apparel "top" entry; sports comes last so "sports shoes" stays Shoes.
CATEGORY_KEYWORDS: tuple[tuple[str, str], ...] = (
    # Beauty
    ("makeup", "Beauty"),
    ("lipstick", "Beauty"),
    ("mascara", "Beauty"),
    ("cosmetic", "Beauty"),
    ("skincare", "Beauty"),
    ("fragrance", "Beauty"),
    ("beauty", "Beauty"),
    # Electronics
    ("electronic", "Electronics"),
    ("headphone", "Electronics"),
    ("laptop", "Electronics"),
    ("television", "Electronics"),
    ("tv", "Electronics"),
    ("phone", "Electronics"),
    ("tablet", "Electronics"),
    ("camera", "Electronics"),
    ("speaker", "Electronics"),
    # Home
    ("home", "Home"),
    ("decor", "Home"),
    ("furniture", "Home"),
    ("kitchen", "Home"),
    ("bedding", "Home"),
    ("appliance", "Home"),
    # Apparel
    ("tshirt", "Tops"),
    ("t-shirt", "Tops"),
    ("shirt", "Tops"),
    ("top", "Tops"),
    ("blouse", "Tops"),
    ("jeans", "Bottoms"),
    ("pants", "Bottoms"),
    ("trousers", "Bottoms"),
    ("shorts", "Bottoms"),
    ("skirt", "Bottoms"),
    ("dress", "Dresses"),
    ("jacket", "Jackets"),
    ("coat", "Jackets"),
    ("hoodie", "Outerwear"),
    ("sweater", "Outerwear"),
    ("shoes", "Shoes"),
    ("sneakers", "Shoes"),
    ("boots", "Shoes"),
    ("footwear", "Shoes"),
    ("accessories", "Accessories"),
    ("jewelry", "Accessories"),
    ("hat", "Accessories"),
    ("bag", "Accessories"),
    ("watch", "Accessories"),
    ("ethnic", "Ethnic"),
    ("kurta", "Ethnic"),
    ("saree", "Ethnic"),
    # Sports
    ("sport", "Sports"),
    ("fitness", "Sports"),
    ("exercise", "Sports"),
    ("yoga", "Sports"),
    ("camping", "Sports"),
)

# "Is this apparel at all?" hints for the generic fallback
CLOTHING_HINTS = ("cloth", "apparel", "fashion", "wear")

# Broader set used by is_clothing()
CLOTHING_KEYWORDS = CLOTHING_HINTS + (
    "shirt", "dress", "pant", "jean", "skirt", "shoe", "boot", "jacket", "coat",
)

# Chat/query intent -> store category. Same first-match rule.
QUERY_CATEGORY_KEYWORDS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("beauty", "makeup", "skincare"), "Beauty"),
    (("clothing", "clothes", "fashion"), "Clothing"),
    (("electronics", "tech", "tv"), "Electronics"),
    (("home", "decor", "furniture"), "Home"),
    (("shoes", "footwear"), "Shoes"),
)

# Anything a shopper might call a category
CATEGORY_QUERY_KEYWORDS = (
    "beauty", "makeup", "skincare", "cosmetics",
    "clothing", "clothes", "fashion", "apparel",
    "electronics", "tech", "gadgets", "tv", "phone",
    "home", "decor", "furniture", "kitchen",
    "shoes", "footwear", "sneakers", "boots",
    "sports", "fitness", "exercise",
    "toys", "games", "entertainment",
    "books", "stationery", "office",
    "automotive", "car", "vehicle",
    "garden", "outdoor", "lawn",
)

# Whole words only: "element" is not "men", "Mango" is not "man"
_WOMEN_RE = re.compile(r"\b(women|woman|ladies|lady|girl)s?\b")
_MEN_RE = re.compile(r"\b(men|man|boy)s?\b")

# Keywords this short are matched as whole words (plural allowed), so that
# "desktop" is not a top, "chat" is not a hat and "scarf" is not a car.
SHORT_KEYWORD_MAX_LEN = 3


def has_keyword(text: str, keyword: str) -> bool:
    """Keyword test on lowercased text: substring, or whole word for short keywords."""
    if len(keyword) > SHORT_KEYWORD_MAX_LEN:
        return keyword in text
    return re.search(rf"\b{re.escape(keyword)}s?\b", text) is not None


def classify(label: Optional[str]) -> str:
    """
    Map a raw category label (or any free text) to one normalized category.

    Path segments are checked in order, and within a segment the keyword table
    is checked in order. Falls back to OTHER_CLOTHING when the label looks like
    apparel, else UNCLASSIFIED.
    """
    if not label or not label.strip():
        return UNCLASSIFIED

    for segment in label.split(PATH_SEPARATOR):
        s = segment.strip().lower()
        if not s:
            continue
        for keyword, category in CATEGORY_KEYWORDS:
            if has_keyword(s, keyword):
                return category

    lowered = label.lower()
    if any(h in lowered for h in CLOTHING_HINTS):
        return OTHER_CLOTHING
    return UNCLASSIFIED


def classify_query(text: Optional[str]) -> Optional[str]:
    """Store category a chat/search query is about, or None."""
    if not text:
        return None
    s = text.lower()
    for keywords, category in QUERY_CATEGORY_KEYWORDS:
        if any(has_keyword(s, k) for k in keywords):
            return category
    return None


def is_category_query(text: Optional[str]) -> bool:
    if not text:
        return False
    s = text.lower()
    return any(has_keyword(s, k) for k in CATEGORY_QUERY_KEYWORDS)


def is_clothing(label: Optional[str]) -> bool:
    if not label:
        return False
    s = label.lower()
    return any(k in s for k in CLOTHING_KEYWORDS)


def determine_gender(label: Optional[str], title: Optional[str]) -> str:
    """
    Derive the gender axis from a category label and a product title.
    Returns 'Women' | 'Men' | 'Unisex'.
    """
    text = f"{label or ''} {title or ''}".lower()
    if _WOMEN_RE.search(text):
        return "Women"
    if _MEN_RE.search(text):
        return "Men"
    return "Unisex"
