# api/v1/schemas/catalog.py
from pydantic import BaseModel, Field
from typing import Dict, List, Optional

from shopassist.domain.models.product import CategorizedProducts, CategoryCount, ChatMessage, Product
from shopassist.domain.services.constants import BUCKET_HIDDEN_GEMS, BUCKET_TRENDING_NOW, BUCKET_VALUE_VAULT

BUCKET_TITLES = {
    "hidden_gems": BUCKET_HIDDEN_GEMS,
    "value_vault": BUCKET_VALUE_VAULT,
    "trending_now": BUCKET_TRENDING_NOW,
}

class ProductListOut(BaseModel):
    items: List[Product]
    count: int

class ProductColumnsOut(BaseModel):
    left: List[Product]
    right: List[Product]
    count: int

class CategoriesOut(BaseModel):
    items: List[CategoryCount]

class TagsOut(BaseModel):
    items: List[str]
    count: int

class ClassificationOut(BaseModel):
    label: str
    category: str
    gender: str
    is_clothing: bool

class CategorizedOut(BaseModel):
    category: Optional[str] = None
    buckets: CategorizedProducts
    titles: Dict[str, str] = Field(default_factory=lambda: dict(BUCKET_TITLES))

class AskOut(BaseModel):
    query: str
    products: Optional[List[Product]] = None
    categorized: Optional[CategorizedOut] = None

class ChatMessageIn(BaseModel):
    text: str = Field(max_length=2000)

class ChatHistoryOut(BaseModel):
    session_id: str
    step: int
    messages: List[ChatMessage]

class CacheClearOut(BaseModel):
    cleared: bool


def product_list(items: List[Product]) -> ProductListOut:
    return ProductListOut(items=items, count=len(items))
