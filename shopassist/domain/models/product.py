from __future__ import annotations
from datetime import datetime, timezone
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from shopassist.domain.services.classifier import classify, determine_gender
from shopassist.domain.services.constants import DISCOUNT_MARKER


class Product(BaseModel):
    product_id: str
    title: str
    brand: str
    description: str = ""
    category: str = ""
    categories: List[str] = []
    tags: List[str] = []
    price: str
    final_price: str = ""  # filled from price when missing
    rating: float = Field(default=0.0, ge=0, le=5)  # 0 = unrated
    review_count: int = Field(default=0, ge=0)
    discount: Optional[str] = None
    gender: Optional[str] = None

    # Presentation-only, passed through untouched
    sizes: Optional[List[str]] = None
    colors: Optional[List[str]] = None
    image_url: Optional[str] = None
    url: Optional[str] = None
    available_for_delivery: bool = False
    available_for_pickup: bool = False

    model_config = {"frozen": True}

    @field_validator("tags")
    @classmethod
    def _lowercase_tags(cls, tags: List[str]) -> List[str]:
        # keep first occurrence order for display
        seen: dict[str, None] = {}
        for t in tags:
            t = t.strip().lower()
            if t:
                seen.setdefault(t, None)
        return list(seen)

    @model_validator(mode="before")
    @classmethod
    def _fill_derived(cls, data):
        """
        Fill fields that raw feeds often omit:
        - final_price defaults to price ("not discounted")
        - category is classified from the category path, else from the title
        - gender is derived from the path + title
        """
        if not isinstance(data, dict):
            return data
        data = dict(data)
        label = "|".join(data.get("categories") or [])
        title = data.get("title") or ""
        if data.get("final_price") is None:
            data["final_price"] = data.get("price")
        if not (data.get("category") or "").strip():
            data["category"] = classify(label or title)
        if not data.get("gender"):
            data["gender"] = determine_gender(label, title)
        return data

    @property
    def is_on_sale(self) -> bool:
        return bool(self.discount) and DISCOUNT_MARKER in self.discount

    @property
    def searchable_text(self) -> str:
        return f"{self.title} {self.brand} {self.category} {' '.join(self.tags)}".lower()


class CategorizedProducts(BaseModel):
    hidden_gems: List[Product] = []
    value_vault: List[Product] = []
    trending_now: List[Product] = []
    model_config = {"frozen": True}

    def is_empty(self) -> bool:
        return not (self.hidden_gems or self.value_vault or self.trending_now)


class CategoryCount(BaseModel):
    name: str
    count: int
    model_config = {"frozen": True}


class ChatMessage(BaseModel):
    text: str
    is_user: bool
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    products: Optional[List[Product]] = None
    categorized: Optional[CategorizedProducts] = None
    model_config = {"frozen": True}


class RouterReply(BaseModel):
    text: str
    step: int
    products: Optional[List[Product]] = None
    categorized: Optional[CategorizedProducts] = None
    model_config = {"frozen": True}

    @property
    def has_results(self) -> bool:
        return bool(self.products) or (self.categorized is not None and not self.categorized.is_empty())
