"""
Unit tests for the Product record's derived fields and reply helpers.
"""
import pytest
from pydantic import ValidationError

from shopassist.domain.models.product import CategorizedProducts, Product, RouterReply


def _raw(**overrides):
    data = {"product_id": "x1", "title": "Plain Item", "brand": "B", "price": "$10.00"}
    data.update(overrides)
    return data


class TestProductDerivedFields:

    def test_final_price_defaults_to_price(self):
        assert Product.model_validate(_raw()).final_price == "$10.00"

    def test_category_from_path(self):
        p = Product.model_validate(_raw(categories=["Clothing", "Footwear", "Athletic"]))
        assert p.category == "Shoes"

    def test_category_from_title_when_no_path(self):
        assert Product.model_validate(_raw(title="Floral Maxi Dress")).category == "Dresses"

    def test_explicit_category_is_kept(self):
        p = Product.model_validate(_raw(title="Floral Maxi Dress", category="Clothing"))
        assert p.category == "Clothing"

    def test_gender_derived(self):
        assert Product.model_validate(_raw(title="Women's Blazer")).gender == "Women"
        assert Product.model_validate(_raw(title="Cotton Hoodie")).gender == "Unisex"
        assert Product.model_validate(_raw(gender="Men")).gender == "Men"

    def test_searchable_text(self):
        p = Product.model_validate(_raw(category="Home", tags=["Cozy"]))
        assert p.searchable_text == "plain item b home cozy"


class TestProductValidation:

    @pytest.mark.parametrize("field,value", [("rating", 5.5), ("rating", -1), ("review_count", -3)])
    def test_rejects_out_of_range(self, field, value):
        with pytest.raises(ValidationError):
            Product.model_validate(_raw(**{field: value}))

    def test_frozen(self):
        p = Product.model_validate(_raw())
        with pytest.raises(ValidationError):
            p.title = "changed"


class TestReplies:

    def test_has_results(self, make_product):
        assert not RouterReply(text="t", step=0).has_results
        assert not RouterReply(text="t", step=0, categorized=CategorizedProducts()).has_results
        assert RouterReply(text="t", step=0, products=[make_product()]).has_results
        assert RouterReply(
            text="t", step=1, categorized=CategorizedProducts(trending_now=[make_product()])
        ).has_results
