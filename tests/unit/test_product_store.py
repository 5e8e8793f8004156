"""
Unit tests for the load-once product store and its Redis cache repo.
"""
import asyncio
import json
from unittest.mock import AsyncMock

import pytest

from shopassist.domain.data.seed_catalog import SEED_PRODUCTS
from shopassist.domain.errors import CatalogCacheError, CatalogNotLoadedError, EmptyCatalogError
from shopassist.domain.repositories.catalog_cache_repo import CatalogCacheRepo
from shopassist.domain.repositories.product_store import SOURCE_CACHE, SOURCE_SEED, ProductStore

KEY = "catalog:test"


def _load(store: ProductStore) -> ProductStore:
    return asyncio.run(store.load())


class TestCatalogCacheRepo:

    def test_miss_returns_none(self, fake_redis):
        repo = CatalogCacheRepo(fake_redis, key=KEY)
        assert asyncio.run(repo.get()) is None

    def test_set_then_get(self, fake_redis, make_product):
        repo = CatalogCacheRepo(fake_redis, key=KEY)
        products = [make_product("a", tags=["x"]), make_product("b")]
        asyncio.run(repo.set(products, ttl=60))

        assert fake_redis.ttls[KEY] == 60
        cached = asyncio.run(repo.get())
        assert cached == products

    @pytest.mark.parametrize("payload", ["not json", json.dumps({"a": 1}), json.dumps([{"title": "no id"}])])
    def test_corrupt_payload(self, fake_redis, payload):
        fake_redis.data[KEY] = payload
        with pytest.raises(CatalogCacheError):
            asyncio.run(CatalogCacheRepo(fake_redis, key=KEY).get())

    def test_backend_failure_is_wrapped(self, make_redis):
        repo = CatalogCacheRepo(make_redis(fail_on=("get", "set", "delete")), key=KEY)
        with pytest.raises(CatalogCacheError):
            asyncio.run(repo.get())
        with pytest.raises(CatalogCacheError):
            asyncio.run(repo.set([], ttl=1))
        with pytest.raises(CatalogCacheError):
            asyncio.run(repo.delete())


class TestProductStoreLoad:

    def test_empty_seed_is_fatal(self):
        with pytest.raises(EmptyCatalogError):
            ProductStore([])

    def test_not_loaded(self):
        store = ProductStore(SEED_PRODUCTS)
        assert not store.loaded
        assert len(store) == 0
        with pytest.raises(CatalogNotLoadedError):
            store.all()

    def test_seed_without_cache(self, seed_store):
        assert seed_store.loaded
        assert seed_store.source == SOURCE_SEED
        assert len(seed_store) == len(SEED_PRODUCTS) == 58
        assert seed_store.all()[0].product_id == "beauty_001"

    def test_cache_miss_seeds_and_writes_back(self, fake_redis):
        repo = CatalogCacheRepo(fake_redis, key=KEY)
        store = _load(ProductStore(SEED_PRODUCTS, cache=repo, cache_ttl=120))

        assert store.source == SOURCE_SEED
        assert KEY in fake_redis.data
        assert fake_redis.ttls[KEY] == 120
        assert len(json.loads(fake_redis.data[KEY])) == 58

    def test_cache_hit_skips_seed(self, fake_redis, make_product):
        repo = CatalogCacheRepo(fake_redis, key=KEY)
        asyncio.run(repo.set([make_product("cached_1"), make_product("cached_2")], ttl=60))

        store = _load(ProductStore(SEED_PRODUCTS, cache=repo))
        assert store.source == SOURCE_CACHE
        assert [p.product_id for p in store] == ["cached_1", "cached_2"]

    def test_corrupt_cache_falls_back_to_seed(self, fake_redis):
        fake_redis.data[KEY] = "{broken"
        store = _load(ProductStore(SEED_PRODUCTS, cache=CatalogCacheRepo(fake_redis, key=KEY)))
        assert store.source == SOURCE_SEED
        assert len(store) == 58

    def test_cache_down_falls_back_to_seed(self, make_redis):
        redis = make_redis(fail_on=("get", "set"))
        store = _load(ProductStore(SEED_PRODUCTS, cache=CatalogCacheRepo(redis, key=KEY)))
        assert store.source == SOURCE_SEED
        assert len(store) == 58
        assert redis.data == {}

    def test_duplicate_ids_keep_first(self):
        seed = [
            {"product_id": "x", "title": "First", "brand": "B", "price": "$1"},
            {"product_id": "y", "title": "Other", "brand": "B", "price": "$1"},
            {"product_id": "x", "title": "Second", "brand": "B", "price": "$1"},
        ]
        store = _load(ProductStore(seed))
        assert len(store) == 2
        assert store.get("x").title == "First"

    def test_get_by_id(self, seed_store):
        assert seed_store.get("beauty_004").title
        assert seed_store.get("missing") is None


class TestClearCache:

    def test_without_cache(self, seed_store):
        assert asyncio.run(seed_store.clear_cache()) is False

    def test_clears_key(self, fake_redis):
        store = _load(ProductStore(SEED_PRODUCTS, cache=CatalogCacheRepo(fake_redis, key=KEY)))
        assert asyncio.run(store.clear_cache()) is True
        assert KEY not in fake_redis.data
        # nothing left to delete
        assert asyncio.run(store.clear_cache()) is False
        # in-memory catalog is untouched
        assert len(store) == 58

    def test_backend_failure(self, fake_redis):
        store = _load(ProductStore(SEED_PRODUCTS, cache=CatalogCacheRepo(fake_redis, key=KEY)))
        fake_redis.fail_on.add("delete")
        assert asyncio.run(store.clear_cache()) is False

    def test_seed_written_once_with_ttl(self):
        repo = AsyncMock(spec=CatalogCacheRepo)
        repo.key = KEY
        repo.get.return_value = None

        store = _load(ProductStore(SEED_PRODUCTS, cache=repo, cache_ttl=5))

        repo.get.assert_awaited_once()
        repo.set.assert_awaited_once()
        products, = repo.set.await_args.args
        assert products == store.all()
        assert repo.set.await_args.kwargs == {"ttl": 5}
