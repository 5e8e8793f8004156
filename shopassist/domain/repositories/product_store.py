from __future__ import annotations
import logging
import time
from typing import Iterator, Mapping, Optional, Sequence

from shopassist.domain.errors import CatalogCacheError, CatalogNotLoadedError, EmptyCatalogError
from shopassist.domain.models.product import Product
from shopassist.domain.repositories.catalog_cache_repo import CatalogCacheRepo

logger = logging.getLogger(__name__)

SOURCE_CACHE = "cache"
SOURCE_SEED = "seed"


class ProductStore:
    """
    In-memory, load-once product catalog.

    Built once at startup and handed to every consumer (routers, services,
    conversation sessions). After load() the collection never changes.

    Load order:
      1) cache hit  -> products from cache
      2) cache miss -> seed dataset, then write the seed back to cache
      3) any cache/decoding error -> seed dataset (warning only)
    """

    def __init__(
        self,
        seed: Sequence[Mapping],
        cache: Optional[CatalogCacheRepo] = None,
        cache_ttl: int = 24 * 3600,
    ):
        if not seed:
            raise EmptyCatalogError("seed catalog is empty; cannot start without products")
        self._seed = seed
        self._cache = cache
        self._cache_ttl = cache_ttl
        self._products: Optional[tuple[Product, ...]] = None
        self._by_id: dict[str, Product] = {}
        self.source: Optional[str] = None

    @property
    def loaded(self) -> bool:
        return self._products is not None

    def _seed_products(self) -> list[Product]:
        # A broken seed is a startup failure, so validation errors propagate.
        return [Product.model_validate(r) for r in self._seed]

    def _install(self, products: list[Product], source: str) -> None:
        by_id: dict[str, Product] = {}
        for p in products:
            if p.product_id in by_id:
                logger.warning("catalog duplicate product_id=%s source=%s (first kept)", p.product_id, source)
                continue
            by_id[p.product_id] = p
        self._products = tuple(by_id.values())
        self._by_id = by_id
        self.source = source

    async def load(self) -> "ProductStore":
        t0 = time.perf_counter()
        logger.info("catalog load start cache=%s", self._cache is not None)

        if self._cache is not None:
            try:
                cached = await self._cache.get()
            except CatalogCacheError as e:
                logger.warning("catalog cache read error, using seed err=%s", e)
                cached = None
            if cached:
                self._install(cached, SOURCE_CACHE)
                logger.info("catalog cache_hit items=%s time=%.3fs", len(self), time.perf_counter() - t0)
                return self

        self._install(self._seed_products(), SOURCE_SEED)
        logger.info("catalog seed_loaded items=%s", len(self))

        if self._cache is not None:
            try:
                await self._cache.set(self._products, ttl=self._cache_ttl)
                logger.debug("catalog cache_set key=%s ttl=%ds", self._cache.key, self._cache_ttl)
            except CatalogCacheError as e:
                logger.warning("catalog cache write error err=%s", e)

        logger.info("catalog load done source=%s items=%s time=%.3fs", self.source, len(self), time.perf_counter() - t0)
        return self

    async def clear_cache(self) -> bool:
        """Drop the cached catalog so the next load() re-seeds it."""
        if self._cache is None:
            return False
        try:
            deleted = await self._cache.delete()
        except CatalogCacheError as e:
            logger.warning("catalog cache clear error err=%s", e)
            return False
        logger.info("catalog cache cleared key=%s deleted=%s", self._cache.key, deleted)
        return bool(deleted)

    def all(self) -> tuple[Product, ...]:
        """Full collection in load order."""
        if self._products is None:
            raise CatalogNotLoadedError("ProductStore.load() has not completed")
        return self._products

    def get(self, product_id: str) -> Optional[Product]:
        self.all()
        return self._by_id.get(product_id)

    def __len__(self) -> int:
        return len(self._products or ())

    def __iter__(self) -> Iterator[Product]:
        return iter(self.all())
