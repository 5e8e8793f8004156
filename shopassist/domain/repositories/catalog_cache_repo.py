from typing import Optional, Iterable
from pydantic import ValidationError
from redis.asyncio import Redis
from redis.exceptions import RedisError
from shopassist.domain.errors import CatalogCacheError
from shopassist.domain.models.product import Product
import json

class CatalogCacheRepo:
    """
    Adapter for caching the product catalog in Redis (or any cache backend
    exposing async get/set/delete).
    Only cache access lives here; catalog rules stay in ProductStore.
    """
    def __init__(self, redis: Redis, key: str):
        """
        Args:
            redis: Redis client instance
            key: Cache key holding the serialized catalog (e.g. 'catalog:products')
        """
        self.cache = redis
        self.key = key

    async def get(self) -> Optional[list[Product]]:
        """
        Retrieve the catalog from cache.
        Returns None if the key is absent; raises CatalogCacheError if the
        backend fails or the payload does not decode into products.
        """
        try:
            raw = await self.cache.get(self.key)
        except (RedisError, OSError) as e:
            raise CatalogCacheError(f"cache read failed for {self.key}: {e}") from e
        if not raw:
            return None
        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise TypeError(f"expected a list, got {type(data).__name__}")
            # Validate and convert each cached dict to a Product instance
            return [Product.model_validate(x) for x in data]
        except (ValueError, TypeError, ValidationError) as e:
            raise CatalogCacheError(f"cache payload for {self.key} is corrupt: {e}") from e

    async def set(self, products: Iterable[Product], ttl: int) -> None:
        """
        Store the catalog under the configured key with a TTL (expiration).
        """
        payload = [p.model_dump() for p in products]
        try:
            await self.cache.set(self.key, json.dumps(payload), ex=ttl)
        except (RedisError, OSError) as e:
            raise CatalogCacheError(f"cache write failed for {self.key}: {e}") from e

    async def delete(self) -> int:
        """
        Remove the cached catalog. Returns the number of keys deleted (0 or 1).
        """
        try:
            return await self.cache.delete(self.key)
        except (RedisError, OSError) as e:
            raise CatalogCacheError(f"cache delete failed for {self.key}: {e}") from e
