# shopassist/core/lifespan.py
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from shopassist.db import redis as r
from shopassist.core.config import get_settings
from shopassist.domain.data.seed_catalog import SEED_PRODUCTS
from shopassist.domain.repositories.catalog_cache_repo import CatalogCacheRepo
from shopassist.domain.repositories.product_store import ProductStore
from shopassist.domain.services.conversation import ConversationSessions

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # --- Startup ---
    # Redis is optional: without it the catalog is loaded from the seed every start
    client = await r.connect(settings.REDIS_URL)
    cache = CatalogCacheRepo(client, key=settings.catalog_cache_key) if client is not None else None

    store = ProductStore(SEED_PRODUCTS, cache=cache, cache_ttl=settings.catalog_cache_ttl)
    await store.load()

    app.state.catalog = store
    app.state.sessions = ConversationSessions(
        store, result_limit=settings.chat_result_limit, max_sessions=settings.chat_max_sessions
    )
    logger.info("Catalog ready: %s products from %s", len(store), store.source)

    # Application runs
    yield

    # --- Shutdown ---
    await r.disconnect()
