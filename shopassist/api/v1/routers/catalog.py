from fastapi import APIRouter, Depends
from shopassist.api.deps import catalog_dep
from shopassist.api.v1.schemas.catalog import CacheClearOut

import logging
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.post("/cache/clear")
async def clear_catalog_cache(store = Depends(catalog_dep)):
    """
    Drop the cached catalog. The in-memory catalog is not reloaded; the next
    process start reads the seed again and re-populates the cache.
    """
    cleared = await store.clear_cache()
    logger.info("Response: clear_catalog_cache cleared=%s", cleared)
    return CacheClearOut(cleared=cleared)
