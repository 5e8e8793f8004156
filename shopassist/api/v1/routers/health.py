# shopassist/api/v1/routers/health.py
import time
import subprocess
from fastapi import APIRouter, Depends
from redis.exceptions import RedisError
from shopassist.api.deps import catalog_dep, redis_dep
from shopassist.core.config import get_settings

router = APIRouter()
START_TIME = time.time()


def _git_sha(short: bool = True) -> str:
    try:
        cmd = ["git", "rev-parse", "--short" if short else "HEAD"]
        return subprocess.check_output(cmd, stderr=subprocess.DEVNULL).decode().strip()
    except (OSError, subprocess.CalledProcessError):
        return "unknown"


@router.get("/health")
async def health(store = Depends(catalog_dep), redis = Depends(redis_dep)):
    """
    Tolerant health check:
    - catalog must be loaded and non-empty
    - Redis 'skipped' if not configured
    - exposes basic info + global status
    """
    settings = get_settings()
    checks: dict[str, object] = {
        "app_name": settings.APP_NAME,
        "env": settings.APP_ENV,
        "debug": settings.DEBUG,
        "version": settings.GIT_SHA if settings.GIT_SHA != "unknown" else _git_sha(),
        "uptime_seconds": int(time.time() - START_TIME),
    }

    # --- Catalog ---
    checks["catalog"] = "ok" if store.loaded and len(store) > 0 else "error: empty"
    checks["catalog_size"] = len(store)
    checks["catalog_source"] = store.source

    # --- Redis (tolerant) ---
    try:
        if redis:
            await redis.ping()
            checks["redis"] = "ok"
        else:
            checks["redis"] = "skipped"
    except (RedisError, OSError) as e:
        checks["redis"] = f"error: {e}"

    def _is_ok(v):
        return v in ("ok", "skipped")

    health_keys = ("catalog", "redis")
    status = "ok" if all(_is_ok(checks.get(k)) for k in health_keys) else "error"

    return {"status": status, "checks": checks, "timestamp": int(time.time())}
