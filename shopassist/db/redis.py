# shopassist/db/redis.py
import logging
import redis.asyncio as redis
from redis.exceptions import RedisError

logger = logging.getLogger(__name__)

redis_client: redis.Redis | None = None


async def connect(url: str) -> redis.Redis | None:
    """
    Connect Redis if a URL is given.
    If not configured or unreachable, log a warning and keep running without cache.
    """
    global redis_client
    if not url:
        logger.warning("No REDIS_URL configured, skipping Redis connection")
        redis_client = None
        return None

    try:
        logger.info("Connecting to Redis at %s", url)
        redis_client = redis.from_url(url, decode_responses=True)
        await redis_client.ping()
        logger.info("Redis connection successful")
    except (RedisError, OSError, ValueError) as e:
        # ValueError: malformed URL (unknown scheme, bad port)
        logger.warning("Failed to connect to Redis, running without cache: %s", e)
        redis_client = None  # fallback: no cache
    return redis_client


async def disconnect():
    """Close the Redis connection if it exists."""
    global redis_client
    if redis_client:
        await redis_client.aclose()
        redis_client = None
        logger.info("Redis disconnected")


def get_redis() -> redis.Redis | None:
    """
    Redis getter. Returns None if Redis is not configured or unavailable.
    Callers handle the None case.
    """
    return redis_client
