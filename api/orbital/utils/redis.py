"""
Redis Connection & Catalog Caching Utilities
"""
import redis.asyncio as redis
from typing import Optional, Any, Union
import json
import logging

from fastapi import Request

from orbital.config import Settings

logger = logging.getLogger(__name__)


class NoOpCache:
    """A no-op cache that does nothing - used when Redis is unavailable"""
    async def get(self, key: str) -> None:
        return None

    async def setex(self, key: str, ttl: int, value: Any) -> bool:
        return True

    async def delete(self, *keys: str) -> int:
        return 0

    async def keys(self, pattern: str) -> list:
        return []

    async def ping(self) -> bool:
        return False

    async def close(self):
        pass


_noop_cache = NoOpCache()

CacheClient = Union[redis.Redis, NoOpCache]


async def init_redis(settings: Settings) -> CacheClient:
    """Connect to Redis, or fall back to the no-op cache"""
    if not settings.REDIS_URL:
        logger.info("REDIS_URL not set, catalog caching disabled")
        return _noop_cache

    logger.info("Initializing Redis connection...")
    client = redis.from_url(
        settings.REDIS_URL,
        encoding="utf-8",
        decode_responses=True,
        socket_connect_timeout=5,  # 5 second connection timeout
        socket_timeout=5,  # 5 second operation timeout
        retry_on_timeout=True,
    )
    # Test connection
    try:
        await client.ping()
        logger.info("Redis connection established")
    except Exception as e:
        logger.warning(f"Redis connection failed: {e}. Caching will be disabled.")
    return client


async def close_redis(client: CacheClient):
    """Close Redis connection"""
    if isinstance(client, NoOpCache):
        return
    logger.info("Closing Redis connection...")
    await client.aclose()
    logger.info("Redis connection closed")


class CatalogCache:
    """
    JSON cache for catalog list responses.
    Keys look like `catalog:<generation>:<entity>:<variant>`, where the
    generation belongs to the entity store the lists were read from, so
    entries written against another store are never served.
    """

    def __init__(self, client: CacheClient, ttl: int, generation: str):
        self.client = client
        self.ttl = ttl
        self.generation = generation

    def key(self, entity: str, variant: str = "all") -> str:
        return f"catalog:{self.generation}:{entity}:{variant}"

    async def get(self, key: str) -> Optional[Any]:
        """Get value from cache"""
        value = await self.client.get(key)
        if value:
            logger.debug(f"Cache HIT: {key}")
            return json.loads(value)
        logger.debug(f"Cache MISS: {key}")
        return None

    async def set(self, key: str, value: Any) -> bool:
        """Set value in cache with TTL"""
        return await self.client.setex(key, self.ttl, json.dumps(value, default=str))

    async def invalidate(self, entity: str) -> int:
        """Delete every cached variant of an entity list"""
        keys = await self.client.keys(self.key(entity, "*"))
        if keys:
            return await self.client.delete(*keys)
        return 0


async def get_redis(request: Request) -> CatalogCache:
    """
    Dependency that provides the catalog cache
    Usage: cache: CatalogCache = Depends(get_redis)

    Returns a no-op cache if Redis is unavailable (graceful degradation)
    """
    settings: Settings = request.app.state.settings
    client = request.app.state.cache
    generation = request.app.state.store.generation

    if isinstance(client, NoOpCache):
        return CatalogCache(client, settings.CACHE_TTL_CATALOG, generation)

    # Quick health check
    try:
        await client.ping()
        return CatalogCache(client, settings.CACHE_TTL_CATALOG, generation)
    except Exception as e:
        logger.warning(f"Redis ping failed: {e}, using no-op cache")
        return CatalogCache(_noop_cache, settings.CACHE_TTL_CATALOG, generation)
