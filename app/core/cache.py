import json
import asyncio
import fnmatch
from abc import ABC, abstractmethod
from typing import Any, Optional, Dict, List
import time
import logging

from app.core.config import settings

logger = logging.getLogger(__name__)

class CacheBackend(ABC):
    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        pass

    @abstractmethod
    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        pass

    @abstractmethod
    async def delete(self, key: str) -> bool:
        pass

    @abstractmethod
    async def keys(self, pattern: str) -> List[str]:
        pass

    @abstractmethod
    async def clear(self) -> bool:
        pass

    @abstractmethod
    async def exists(self, key: str) -> bool:
        pass

    async def close(self) -> None:
        pass

class MemoryCacheBackend(CacheBackend):
    """Process-local backend. Values go through a JSON round trip so callers
    see the same shapes the Redis backend would hand back."""

    def __init__(self):
        self._cache: Dict[str, Dict] = {}
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> Optional[Any]:
        async with self._lock:
            await self._cleanup_expired()
            item = self._cache.get(key)
            if item and (item.get("expiry", 0) == 0 or time.time() < item["expiry"]):
                return json.loads(item["value"])
            elif key in self._cache:
                del self._cache[key]
            return None

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        async with self._lock:
            expiry = time.time() + (ttl or settings.CACHE_TTL) if ttl != 0 else 0
            self._cache[key] = {
                "value": json.dumps(value, default=str),
                "expiry": expiry,
                "created_at": time.time()
            }
            return True

    async def delete(self, key: str) -> bool:
        async with self._lock:
            return self._cache.pop(key, None) is not None

    async def keys(self, pattern: str) -> List[str]:
        async with self._lock:
            await self._cleanup_expired()
            return [key for key in self._cache if fnmatch.fnmatch(key, pattern)]

    async def clear(self) -> bool:
        async with self._lock:
            self._cache.clear()
            return True

    async def exists(self, key: str) -> bool:
        return await self.get(key) is not None

    async def _cleanup_expired(self):
        current_time = time.time()
        expired_keys = [
            key for key, item in self._cache.items()
            if item.get("expiry", 0) > 0 and current_time >= item["expiry"]
        ]
        for key in expired_keys:
            del self._cache[key]

class RedisCacheBackend(CacheBackend):
    def __init__(self, redis_url: str):
        import redis.asyncio as redis
        self.redis = redis.from_url(redis_url, decode_responses=True)

    def _serialize(self, value: Any) -> str:
        return json.dumps(value, default=str)

    def _deserialize(self, value: str) -> Any:
        try:
            return json.loads(value)
        except (json.JSONDecodeError, TypeError):
            return value

    async def get(self, key: str) -> Optional[Any]:
        try:
            value = await self.redis.get(key)
            return self._deserialize(value) if value else None
        except Exception as e:
            logger.error(f"Redis GET error for key {key}: {e}")
            return None

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        try:
            serialized = self._serialize(value)
            if ttl is None:
                ttl = settings.CACHE_TTL
            if ttl == 0:
                await self.redis.set(key, serialized)
            else:
                await self.redis.setex(key, ttl, serialized)
            return True
        except Exception as e:
            logger.error(f"Redis SET error for key {key}: {e}")
            return False

    async def delete(self, key: str) -> bool:
        try:
            result = await self.redis.delete(key)
            return result > 0
        except Exception as e:
            logger.error(f"Redis DELETE error for key {key}: {e}")
            return False

    async def keys(self, pattern: str) -> List[str]:
        try:
            return [key async for key in self.redis.scan_iter(match=pattern)]
        except Exception as e:
            logger.error(f"Redis SCAN error for pattern {pattern}: {e}")
            return []

    async def clear(self) -> bool:
        try:
            await self.redis.flushdb()
            return True
        except Exception as e:
            logger.error(f"Redis CLEAR error: {e}")
            return False

    async def exists(self, key: str) -> bool:
        try:
            return await self.redis.exists(key) > 0
        except Exception as e:
            logger.error(f"Redis EXISTS error for key {key}: {e}")
            return False

    async def close(self) -> None:
        await self.redis.aclose()

def create_cache_backend() -> CacheBackend:
    if settings.REDIS_URL:
        try:
            logger.info("Initializing Redis cache backend")
            return RedisCacheBackend(settings.REDIS_URL)
        except Exception as e:
            logger.error(f"Redis connection failed: {e}, falling back to memory cache")

    logger.info("Using in-memory cache backend")
    return MemoryCacheBackend()

cache_backend = create_cache_backend()

class CacheManager:
    def __init__(self, backend: CacheBackend):
        self.backend = backend

    async def get(self, key: str) -> Optional[Any]:
        if not settings.CACHE_ENABLED:
            return None
        return await self.backend.get(key)

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        if not settings.CACHE_ENABLED:
            return False
        return await self.backend.set(key, value, ttl)

    async def delete(self, key: str) -> bool:
        return await self.backend.delete(key)

    async def keys(self, pattern: str) -> List[str]:
        return await self.backend.keys(pattern)

    async def delete_pattern(self, pattern: str) -> int:
        count = 0
        for key in await self.backend.keys(pattern):
            if await self.backend.delete(key):
                count += 1
        return count

    async def clear(self) -> bool:
        return await self.backend.clear()

    async def close(self) -> None:
        await self.backend.close()

cache = CacheManager(cache_backend)
