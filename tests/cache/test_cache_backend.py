import time
import pytest

from app.core.cache import CacheManager, MemoryCacheBackend
from app.core.cache_config import filter_digest, is_unfiltered_key, list_cache_key, list_cache_pattern


@pytest.mark.asyncio
async def test_memory_backend_round_trips_json():
    backend = MemoryCacheBackend()
    await backend.set("courses_cache:all:0:10", [{"id": "abc", "views": 1}], ttl=60)

    cached = await backend.get("courses_cache:all:0:10")

    assert cached == [{"id": "abc", "views": 1}]
    assert await backend.exists("courses_cache:all:0:10")


@pytest.mark.asyncio
async def test_memory_backend_expires_entries():
    backend = MemoryCacheBackend()
    await backend.set("k", "v", ttl=60)
    backend._cache["k"]["expiry"] = time.time() - 1

    assert await backend.get("k") is None
    assert await backend.keys("*") == []


@pytest.mark.asyncio
async def test_keys_and_delete_pattern_are_scoped_to_one_entity():
    manager = CacheManager(MemoryCacheBackend())
    await manager.set("courses_cache:all:0:10", [1], ttl=60)
    await manager.set("courses_cache:abc123:0:10", [2], ttl=60)
    await manager.set("degrees_cache:all:0:10", [3], ttl=60)

    assert sorted(await manager.keys("courses_cache:*")) == ["courses_cache:abc123:0:10", "courses_cache:all:0:10"]

    deleted = await manager.delete_pattern(list_cache_pattern("courses_cache"))

    assert deleted == 2
    assert await manager.get("degrees_cache:all:0:10") == [3]


def test_list_cache_key_encodes_filter_and_page():
    assert list_cache_key("courses_cache", {}, 0, 10) == "courses_cache:all:0:10"
    assert list_cache_key("courses_cache", None, 20, 5) == "courses_cache:all:20:5"

    filtered = list_cache_key("courses_cache", {"organization": "acme"}, 0, 10)
    assert filtered != "courses_cache:all:0:10"
    assert not is_unfiltered_key("courses_cache", filtered)
    assert is_unfiltered_key("courses_cache", "courses_cache:all:0:10")


def test_filter_digest_ignores_key_order():
    assert filter_digest({"a": 1, "b": [1, 2]}) == filter_digest({"b": [1, 2], "a": 1})
    assert filter_digest({"a": 1}) != filter_digest({"a": 2})
