"""Cache key layout and TTL settings for catalog list snapshots"""
import hashlib
import json
from typing import Any, Dict, Optional

from app.core.config import settings

UNFILTERED = "all"

# Cache TTL (Time To Live) configurations in seconds
CACHE_TTL = {
    "entity_list": settings.LIST_CACHE_TTL,   # 1 hour
}

# Base key names per catalog entity; each can be overridden from the environment
LIST_CACHE_KEYS = {
    "course": settings.CACHE_KEY,
    "module": settings.CACHE_MODULE_KEY,
    "topic": settings.CACHE_TOPIC_KEY,
    "degree": settings.CACHE_DEGREE_KEY,
    "instructor": settings.CACHE_INSTRUCTOR_KEY,
    "career_resource": settings.CACHE_CAREER_RESOURCE_KEY,
    "career_resource_category": settings.CACHE_CAREER_RESOURCE_CATEGORY_KEY,
    "success_story": settings.CACHE_SUCCESS_STORY_KEY,
}


def filter_digest(filters: Optional[Dict[str, Any]]) -> str:
    if not filters:
        return UNFILTERED
    canonical = json.dumps(filters, sort_keys=True, separators=(",", ":"), default=str)
    return hashlib.md5(canonical.encode()).hexdigest()


def list_cache_key(base: str, filters: Optional[Dict[str, Any]], skip: int, limit: int) -> str:
    """<base>:<filter-digest>:<skip>:<limit>"""
    return f"{base}:{filter_digest(filters)}:{skip}:{limit}"


def list_cache_pattern(base: str) -> str:
    return f"{base}:*"


def is_unfiltered_key(base: str, key: str) -> bool:
    return key.startswith(f"{base}:{UNFILTERED}:")
