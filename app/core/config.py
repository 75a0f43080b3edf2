from pydantic_settings import BaseSettings
from typing import Optional, List

class Settings(BaseSettings):
    PROJECT_NAME: str = "Course Catalog API"
    VERSION: str = "1.0.0"
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24  # 1 day

    # CORS
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:8080",
        "http://127.0.0.1:3000",
    ]

    # Database Configuration
    DATABASE_URL: str = "sqlite:///./course_catalog.db"
    TEST_DATABASE_URL: Optional[str] = None

    # Cache
    REDIS_URL: Optional[str] = None
    CACHE_ENABLED: bool = True
    CACHE_TTL: int = 300
    LIST_CACHE_TTL: int = 3600

    # List cache key names, one per catalog entity
    CACHE_KEY: str = "courses_cache"
    CACHE_MODULE_KEY: str = "modules_cache"
    CACHE_TOPIC_KEY: str = "topics_cache"
    CACHE_DEGREE_KEY: str = "degrees_cache"
    CACHE_INSTRUCTOR_KEY: str = "instructors_cache"
    CACHE_CAREER_RESOURCE_KEY: str = "career_resources_cache"
    CACHE_CAREER_RESOURCE_CATEGORY_KEY: str = "career_resource_categories_cache"
    CACHE_SUCCESS_STORY_KEY: str = "success_stories_cache"

    UPLOAD_DIR: str = "uploads"
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
