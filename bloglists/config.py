"""Process configuration via environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings loaded from the environment (``BLOGLISTS_`` prefix)."""

    # App
    debug: bool = False
    environment: str = "development"

    # CORS for the preview API
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:8000",
    ]

    # Defaults applied by the preview surfaces when a request omits them
    default_blog_directory: str = "./blog"
    default_blog_object: str = "post"

    model_config = {"env_file": ".env", "env_prefix": "BLOGLISTS_", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
