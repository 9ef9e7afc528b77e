"""Configuration settings for Blog GraphQL."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    debug: bool = False

    # GraphQL
    graphql_path: str = "/graphql"
    graphiql: bool = True

    # Store
    seed_demo_data: bool = True

    # Service
    service_name: str = "blog-graphql"
    service_version: str = "0.1.0"
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
