"""
Configuration management for the Postboard API
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_reload: bool = False
    cors_origins: list[str] = ["*"]

    # Transport
    graphiql_enabled: bool = True
    websocket_enabled: bool = True

    # Schema
    schema_version: str = "1.2.3"

    # Derived field sources
    avatar_base_url: str = "https://picsum.photos"
    default_post_image_url: str = "https://picsum.photos/600/400"

    # Legacy behaviour: a comment's author is taken from its parent post
    comment_author_from_post: bool = False

    # Seed data (built-in sample data when unset)
    seed_data_path: str | None = None

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "POSTBOARD_"
        case_sensitive = False


# Global settings instance
settings = Settings()
