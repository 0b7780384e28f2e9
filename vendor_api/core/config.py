
from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "Vendor API"
    app_env: str = "development"
    app_port: int = 8000
    frontend_url: str = "http://localhost:3000"

    # Database (SQLite via aiosqlite for local dev)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./vendor_api.db",
        alias="DATABASE_URL",
    )
    auto_create_schema: bool = Field(default=True, alias="AUTO_CREATE_SCHEMA")
    seed_demo_data: bool = Field(default=True, alias="SEED_DEMO_DATA")

    # Redis read-through cache
    redis_url: str = Field(default="redis://localhost:6379/0", alias="REDIS_URL")
    cache_ttl_seconds: int = Field(
        default=600, alias="CACHE_TTL_SECONDS",
    )  # 10 minutes on every entry

    # JWT access tokens
    jwt_secret_key: str = Field(
        default="change-me-in-production-0123456789abcdef",
        alias="JWT_SECRET_KEY",
    )
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(
        default=30, alias="ACCESS_TOKEN_EXPIRE_MINUTES",
    )

    # Accounts created by the database initializer
    admin_email: str = Field(default="admin@example.com", alias="ADMIN_EMAIL")
    admin_password: str = Field(default="Admin123!", alias="ADMIN_PASSWORD")
    manager_email: str = Field(default="manager@example.com", alias="MANAGER_EMAIL")
    manager_password: str = Field(default="Manager123!", alias="MANAGER_PASSWORD")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def docs_enabled(self) -> bool:
        """Swagger / ReDoc are served only in development."""
        return self.app_env == "development"

settings = Settings()
