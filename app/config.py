from functools import lru_cache

from pydantic_settings import BaseSettings

# Sentinel stored in ai_generations_limit for plans without a generation cap
UNLIMITED_GENERATIONS = 999999


class Settings(BaseSettings):
    # Database
    db_name: str = "siteforge_db"
    db_user: str = "postgres"
    db_password: str = ""
    db_host: str = "localhost"
    db_port: str = "5432"
    database_url: str = ""  # Overrides the DB_* fields when set

    # Environment
    env: str = "local"

    # Auth
    jwt_secret: str = "siteforgeai-jwt-secret-key"
    jwt_algorithm: str = "HS256"
    jwt_expires_days: int = 7
    bcrypt_rounds: int = 10

    # AI quota
    free_ai_generations: int = 3
    paid_ai_generations: int = UNLIMITED_GENERATIONS

    # AI provider
    openai_api_key: str = ""
    openai_model: str = "gpt-4o"
    openai_timeout_seconds: float = 120.0

    # CORS
    cors_origins: list[str] = ["*"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"
        frozen = True

    @property
    def async_database_url(self) -> str:
        if self.database_url:
            return self.database_url
        port = self.db_port if self.db_port and self.db_port != "None" else "5432"
        return (
            f"postgresql+asyncpg://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{port}/{self.db_name}"
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
