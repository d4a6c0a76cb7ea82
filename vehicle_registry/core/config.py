# vehicle_registry/core/config.py

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # --- Server Config ---
    APP_NAME: str = "User & Vehicle Registry API"
    VERSION: str = "1.0.0"
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    ENVIRONMENT: str = "production"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["*"]

    # --- Database Config ---
    DATABASE_URL: str
    DB_POOL_MIN_SIZE: int = 1
    DB_POOL_MAX_SIZE: int = 10
    DB_CONNECT_TIMEOUT: float = 5
    DB_COMMAND_TIMEOUT: float = 45

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    @property
    def asyncpg_url(self) -> str:
        return self.DATABASE_URL.replace("postgresql+asyncpg://", "postgresql://", 1)

    @property
    def sqlalchemy_url(self) -> str:
        # alembic runs on the sync driver
        return self.asyncpg_url.replace("postgresql://", "postgresql+psycopg2://", 1)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
