from functools import lru_cache
from typing import List, Literal
import os
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["development", "production"]

def _env_file_for(app_env: EnvName) -> str:
    return ".env.development" if app_env == "development" else ".env.production"

class Settings(BaseSettings):

    # Core
    APP_ENV: EnvName = "development"
    APP_NAME: str = "InventoryTracker"
    DEBUG: bool = False
    GIT_SHA: str = "unknown"

    # Mongo
    MONGO_URI: str  # required
    MONGO_DB: str = "inventory"
    MONGO_TLS: bool = False  # Atlas / SRV deployments need True

    # Auth (token issuance + verification)
    JWT_SECRET: str  # required
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRES_MINUTES: int = 24 * 60  # 24 hours
    password_min_length: int = 6

    # Products
    SKU_MAX_ATTEMPTS: int = 10          # bounded retry on sku collision
    PUBLIC_PRODUCT_READS: bool = False  # GET /products/{id} ignores ownership when True

    # CORS (CSV), e.g. ALLOWED_ORIGINS="https://inventory.example.com,http://localhost:5173"
    ALLOWED_ORIGINS: str = ""

    # API
    api_prefix: str = "/api"

    # pydantic-settings config will be set dynamically in the factory below
    model_config = SettingsConfigDict(env_file=None, case_sensitive=True, extra="ignore")

    @property
    def allowed_origins(self) -> List[str]:
        origins = [o.strip().rstrip("/") for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]
        return origins or ["http://localhost:5173", "http://localhost:3000"]

@lru_cache
def get_settings() -> Settings:
    """
    Factory that chooses the right .env file based on APP_ENV.
    Cache makes it cheap to inject via FastAPI dependencies.
    """
    app_env: EnvName = os.getenv("APP_ENV", "development")  # earliest switch
    env_file = _env_file_for(app_env)
    return Settings(
                _env_file=env_file,  # load .env.development or .env.production
                _env_file_encoding="utf-8"
    )
