from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

# Range of the unsigned 256-bit accounting unit.
UINT256_MAX = 2**256 - 1


class Settings(BaseSettings):
    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = True

    # API Settings
    PROJECT_NAME: str = "Host Ledger API"
    API_V1_STR: str = "/api/v1"
    PROJECT_VERSION: str = "0.1.0"
    DESCRIPTION: str = "Invoice ledger between hosts and guests"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Ledger
    ADMIN_IDENTITY: str = "admin"
    MAX_AMOUNT: int = UINT256_MAX

    # Logging
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]

    # JWT
    SECRET_KEY: str = "change-this-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env"
    )

settings = Settings()
