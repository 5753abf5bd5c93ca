from pydantic_settings import BaseSettings
from typing import List, Literal


class Settings(BaseSettings):
    """
    Application configuration settings.
    Loads from environment variables or .env file.
    """

    # Application
    APP_NAME: str = "Connect Specs API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database (MongoDB)
    DATABASE_URL: str = "mongodb://localhost:27017/connect_specs"
    DATABASE_NAME: str = ""

    # Labor estimate adapter
    # Options: live, mock
    # - live: VehicleDatabases repairs API with mock fallback
    # - mock: Static labor hours only, no external call
    LABOR_ESTIMATE_ADAPTER_TYPE: Literal["live", "mock"] = "live"

    # VehicleDatabases API
    VEHICLE_DB_API_KEY: str = ""
    VEHICLE_DB_BASE_URL: str = "https://api.vehicledatabases.com/v1"
    VEHICLE_DB_TIMEOUT: float = 10.0

    # Frontend origins allowed by CORS
    CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:3000",
    ]

    class Config:
        env_file = ".env"
        case_sensitive = True


# Global settings instance
settings = Settings()
