from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "Weight Converter API"
    log_level: str = "INFO"

    # Server (used by `python -m weightconv`)
    host: str = "0.0.0.0"
    port: int = 8000

    # Rate limiting (per client IP)
    rate_limit_enabled: bool = True
    convert_rate_limit: str = "100/minute"

    # Display rounding for /convert results; None returns the raw value
    result_precision: Optional[int] = Field(default=None, ge=0, le=15)

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost",
        "http://127.0.0.1",
    ]


settings = Settings()
