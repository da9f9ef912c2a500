"""Pydantic Settings for the salon booking client."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    # Backend API
    api_base_url: str = "http://localhost:8000/api"
    api_token: str = ""
    request_timeout: float = Field(default=30.0, gt=0)

    # Salon (scope) selected when none is given explicitly
    default_salon_id: str = ""

    # Uploads
    upload_max_bytes: int = Field(default=10 * 1024 * 1024, ge=1024, description="Largest accepted concern photo")

    # Notifications
    notification_history_size: int = Field(default=20, ge=1)

    # Operational
    log_level: str = "INFO"
    log_json: bool = False


settings = Settings()
