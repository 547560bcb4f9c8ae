"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    openai_api_key: str
    openai_model: str = "gpt-4-0613"
    openai_timeout_seconds: float = 30.0
    notification_recipient: str
    email_api_key: str
    email_sender: str
    email_base_url: str = "https://api.resend.com"
    form_id: str
    form_item_id: str
    forms_access_token: str
    supabase_url: str
    supabase_service_key: str
    trigger_token: str
    timezone: str = "UTC"
    date_format: str = "%m/%d/%Y"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
