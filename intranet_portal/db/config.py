"""Configuration settings for the portal"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Record store backend (only the in-memory store exists)
    backend: str = "memory"

    # Intent classification (none or groq)
    intent_provider: str = "none"
    groq_api_key: str = ""
    groq_base_url: str = "https://api.groq.com/openai/v1"
    intent_model: str = "llama3-8b-8192"

    # Author of tasks created through the API
    current_user_id: str = "1"

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # App
    debug: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
