"""
Configuration module for the OpenAI Chat Relay application.
Handles environment variables and application settings.
"""
import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration class."""

    # API Configuration
    OPENAI_API_URL: str = os.getenv("OPENAI_API_URL", "https://api.openai.com/v1/chat/completions")

    # Upstream generation parameters (not caller-configurable)
    OPENAI_MODEL: str = "gpt-4o-mini"
    MAX_TOKENS: int = 500
    TEMPERATURE: float = 0.7

    # Application Settings
    APP_TITLE: str = "OpenAI Chat Relay"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_PREVIEW_CHARS: int = 100

    # Timeouts (in seconds)
    UPSTREAM_TIMEOUT: float = float(os.getenv("OPENAI_TIMEOUT_SECONDS", "30"))

    # Connection pool
    MAX_UPSTREAM_CONNECTIONS: int = 100

    # CORS
    CORS_HEADERS = {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
        "Access-Control-Allow-Methods": "POST, OPTIONS",
    }

    @classmethod
    def get_openai_api_key(cls) -> str:
        """Read the upstream credential from the environment (per request, never cached)."""
        return os.getenv("OPENAI_API_KEY", "")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and print warnings for missing API keys."""
        if not cls.get_openai_api_key():
            print("   WARNING: OPENAI_API_KEY not found in .env file")
            print("   Every chat request will fail with 'API key not configured on server' until it is set.")

Config.validate()
