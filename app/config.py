"""
Application Configuration
Load settings from environment variables with validation
"""
import os
from typing import Optional


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name, "").strip()
    return float(raw) if raw else None


class Settings:
    """Application configuration from environment variables"""

    # MongoDB Configuration
    MONGODB_URI: str = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
    MONGODB_DB_NAME: str = os.getenv("MONGODB_DB_NAME", "bidboard")
    MONGODB_TLS: bool = os.getenv("MONGODB_TLS", "False").lower() == "true"

    # Application Configuration
    APP_NAME: str = "BidBoard Automation Backend"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = os.getenv("DEBUG", "True").lower() == "true"

    # API Configuration
    API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
    API_PORT: int = int(os.getenv("API_PORT", "8000"))
    API_KEY: str = os.getenv("API_KEY", "")  # empty = management routes are open

    # Automation webhook (n8n or similar)
    WEBHOOK_TIMEOUT_SECONDS: Optional[float] = _optional_float("WEBHOOK_TIMEOUT_SECONDS")
    DEFAULT_AGENT_NAME: str = os.getenv("DEFAULT_AGENT_NAME", "n8n Auto-Bid Agent")

    # Synthetic scoring ranges (inclusive)
    NEX_SCORE_MIN: int = int(os.getenv("NEX_SCORE_MIN", "70"))
    NEX_SCORE_MAX: int = int(os.getenv("NEX_SCORE_MAX", "100"))
    WIN_PROBABILITY_MIN: int = int(os.getenv("WIN_PROBABILITY_MIN", "60"))
    WIN_PROBABILITY_MAX: int = int(os.getenv("WIN_PROBABILITY_MAX", "100"))

    # Logging Configuration
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# Initialize settings
settings = Settings()

def validate_settings() -> bool:
    """
    Validate that all required settings are configured

    Returns:
        True if all required settings are present

    Raises:
        ValueError: If required settings are missing or inconsistent
    """
    required_keys = {
        "MONGODB_URI": settings.MONGODB_URI,
        "MONGODB_DB_NAME": settings.MONGODB_DB_NAME,
    }

    missing_keys = [key for key, value in required_keys.items() if not value]
    if missing_keys:
        raise ValueError(f"Missing required environment variables: {', '.join(missing_keys)}")

    if settings.NEX_SCORE_MIN > settings.NEX_SCORE_MAX:
        raise ValueError("NEX_SCORE_MIN must not exceed NEX_SCORE_MAX")
    if settings.WIN_PROBABILITY_MIN > settings.WIN_PROBABILITY_MAX:
        raise ValueError("WIN_PROBABILITY_MIN must not exceed WIN_PROBABILITY_MAX")

    return True
