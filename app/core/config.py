"""
Configuration module - centralized settings for the entire application.
Uses pydantic-settings to load values from environment variables and .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    
    Pydantic-settings automatically:
    1. Reads from environment variables (highest priority)
    2. Falls back to .env file values
    3. Uses default values if neither exists
    
    To override in production, set environment variables:
        export LOG_LEVEL=WARNING
        export ACCESSIBILITY_MAX_INPUT_CHARS=1000000
    """
    
    # ---------------------------------------------------------------------------
    # PYDANTIC SETTINGS CONFIGURATION
    # ---------------------------------------------------------------------------
    model_config = SettingsConfigDict(
        env_file=".env",        # Load from .env file in project root
        env_file_encoding="utf-8",
        extra="ignore",         # Ignore extra env vars not defined here
    )

    # ---------------------------------------------------------------------------
    # APPLICATION SETTINGS
    # ---------------------------------------------------------------------------
    # APP_NAME: Display name shown in API docs and logging
    APP_NAME: str = "Web Accessibility Checker"
    
    # DEBUG: Enable debug mode (forces DEBUG log level)
    DEBUG: bool = False

    # LOG_LEVEL: Root log level name (DEBUG, INFO, WARNING, ERROR)
    LOG_LEVEL: str = "INFO"

    # ---------------------------------------------------------------------------
    # ACCESSIBILITY ANALYSIS SETTINGS
    # ---------------------------------------------------------------------------
    # ACCESSIBILITY_MAX_INPUT_CHARS: Largest markup accepted by the HTTP API
    # - Analysis is synchronous, so huge inputs hold a worker thread
    # - Requests above this size get 413
    ACCESSIBILITY_MAX_INPUT_CHARS: int = 500_000
    
    # ACCESSIBILITY_INCLUDE_REPORT: Add the plain-text report to API responses
    ACCESSIBILITY_INCLUDE_REPORT: bool = False


# ---------------------------------------------------------------------------
# GLOBAL SETTINGS INSTANCE
# ---------------------------------------------------------------------------
# Usage: from app.core.config import settings
settings = Settings()
