"""Configuration settings for the converter service"""
import logging
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings.

    Priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values
    """

    # Service Identity
    SERVICE_NAME: str = "javax-bridge"
    SERVICE_PORT: int = 5001

    # Logging
    LOG_LEVEL: str = "INFO"

    # Conversion defaults
    DEFAULT_CLASS_NAME: str = "GeneratedClass"

    # File glue
    SCRIPT_EXTENSION: str = "javax"
    CLASS_EXTENSION: str = "java"
    SCRIPT_DIR_NAME: str = "javax"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()


def log_settings():
    """Log the effective configuration."""
    logger.info(f"Service: {settings.SERVICE_NAME}")
    logger.info(f"Port: {settings.SERVICE_PORT}")
    logger.info(f"Default class name: {settings.DEFAULT_CLASS_NAME}")
    logger.info(f"Script files: *.{settings.SCRIPT_EXTENSION} (written to ./{settings.SCRIPT_DIR_NAME}/)")
