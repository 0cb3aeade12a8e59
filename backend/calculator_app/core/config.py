from pydantic_settings import BaseSettings
from pydantic import Field, validator
import logging
import sys
import os
from pathlib import Path
from typing import List, Optional
from .exceptions import ConfigurationError


class Settings(BaseSettings):
    # Input Settings
    max_expression_length: int = Field(
        240, description="Maximum number of characters in an expression", gt=0
    )

    # History Settings
    history_file: str = Field(
        "data/calculator_history.json",
        description="JSON file backing the history key-value store",
    )
    history_key: str = Field(
        "calculator.history.v1", description="Versioned key the history lives under"
    )
    history_limit: int = Field(
        20, description="Number of most recent evaluations kept", gt=0
    )

    # API Settings
    cors_origins: List[str] = Field(
        default_factory=lambda: ["*"], description="Origins allowed by CORS"
    )

    # Logging Settings
    log_level: str = Field("INFO", description="Logging level")
    log_file: Optional[str] = Field("logs/calculator.log", description="Log file path")

    @validator("log_level")
    def validate_log_level(cls, v):
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ConfigurationError(
                f"Invalid log level. Must be one of {valid_levels}"
            )
        return v.upper()

    class Config:
        env_file = os.getenv("ENV_FILE", ".env")
        env_prefix = "CALCULATOR_"
        extra = "ignore"


settings = Settings()


def setup_logging():
    """Configure logging with file and console handlers."""
    try:
        # Get logging level from settings
        log_level = getattr(logging, settings.log_level)

        # Configure logging
        handlers = [logging.StreamHandler(sys.stdout)]

        if settings.log_file:
            log_path = Path(settings.log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(log_path))

        logging.basicConfig(
            level=log_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            handlers=handlers,
        )

        logger = logging.getLogger(__name__)
        logger.info(f"Logging configured with level: {settings.log_level}")
        return logger

    except Exception as e:
        raise ConfigurationError(f"Failed to setup logging: {str(e)}")


logger = setup_logging()
