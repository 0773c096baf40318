"""
Configuration management for Burger Book application.

Handles environment variables, local storage settings, and application configuration.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class Config:
    """Application configuration settings"""

    # Local storage settings
    storage_type: str = "sqlite"  # sqlite, memory
    storage_path: str = "burger_book.db"
    persist_user_recipes: bool = True

    # Recipe settings
    default_rating: float = 4.5
    popular_rating_threshold: float = 4.5

    # Cooking timer
    timer_tick_seconds: float = 1.0

    # Streamlit settings
    streamlit_port: int = 8501
    streamlit_host: str = "localhost"
    debug_mode: bool = False

    # Logging
    log_level: str = "INFO"
    log_file: str = "burger_book.log"

    @classmethod
    def from_environment(cls) -> 'Config':
        """Create configuration from environment variables"""
        return cls(
            # Storage
            storage_type=os.getenv("BURGER_STORAGE_TYPE", "sqlite").lower(),
            storage_path=os.getenv("BURGER_STORAGE_PATH", "burger_book.db"),
            persist_user_recipes=os.getenv("BURGER_PERSIST_USER_RECIPES", "true").lower() == "true",

            # Recipes
            default_rating=float(os.getenv("BURGER_DEFAULT_RATING", "4.5")),
            popular_rating_threshold=float(os.getenv("BURGER_POPULAR_THRESHOLD", "4.5")),

            # Timer
            timer_tick_seconds=float(os.getenv("BURGER_TIMER_TICK", "1.0")),

            # Streamlit
            streamlit_port=int(os.getenv("BURGER_PORT", "8501")),
            streamlit_host=os.getenv("BURGER_HOST", "localhost"),
            debug_mode=os.getenv("BURGER_DEBUG", "false").lower() == "true",

            # Logging
            log_level=os.getenv("BURGER_LOG_LEVEL", "INFO"),
            log_file=os.getenv("BURGER_LOG_FILE", "burger_book.log")
        )

    def ensure_directories(self):
        """Create necessary directories"""
        directories = [Path(self.log_file).parent]
        if self.storage_type == "sqlite" and self.storage_path != ":memory:":
            directories.append(Path(self.storage_path).parent)

        for directory in directories:
            if directory and directory != Path("."):
                Path(directory).mkdir(parents=True, exist_ok=True)

    def is_production(self) -> bool:
        """Check if running in production mode"""
        return not self.debug_mode and os.getenv("BURGER_ENVIRONMENT", "development") == "production"


# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get global configuration instance"""
    global _config
    if _config is None:
        _config = Config.from_environment()
        _config.ensure_directories()
    return _config


def reload_config():
    """Reload configuration from environment"""
    global _config
    _config = None
    return get_config()
