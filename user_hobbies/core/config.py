# Standard library imports
import os
from typing import Final, List, Optional


STORAGE_BACKENDS: Final = ("mongo", "memory")


class Settings:
    """
    Application settings loaded from environment variables.
    
    All settings are read once, with defaults suitable for a local MongoDB.
    """
    
    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "livello")
        self.storage_backend: Final[str] = os.getenv("STORAGE_BACKEND", "mongo").strip().lower()
        
        # Server Configuration
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "5000"))
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]
        
        if self.storage_backend not in STORAGE_BACKENDS:
            raise ValueError(
                f"Unsupported STORAGE_BACKEND '{self.storage_backend}'. "
                f"Expected one of: {', '.join(STORAGE_BACKENDS)}"
            )


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)
    
    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
