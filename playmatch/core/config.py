"""
Core Configuration Module

Centralizes environment configuration for the match-proposal service.
Provides a singleton Settings object with defaults for the matching engine.

Usage:
    from playmatch.core.config import settings

    print(settings.APP_ENV)
    print(settings.PROPOSAL_LIMIT_DEFAULT)
"""

import os
from typing import List, Optional

from playmatch.constants.thresholds import DEFAULT_PROPOSAL_LIMIT, DEFAULT_SLOT_GRANULARITY_MINUTES


class Settings:
    """
    Application settings loaded from environment variables.

    Scoring weights and thresholds are NOT settings - they live in
    playmatch.constants.thresholds so proposals stay comparable across deploys.
    """

    # ==================== Application Settings ====================

    @property
    def APP_ENV(self) -> str:
        """Application environment: dev, staging, production"""
        return os.getenv("APP_ENV", "dev")

    @property
    def LOG_LEVEL(self) -> str:
        """Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL"""
        return os.getenv("LOG_LEVEL", "INFO")

    # ==================== Matching Settings ====================

    @property
    def PROPOSAL_LIMIT_DEFAULT(self) -> int:
        """Default number of proposals returned per run"""
        return int(os.getenv("PROPOSAL_LIMIT_DEFAULT", str(DEFAULT_PROPOSAL_LIMIT)))

    @property
    def PROPOSAL_TIMEZONE(self) -> str:
        """IANA timezone used to turn a (date, minutes) slot into an epoch timestamp"""
        return os.getenv("PROPOSAL_TIMEZONE", "UTC")

    @property
    def MATCH_MAX_WORKERS(self) -> int:
        """Worker threads for candidate scoring (1 = sequential)"""
        return int(os.getenv("MATCH_MAX_WORKERS", "1"))

    @property
    def SLOT_GRANULARITY_MINUTES(self) -> int:
        """Default step for fixed-length slot enumeration"""
        return int(os.getenv("SLOT_GRANULARITY_MINUTES", str(DEFAULT_SLOT_GRANULARITY_MINUTES)))

    # ==================== CORS Settings ====================

    @property
    def CORS_ORIGINS(self) -> List[str]:
        """Allowed CORS origins"""
        origins_str = os.getenv("CORS_ORIGINS", "*")
        if origins_str == "*":
            return ["*"]
        return [origin.strip() for origin in origins_str.split(",")]

    @property
    def CORS_ALLOW_CREDENTIALS(self) -> bool:
        """Allow credentials in CORS requests"""
        return os.getenv("CORS_ALLOW_CREDENTIALS", "true").lower() == "true"


# ==================== Singleton Instance ====================

_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the singleton Settings instance.

    Returns:
        Settings object with configuration values

    Example:
        >>> from playmatch.core.config import get_settings
        >>> settings = get_settings()
        >>> print(settings.APP_ENV)
        'dev'
    """
    global _settings

    if _settings is None:
        _settings = Settings()

    return _settings


# Convenience singleton for direct import
settings = get_settings()

