# utils/config.py
"""
Settings loaded from environment variables (and an optional .env file).

- PATTERN_LAB_LOG_LEVEL      -> root log level (default INFO)
- PATTERN_LAB_LOG_FORMAT     -> "text" or "json"
- PATTERN_LAB_CORS_ORIGINS   -> comma separated origins for the API
- PATTERN_LAB_MAX_ARRAY_LEN  -> longest array the API will visualize
- PATTERN_LAB_MAX_STRING_LEN -> longest string the API will visualize
- PATTERN_LAB_MAX_TEXT_LEN   -> longest problem statement the API will analyze
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    LOG_LEVEL: str = os.getenv("PATTERN_LAB_LOG_LEVEL", "INFO").upper()
    LOG_FORMAT: str = os.getenv("PATTERN_LAB_LOG_FORMAT", "text").lower()

    CORS_ORIGINS: str = os.getenv("PATTERN_LAB_CORS_ORIGINS", "*")

    MAX_ARRAY_LEN: int = int(os.getenv("PATTERN_LAB_MAX_ARRAY_LEN", "200"))
    MAX_STRING_LEN: int = int(os.getenv("PATTERN_LAB_MAX_STRING_LEN", "200"))
    MAX_TEXT_LEN: int = int(os.getenv("PATTERN_LAB_MAX_TEXT_LEN", "5000"))

    @property
    def cors_origins(self):
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
