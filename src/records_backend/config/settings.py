"""
Configuration settings for the Employee Records Backend
"""

import os
import logging
from dataclasses import dataclass, field
from typing import List, Optional

logger = logging.getLogger(__name__)

DEVELOPMENT = "development"
PRODUCTION = "production"
ENVIRONMENTS = (DEVELOPMENT, PRODUCTION)


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass
class Settings:
    """Process configuration, read once at startup"""

    port: int = 5050
    env: str = DEVELOPMENT
    database_url: Optional[str] = None
    database_name: str = "employees"
    api_url: str = "http://localhost:5050"
    web_port: int = 5173
    static_dir: str = "public"
    allowed_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    def __post_init__(self):
        self.env = self.env.strip().lower()
        if self.env not in ENVIRONMENTS:
            raise ValueError(f"ENV must be one of {', '.join(ENVIRONMENTS)}, got '{self.env}'")

    @property
    def is_production(self) -> bool:
        return self.env == PRODUCTION

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables"""
        settings = cls(
            port=int(os.getenv("PORT", 5050)),
            env=os.getenv("ENV", DEVELOPMENT),
            database_url=os.getenv("DATABASE_URL"),
            database_name=os.getenv("DATABASE_NAME", "employees"),
            api_url=os.getenv("API_URL", "http://localhost:5050").rstrip("/"),
            web_port=int(os.getenv("WEB_PORT", 5173)),
            static_dir=os.getenv("STATIC_DIR", "public"),
            allowed_origins=_split_origins(os.getenv("ALLOWED_ORIGINS", "*")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
        logger.info(f"Environment: {settings.env}")
        if not settings.database_url:
            logger.warning("DATABASE_URL not set - the API server will not be able to start")
        return settings
