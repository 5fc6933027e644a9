"""
Configuration settings for the web app.
Environment variables override defaults.
"""
import os
from dataclasses import dataclass, field
from typing import List


@dataclass
class Settings:
    """Web app configuration"""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    DEBUG: bool = False
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # CORS (widget endpoint)
    CORS_ORIGINS: List[str] = field(default_factory=lambda: ["*"])

    # Site
    SITE_NAME: str = "SalaryCalc"
    SITE_URL: str = "https://salary-calculator-railway.app"

    # Content
    JOB_SEARCH_BASE_URL: str = "https://jooble.org"
    RELATED_RATES_LIMIT: int = 10

    def __post_init__(self):
        """Load from environment variables"""
        for key in self.__dataclass_fields__:
            env_value = os.getenv(key)
            if env_value is not None:
                field_type = self.__dataclass_fields__[key].type
                if field_type == bool:
                    setattr(self, key, env_value.lower() in ("true", "1", "yes"))
                elif field_type == int:
                    setattr(self, key, int(env_value))
                elif field_type == List[str]:
                    setattr(self, key, env_value.split(","))
                else:
                    setattr(self, key, env_value)


# Global settings instance
settings = Settings()
