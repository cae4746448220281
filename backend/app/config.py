"""Configuration for the delivery charge calculator."""

import logging
import os
from typing import Optional
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings."""

    # API Settings
    API_TITLE = "Delivery Charge Calculator"
    API_VERSION = "1.0.0"
    API_DESCRIPTION = (
        "Distance-based delivery charges with swappable urban, suburban and rural rates"
    )

    # CORS Settings
    CORS_ORIGINS = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:8000",
        "http://127.0.0.1:8000",
    ]

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Rate tier installed on the shared calculator at startup; unset means none
    DEFAULT_DELIVERY_ZONE: Optional[str] = os.getenv("DEFAULT_DELIVERY_ZONE") or None

    MAX_DELIVERIES_PER_REQUEST = int(os.getenv("MAX_DELIVERIES_PER_REQUEST", "50"))

    @classmethod
    def configure_logging(cls, level: Optional[str] = None):
        """Configure root logging for entry points (API, CLI, demo)."""
        logging.basicConfig(
            level=getattr(logging, (level or cls.LOG_LEVEL), logging.INFO),
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        )


settings = Settings()
