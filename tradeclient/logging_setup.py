"""Process-wide logging setup driven by LoggingSettings."""

import json
import logging
from typing import Optional

from tradeclient.config import ClientSettings, get_settings

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""
    
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def configure_logging(settings: Optional[ClientSettings] = None) -> None:
    """
    Configure the root logger.
    
    Args:
        settings: Client settings (None reads the cached settings)
    """
    settings = settings or get_settings()
    
    handler = logging.StreamHandler()
    if settings.logging.log_format.lower() == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    
    logging.basicConfig(
        level=getattr(logging, settings.logging.log_level, logging.INFO),
        handlers=[handler],
        force=True,
    )
