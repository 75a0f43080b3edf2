import logging
import logging.config
from pathlib import Path
from app.core.config import settings

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": settings.LOG_LEVEL,
            "formatter": "default",
            "stream": "ext://sys.stdout"
        },
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": settings.LOG_LEVEL,
            "formatter": "default",
            "filename": f"{settings.LOG_DIR}/app.log",
            "maxBytes": 10485760,
            "backupCount": 5
        },
        "error_file": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "ERROR",
            "formatter": "default",
            "filename": f"{settings.LOG_DIR}/error.log",
            "maxBytes": 10485760,
            "backupCount": 5
        }
    },
    "root": {
        "level": settings.LOG_LEVEL,
        "handlers": ["console", "file", "error_file"]
    },
    "loggers": {
        "app": {
            "level": settings.LOG_LEVEL,
            "handlers": ["console", "file", "error_file"],
            "propagate": False
        },
        "app.middleware.logging": {
            "level": "INFO",
            "handlers": ["console", "file"],
            "propagate": False
        },
        "uvicorn.access": {
            "level": "WARNING",
            "handlers": ["console"],
            "propagate": False
        }
    }
}

def configure_logging():
    Path(settings.LOG_DIR).mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig(LOGGING_CONFIG)
