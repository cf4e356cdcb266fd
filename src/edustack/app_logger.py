import logging
import logging.config

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(process)d %(module)s"


def logging_config(level: str = "INFO", json: bool = True) -> dict:
    level = (level or "INFO").upper()
    formatter = "json" if json else "plain"
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "fmt": JSON_FORMAT,
            },
            "plain": {"format": LOG_FORMAT},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": formatter,
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "": {"handlers": ["console"], "level": level},
            "uvicorn": {"handlers": ["console"], "level": "INFO", "propagate": False},
            "uvicorn.error": {"handlers": ["console"], "level": "INFO", "propagate": False},
            "uvicorn.access": {"handlers": ["console"], "level": "INFO", "propagate": False},
        },
    }


def setup_logging(level: str = "INFO", json: bool = True) -> logging.Logger:
    logging.config.dictConfig(logging_config(level, json))
    return logging.getLogger("edustack")


def get_logger(name: str | None = None) -> logging.Logger:
    base = logging.getLogger("edustack")
    return base.getChild(name) if name else base
