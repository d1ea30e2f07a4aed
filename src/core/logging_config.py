import logging.config
import sys


def configure_logging(level: str = "INFO") -> None:
    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        # Formatters: How the logs look
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        # Handlers: Where the logs go
        "handlers": {
            "console": {
                "level": "DEBUG",
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "stream": sys.stdout,
            },
        },
        # Loggers: the engine gets its own level, everything else stays at WARNING
        "loggers": {
            "": {
                "handlers": ["console"],
                "level": "WARNING",
                "propagate": True,
            },
            "src": {
                "handlers": ["console"],
                "level": level.upper(),
                "propagate": False,
            },
        },
    }

    logging.config.dictConfig(logging_config)
