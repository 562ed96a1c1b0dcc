import logging, logging.config

def setup_logging(level: str = "INFO", access_log: bool = True, sql_echo: bool = False):
    """Configure root, uvicorn and SQLAlchemy loggers.

    SQL statements are logged through ``sqlalchemy.engine`` at INFO when
    ``sql_echo`` is on, instead of the engine's own echo handler.
    """
    level = level.upper()
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
                        "datefmt": "%Y-%m-%d %H:%M:%S"},
            # Uvicorn pre-formats access log lines; don't expect extra fields
            "access_simple": {"format": "%(message)s"},
        },
        "handlers": {
            "console": {"class": "logging.StreamHandler", "formatter": "default"},
            "access":  {"class": "logging.StreamHandler", "formatter": "access_simple"},
        },
        "loggers": {
            "app": {"level": level},
            "sqlalchemy.engine": {"level": ("INFO" if sql_echo else "WARNING")},
            "uvicorn.error":  {"level": level, "handlers": ["console"], "propagate": False},
            "uvicorn.access": {"level": ("INFO" if access_log else "WARNING"),
                               "handlers": ["access"], "propagate": False},
        },
        "root": {"level": level, "handlers": ["console"]},
    })
