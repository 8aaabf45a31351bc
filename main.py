import inspect
import os
import logging
import sys

from uvicorn import Config, Server
from loguru import logger

# per-request INFO lines from the upstream client are noise at the default level
CLIENT_LOGGERS = ("httpx", "httpcore")


class InterceptHandler(logging.Handler):
    """Forward stdlib records (uvicorn, httpx) to loguru."""

    def emit(self, record):
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1
        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def configure_logging(level_name: str = "INFO", json_logs: bool = False,
                      client_level_name: str = "WARNING") -> int:
    """Send everything through loguru; returns the numeric root level."""
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(handlers=[InterceptHandler()], level=level, force=True)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).handlers = []
        logging.getLogger(name).propagate = True
    for name in CLIENT_LOGGERS:
        logging.getLogger(name).setLevel(client_level_name.upper())
    logger.configure(
        handlers=[{"sink": sys.stdout, "level": level, "serialize": json_logs}]
    )
    return level


if __name__ == "__main__":
    # log_config=None keeps uvicorn from installing its own handlers
    level = configure_logging(
        os.environ.get("LOG_LEVEL", "INFO"),
        json_logs=os.environ.get("JSON_LOGS", "0") == "1",
        client_level_name=os.environ.get("HTTPX_LOG_LEVEL", "WARNING"),
    )
    server = Server(
        Config(
            "app.main:app",
            host=os.environ.get("HOST", "0.0.0.0"),
            port=int(os.environ.get("PORT", "8000")),
            log_level=level,
            log_config=None,
        ),
    )
    server.run()
