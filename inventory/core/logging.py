# inventory/core/logging.py
import logging
import sys
import colorlog

LOG_FORMAT = "%(log_color)s%(asctime)s %(levelname)-8s [%(name)s]%(reset)s %(message)s"

# Third-party loggers held at WARNING whatever the app level is
QUIET_LOGGERS = ("pymongo", "motor", "httpx", "multipart")


def configure_logging(level=logging.INFO, colored: bool | None = None):
    """
    Install a single colorlog handler on the root logger.
    `colored=None` colours only when stdout is a terminal (plain text in containers).
    """
    if colored is None:
        colored = sys.stdout.isatty()

    handler = colorlog.StreamHandler(sys.stdout)
    handler.setFormatter(
        colorlog.ColoredFormatter(
            LOG_FORMAT,
            datefmt="%H:%M:%S",
            no_color=not colored,
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            },
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    logging.getLogger("uvicorn.error").setLevel(level)
    logging.getLogger("uvicorn.access").setLevel(level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
