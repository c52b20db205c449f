"""
Loguru setup for the summarizer.

Every record carries the request id bound by the request middleware in
`app.main`; records emitted outside a request show "-".
"""
import logging
import sys

from loguru import logger

from app.core.config import settings

# Standard-library loggers of the server and the outbound clients.
INTERCEPTED_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error", "httpx", "httpcore")

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> "
    "<level>{level: <8}</level> "
    "<magenta>[{extra[request_id]}]</magenta> "
    "<cyan>{name}:{line}</cyan> {message}"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} {level: <8} [{extra[request_id]}] {name}:{line} {message}"


class InterceptHandler(logging.Handler):
    """Forwards standard logging records to loguru, keeping the caller's location."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip logging-module frames so loguru reports the real call site.
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def _default_request_id(record) -> None:
    record["extra"].setdefault("request_id", "-")


def _route_stdlib_logging() -> None:
    handler = InterceptHandler()
    logging.basicConfig(handlers=[handler], level=0, force=True)
    for name in INTERCEPTED_LOGGERS:
        stdlib_logger = logging.getLogger(name)
        stdlib_logger.handlers = [handler]
        stdlib_logger.propagate = False


def setup_logging() -> None:
    """
    Send all application and library logs through loguru.

    Console output always goes to stderr at LOG_LEVEL. When LOG_FILE is set, a
    rotating file sink is added with the same level.
    """
    _route_stdlib_logging()

    logger.remove()
    logger.configure(patcher=_default_request_id)
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=settings.LOG_LEVEL)

    if settings.LOG_FILE:
        logger.add(
            settings.LOG_FILE,
            format=FILE_FORMAT,
            level=settings.LOG_LEVEL,
            rotation="10 MB",
            retention=5,
            enqueue=True,
        )
