"""structlog configuration shared by the API process and library users."""

import logging
import logging.handlers
import sys

import structlog

from infrastructure.config import Settings

_HANDLER_MARKER = "_object_store_handler"

_FOREIGN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "fastapi")


def _build_renderer(app_env: str) -> structlog.typing.Processor:
    if app_env == "development":
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer()


def _mark(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_MARKER, True)
    return handler


def setup_logging(config: Settings) -> None:
    """Route structlog and stdlib records through one formatter.

    Safe to call repeatedly: handlers installed by an earlier call are
    replaced, not duplicated. A file handler is added only when
    ``config.log_dir`` is set.
    """
    shared_processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processor=_build_renderer(config.app_env),
    )

    handlers: list[logging.Handler] = [_mark(logging.StreamHandler(sys.stdout))]
    if config.log_dir is not None:
        config.log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            _mark(
                logging.handlers.TimedRotatingFileHandler(
                    config.log_dir / f"{config.app_env}.log",
                    when="midnight",
                    backupCount=7,
                ),
            ),
        )
    for handler in handlers:
        handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers = [
        h for h in root_logger.handlers if not getattr(h, _HANDLER_MARKER, False)
    ]
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(config.log_level.upper())

    # fsspec implementations log each request at DEBUG
    logging.getLogger("fsspec").setLevel(max(root_logger.level, logging.INFO))

    for name in _FOREIGN_LOGGERS:
        foreign = logging.getLogger(name)
        foreign.handlers = list(handlers)
        foreign.propagate = False
