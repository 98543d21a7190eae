"""Logging wrappers around command and query handlers."""

from __future__ import annotations

import logging
from typing import Any, Generic, Mapping, MutableMapping, Optional, Protocol, TypeVar, Union

C = TypeVar("C")
C_contra = TypeVar("C_contra", contravariant=True)
R = TypeVar("R")
R_co = TypeVar("R_co", covariant=True)

LoggerLike = Union[logging.Logger, logging.LoggerAdapter]

_DEFAULT_LOGGER_NAME = "gomono"


class _CommandHandler(Protocol[C_contra]):
    def handle(self, cmd: C_contra) -> None: ...


class _QueryHandler(Protocol[C_contra, R_co]):
    def handle(self, query: C_contra) -> R_co: ...


class _BoundLogger(logging.LoggerAdapter):
    """A logger carrying key/value pairs that are appended to every message."""

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        context = " ".join(f"{key}={value}" for key, value in self.extra.items())
        return (f"{msg} {context}" if context else msg), kwargs


def _bind(logger: Optional[LoggerLike], values: Mapping[str, Any]) -> _BoundLogger:
    """Return a logger that adds values to what logger already carries."""
    if logger is None:
        logger = logging.getLogger(_DEFAULT_LOGGER_NAME)
    if isinstance(logger, _BoundLogger):
        return _BoundLogger(logger.logger, {**logger.extra, **values})
    if isinstance(logger, logging.LoggerAdapter):
        inherited = dict(logger.extra or {})
        return _BoundLogger(logger.logger, {**inherited, **values})
    return _BoundLogger(logger, dict(values))


def generate_action_name(obj: Any) -> str:
    """The bare type name of obj, used to name the command or query in logs."""
    return type(obj).__name__


class CommandLoggingDecorator(Generic[C]):
    """Logs a command before it runs and reports how it ended."""

    def __init__(self, base: _CommandHandler[C], logger: Optional[LoggerLike] = None) -> None:
        self.base = base
        self.logger = _bind(logger, {})

    def handle(self, cmd: C) -> None:
        logger = _bind(
            self.logger,
            {"command": generate_action_name(cmd), "command_body": repr(cmd)},
        )
        logger.debug("Executing command")
        try:
            self.base.handle(cmd)
        except Exception as err:
            logger.error(f"failed to execute command: {err}")
            raise
        logger.info("command executed successfully")


class QueryLoggingDecorator(Generic[C, R]):
    """Logs a query before it runs and reports how it ended."""

    def __init__(self, base: _QueryHandler[C, R], logger: Optional[LoggerLike] = None) -> None:
        self.base = base
        self.logger = _bind(logger, {})

    def handle(self, query: C) -> R:
        logger = _bind(
            self.logger,
            {"query": generate_action_name(query), "query_body": repr(query)},
        )
        logger.debug("Executing query")
        try:
            result = self.base.handle(query)
        except Exception as err:
            logger.error(f"failed to execute query:{err}")
            raise
        logger.info("query executed successfully")
        return result


def apply_command_decorators(
    handler: _CommandHandler[C], logger: Optional[LoggerLike]
) -> CommandLoggingDecorator[C]:
    """Wrap a command handler: logging outermost, then the handler itself."""
    return CommandLoggingDecorator(handler, logger)


def apply_query_decorators(
    handler: _QueryHandler[C, R], logger: Optional[LoggerLike]
) -> QueryLoggingDecorator[C, R]:
    """Wrap a query handler with logging."""
    return QueryLoggingDecorator(handler, logger)