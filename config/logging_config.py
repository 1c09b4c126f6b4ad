"""
Configuração de logging estruturado usando structlog.
Gera logs em formato JSON para produção e colorido para desenvolvimento.
"""

import logging
import sys

import structlog
from structlog.typing import Processor


def setup_logging(
    level: str = "INFO",
    json_format: bool = False,
) -> structlog.BoundLogger:
    """
    Configura o sistema de logging.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR)
        json_format: Se True, usa formato JSON (produção)

    Returns:
        Logger configurado
    """

    # Processadores comuns
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_format:
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    # Logs vão para stderr; stdout fica livre para o resumo da CLI
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper()),
    )

    # httpx loga cada requisição em INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)

    return structlog.get_logger()


def get_logger(name: str = "feed_catalog", **context) -> structlog.BoundLogger:
    """
    Retorna um logger com contexto.

    Args:
        name: Nome do logger
        **context: Contexto adicional para bind

    Returns:
        Logger com contexto
    """
    logger = structlog.get_logger(name)
    if context:
        logger = logger.bind(**context)
    return logger


class LoggerMixin:
    """Mixin para adicionar logging a classes."""

    @property
    def logger(self) -> structlog.BoundLogger:
        """Retorna logger com nome da classe."""
        if not hasattr(self, "_logger"):
            self._logger = get_logger(self.__class__.__name__)
        return self._logger

    def log_operation(
        self,
        operation: str,
        **kwargs,
    ) -> structlog.BoundLogger:
        """Retorna logger com operação bindada."""
        return self.logger.bind(operation=operation, **kwargs)
