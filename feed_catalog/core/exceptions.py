"""
Hierarquia de exceções do sistema.
Todas as exceções herdam de FeedCatalogError para facilitar tratamento.
"""

from typing import Any, Optional


class FeedCatalogError(Exception):
    """
    Exceção base do sistema.
    Todas as exceções customizadas herdam desta classe.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        base = self.message
        if self.details:
            base += f" | Details: {self.details}"
        if self.cause:
            base += f" | Caused by: {self.cause}"
        return base

    def to_dict(self) -> dict[str, Any]:
        """Serializa exceção para dicionário."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
            "cause": str(self.cause) if self.cause else None,
        }


# EXCEÇÕES DE DOWNLOAD

class FeedDownloadError(FeedCatalogError):
    """Erro genérico ao baixar o feed."""

    def __init__(
        self,
        message: str,
        *,
        url: Optional[str] = None,
        **kwargs,
    ):
        details = kwargs.pop("details", {})
        if url:
            details["url"] = url
        super().__init__(message, details=details, **kwargs)
        self.url = url


class FetchError(FeedDownloadError):
    """Servidor respondeu com status de erro (ou excesso de redirecionamentos)."""

    def __init__(
        self,
        message: str = "Falha ao baixar o feed",
        *,
        status_code: Optional[int] = None,
        reason: Optional[str] = None,
        **kwargs,
    ):
        details = kwargs.pop("details", {})
        if status_code:
            details["status_code"] = status_code
        if reason:
            details["reason"] = reason
        super().__init__(message, details=details, **kwargs)
        self.status_code = status_code
        self.reason = reason


class TransportError(FeedDownloadError):
    """Erro de rede (DNS, conexão recusada, timeout, etc)."""

    def __init__(
        self,
        message: str = "Erro de conexão com o servidor",
        **kwargs,
    ):
        super().__init__(message, **kwargs)


# EXCEÇÕES DE PARSING E NORMALIZAÇÃO

class MalformedFeedError(FeedCatalogError):
    """Feed sem a estrutura esperada (rss > channel > item)."""

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        raw_data: Optional[str] = None,
        **kwargs,
    ):
        details = kwargs.pop("details", {})
        if path:
            details["expected_path"] = path
        if raw_data:
            # Limita tamanho para não poluir logs
            details["raw_data"] = raw_data[:200] if len(raw_data) > 200 else raw_data
        super().__init__(message, details=details, **kwargs)


class InvalidUrlError(FeedCatalogError):
    """URL de destino não é uma URL absoluta válida."""

    def __init__(
        self,
        message: str = "URL inválida",
        *,
        url: Optional[str] = None,
        **kwargs,
    ):
        details = kwargs.pop("details", {})
        if url is not None:
            details["url"] = url
        super().__init__(message, details=details, **kwargs)
        self.url = url


# EXCEÇÕES DE STORAGE

class StorageError(FeedCatalogError):
    """Erro ao gravar artefatos."""

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        **kwargs,
    ):
        details = kwargs.pop("details", {})
        if path:
            details["path"] = path
        super().__init__(message, details=details, **kwargs)
        self.path = path
