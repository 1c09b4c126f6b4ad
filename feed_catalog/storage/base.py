"""
Classe base abstrata para storage.
Define interface comum para gravação dos artefatos do catálogo.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from config.logging_config import LoggerMixin
from feed_catalog.core.exceptions import StorageError
from feed_catalog.core.models import CatalogArtifacts


class BaseStorage(ABC, LoggerMixin):
    """
    Classe base abstrata para backends de storage.
    O diretório de saída é criado na primeira gravação.
    """

    def __init__(self, base_path: Path):
        """
        Inicializa o storage.

        Args:
            base_path: Diretório de saída dos artefatos
        """
        self.base_path = Path(base_path)

    def ensure_base_path(self) -> Path:
        """Cria o diretório de saída se não existir."""
        try:
            self.base_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(
                "Não foi possível criar o diretório de saída",
                path=str(self.base_path),
                cause=e,
            ) from e
        return self.base_path

    @abstractmethod
    def save_artifacts(self, artifacts: CatalogArtifacts) -> list[Path]:
        """
        Grava todos os artefatos.

        Args:
            artifacts: Visões derivadas do catálogo

        Returns:
            Paths dos arquivos gravados
        """
        pass
