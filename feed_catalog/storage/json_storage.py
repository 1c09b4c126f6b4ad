"""
Storage em arquivos JSON.
Cada artefato do catálogo vira um arquivo no diretório de saída.
"""

import json
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel

from feed_catalog.core.constants import (
    MANIFEST_FILE,
    PRODUCTS_FILE,
    SAMPLE_FILE,
    SEARCH_INDEX_FILE,
)
from feed_catalog.core.exceptions import StorageError
from feed_catalog.core.models import CatalogArtifacts
from feed_catalog.storage.base import BaseStorage


class JSONStorage(BaseStorage):
    """
    Storage usando arquivos JSON.
    Chaves em camelCase, UTF-8, compacto por padrão.
    """

    def __init__(self, base_path: Path, indent: Optional[int] = None):
        """
        Inicializa o storage JSON.

        Args:
            base_path: Diretório de saída
            indent: Indentação do JSON (None = compacto)
        """
        super().__init__(base_path)
        self.indent = indent

    def save_artifacts(self, artifacts: CatalogArtifacts) -> list[Path]:
        """
        Grava lista completa, amostra, índice, categorias e manifesto.

        Raises:
            StorageError: Se algum arquivo não puder ser gravado
        """
        self.ensure_base_path()

        files: list[tuple[str, Any]] = [
            (PRODUCTS_FILE, artifacts.products),
            (SAMPLE_FILE, artifacts.sample),
            (SEARCH_INDEX_FILE, artifacts.search_index),
        ]
        files.extend(
            (bucket.file_name, bucket.products)
            for bucket in artifacts.buckets
        )
        files.append((MANIFEST_FILE, artifacts.manifest))

        written = [self.write_json(filename, data) for filename, data in files]

        self.logger.info(
            "Artefatos gravados",
            count=len(written),
            base_path=str(self.base_path),
        )
        return written

    def write_json(self, filename: str, data: Any) -> Path:
        """
        Serializa modelos (ou listas de modelos) e grava em um arquivo.

        Returns:
            Path do arquivo gravado
        """
        filepath = self.base_path / filename
        self.logger.debug("Gravando arquivo", filepath=str(filepath))

        try:
            with open(filepath, "w", encoding="utf-8") as f:
                json.dump(
                    self._to_jsonable(data),
                    f,
                    ensure_ascii=False,
                    indent=self.indent,
                    separators=None if self.indent is not None else (",", ":"),
                )
        except (OSError, TypeError, ValueError) as e:
            raise StorageError(
                f"Erro ao gravar {filename}",
                path=str(filepath),
                cause=e,
            ) from e

        return filepath

    @staticmethod
    def _to_jsonable(data: Any) -> Any:
        """Converte modelos Pydantic usando os aliases (imageUrl, lastUpdated...)."""
        if isinstance(data, BaseModel):
            return data.model_dump(mode="json", by_alias=True)
        if isinstance(data, list):
            return [JSONStorage._to_jsonable(item) for item in data]
        return data
