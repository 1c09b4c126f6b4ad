"""
Modelos de dados Pydantic para o sistema.
Define estruturas para itens brutos do feed, produtos e artefatos gerados.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

from feed_catalog.core.constants import (
    PRODUCTS_FILE,
    SAMPLE_FILE,
    SEARCH_INDEX_FILE,
)
from feed_catalog.core.types import PriceCategory


class RawItem(BaseModel):
    """
    Item bruto extraído do feed.
    Contém os campos exatamente como vieram do XML (ex: "g:id", "title").
    """

    position: int = Field(..., ge=0)
    fields: dict[str, str] = Field(default_factory=dict)

    def get(self, name: str) -> Optional[str]:
        """Retorna o valor do campo ou None se ausente ou vazio."""
        value = self.fields.get(name)
        return value or None


class Product(BaseModel):
    """
    Produto normalizado.
    Todos os campos são sempre preenchidos (valores padrão quando ausentes).
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: str
    image_url: str = Field(..., alias="imageUrl")
    url: str
    price: str = Field(..., description="Preço como string original")


class SearchIndexEntry(BaseModel):
    """Entrada reduzida do índice de busca."""

    id: str
    name: str
    description: str


class CategoryBucket(BaseModel):
    """Grupo de produtos de uma faixa de preço, na ordem do catálogo."""

    category: PriceCategory
    products: list[Product] = Field(default_factory=list)

    @computed_field
    @property
    def count(self) -> int:
        """Quantidade de produtos na categoria."""
        return len(self.products)

    @computed_field
    @property
    def file_name(self) -> str:
        """Arquivo onde a categoria é gravada."""
        return self.category.file_name


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CategorySummary(_CamelModel):
    """Resumo de uma categoria no manifesto."""

    name: str
    count: int = Field(..., ge=0)
    file: str


class ManifestFiles(_CamelModel):
    """Nomes fixos dos arquivos principais."""

    all: str = PRODUCTS_FILE
    sample: str = SAMPLE_FILE
    search_index: str = SEARCH_INDEX_FILE


class Manifest(_CamelModel):
    """Metadados descrevendo todos os artefatos gerados."""

    last_updated: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    total_products: int = Field(..., ge=0)
    categories: list[CategorySummary] = Field(default_factory=list)
    files: ManifestFiles = Field(default_factory=ManifestFiles)


class CatalogArtifacts(BaseModel):
    """Todas as visões derivadas do catálogo ordenado."""

    products: list[Product] = Field(default_factory=list)
    sample: list[Product] = Field(default_factory=list)
    search_index: list[SearchIndexEntry] = Field(default_factory=list)
    buckets: list[CategoryBucket] = Field(default_factory=list)
    manifest: Manifest

    def get_bucket(self, category: PriceCategory) -> Optional[CategoryBucket]:
        """Retorna o grupo de uma categoria, se existir."""
        for bucket in self.buckets:
            if bucket.category == category:
                return bucket
        return None


class ExportResult(BaseModel):
    """Resultado de uma execução completa do exportador."""

    source_url: str
    manifest: Manifest
    files: list[str] = Field(default_factory=list)

    started_at: datetime = Field(default_factory=datetime.now)
    finished_at: Optional[datetime] = None

    @computed_field
    @property
    def duration_seconds(self) -> Optional[float]:
        """Duração da execução em segundos."""
        if self.finished_at is None:
            return None
        return (self.finished_at - self.started_at).total_seconds()

    def mark_finished(self):
        """Marca a execução como finalizada."""
        self.finished_at = datetime.now()
