"""
Geração das visões derivadas do catálogo.
Amostra, índice de busca, categorias por faixa de preço e manifesto.
"""

from datetime import datetime, timezone
from typing import Optional

from config.logging_config import LoggerMixin
from feed_catalog.core.constants import SAMPLE_SIZE, SEARCH_DESCRIPTION_MAX_LENGTH
from feed_catalog.core.models import (
    CatalogArtifacts,
    CategoryBucket,
    CategorySummary,
    Manifest,
    Product,
    SearchIndexEntry,
)
from feed_catalog.core.types import PriceCategory
from feed_catalog.pipeline.sorter import parse_price


class CatalogPartitioner(LoggerMixin):
    """
    Particionador do catálogo ordenado.
    Não reordena nada: todas as visões preservam a ordem recebida.
    """

    def __init__(
        self,
        sample_size: int = SAMPLE_SIZE,
        search_description_length: int = SEARCH_DESCRIPTION_MAX_LENGTH,
    ):
        """
        Inicializa o particionador.

        Args:
            sample_size: Quantidade de produtos na amostra
            search_description_length: Tamanho máximo da descrição no índice
        """
        self.sample_size = sample_size
        self.search_description_length = search_description_length

    def build_sample(self, products: list[Product]) -> list[Product]:
        """Primeiros N produtos."""
        return products[:self.sample_size]

    def build_search_index(self, products: list[Product]) -> list[SearchIndexEntry]:
        """Uma entrada por produto, com descrição truncada (sem reticências)."""
        self.logger.info("Criando índice de busca", total=len(products))
        return [
            SearchIndexEntry(
                id=product.id,
                name=product.name,
                description=product.description[:self.search_description_length],
            )
            for product in products
        ]

    def build_buckets(self, products: list[Product]) -> list[CategoryBucket]:
        """
        Agrupa produtos por faixa de preço em uma única passada.

        Categorias aparecem na ordem em que são encontradas; categorias
        sem produtos não são criadas.
        """
        self.logger.info("Criando categorias")

        grouped: dict[PriceCategory, list[Product]] = {}
        for product in products:
            category = PriceCategory.from_price(parse_price(product.price))
            grouped.setdefault(category, []).append(product)

        return [
            CategoryBucket(category=category, products=members)
            for category, members in grouped.items()
        ]

    def build_manifest(
        self,
        products: list[Product],
        buckets: list[CategoryBucket],
        generated_at: Optional[datetime] = None,
    ) -> Manifest:
        """Monta o manifesto com contagens e nomes de arquivos."""
        return Manifest(
            last_updated=generated_at or datetime.now(timezone.utc),
            total_products=len(products),
            categories=[
                CategorySummary(
                    name=bucket.category.value,
                    count=bucket.count,
                    file=bucket.file_name,
                )
                for bucket in buckets
            ],
        )

    def partition(
        self,
        products: list[Product],
        generated_at: Optional[datetime] = None,
    ) -> CatalogArtifacts:
        """
        Gera todos os artefatos a partir da lista já ordenada.

        Args:
            products: Produtos ordenados por preço
            generated_at: Timestamp do manifesto (default: agora, UTC)

        Returns:
            CatalogArtifacts com lista completa, amostra, índice,
            categorias e manifesto
        """
        buckets = self.build_buckets(products)
        manifest = self.build_manifest(products, buckets, generated_at)

        self.logger.info(
            "Catálogo particionado",
            total=len(products),
            categories={b.category.value: b.count for b in buckets},
        )

        return CatalogArtifacts(
            products=products,
            sample=self.build_sample(products),
            search_index=self.build_search_index(products),
            buckets=buckets,
            manifest=manifest,
        )
