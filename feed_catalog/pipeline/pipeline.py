"""
Pipeline de processamento completo.
Orquestra parser, normalizer, sorter e partitioner sobre o feed em memória.
"""

from datetime import datetime
from typing import Optional

from config.logging_config import LoggerMixin
from feed_catalog.core.models import CatalogArtifacts, Product
from feed_catalog.pipeline.normalizer import ProductNormalizer
from feed_catalog.pipeline.parser import FeedContent, FeedParser
from feed_catalog.pipeline.partitioner import CatalogPartitioner
from feed_catalog.pipeline.sorter import sort_by_price


class CatalogPipeline(LoggerMixin):
    """
    Pipeline de processamento do catálogo.
    Fluxo: XML -> RawItem -> Product -> lista ordenada -> CatalogArtifacts
    """

    def __init__(
        self,
        parser: Optional[FeedParser] = None,
        normalizer: Optional[ProductNormalizer] = None,
        partitioner: Optional[CatalogPartitioner] = None,
    ):
        """Inicializa o pipeline com seus componentes."""
        self.parser = parser or FeedParser()
        self.normalizer = normalizer or ProductNormalizer()
        self.partitioner = partitioner or CatalogPartitioner()

    def build_products(self, feed: FeedContent) -> list[Product]:
        """
        Faz parsing, normalização e ordenação do feed.

        Args:
            feed: Conteúdo XML do feed (texto ou bytes)

        Returns:
            Produtos ordenados do mais caro para o mais barato
        """
        raw_items = self.parser.parse(feed)
        products = self.normalizer.normalize_batch(raw_items)

        self.logger.info("Ordenando produtos por preço", total=len(products))
        return sort_by_price(products)

    def process(
        self,
        feed: FeedContent,
        generated_at: Optional[datetime] = None,
    ) -> CatalogArtifacts:
        """
        Processa o feed completo e gera todos os artefatos.

        Raises:
            MalformedFeedError: Se o feed não tiver a estrutura esperada
        """
        products = self.build_products(feed)
        return self.partitioner.partition(products, generated_at=generated_at)
