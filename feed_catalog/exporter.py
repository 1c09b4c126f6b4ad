"""
CatalogExporter: Orquestrador principal do sistema.
Coordena download, pipeline e storage em uma execução única.
"""

from datetime import datetime
from typing import Optional

from config.logging_config import LoggerMixin
from config.settings import Settings, get_settings
from feed_catalog.core.models import ExportResult
from feed_catalog.core.types import ProgressCallback
from feed_catalog.fetcher import FeedFetcher
from feed_catalog.pipeline import (
    CatalogPartitioner,
    CatalogPipeline,
    ProductNormalizer,
)
from feed_catalog.storage import BaseStorage, JSONStorage


class CatalogExporter(LoggerMixin):
    """
    Orquestrador da exportação do catálogo.

    Responsabilidades:
    - Baixar o feed
    - Processar produtos através do pipeline
    - Gravar os artefatos JSON
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        fetcher: Optional[FeedFetcher] = None,
        pipeline: Optional[CatalogPipeline] = None,
        storage: Optional[BaseStorage] = None,
        on_progress: Optional[ProgressCallback] = None,
    ):
        """
        Inicializa o exportador.

        Args:
            settings: Configurações (None = get_settings())
            fetcher: Fetcher alternativo
            pipeline: Pipeline alternativo
            storage: Storage alternativo
            on_progress: Observador de progresso do download
        """
        self.settings = settings or get_settings()

        self.fetcher = fetcher or FeedFetcher(
            timeout=self.settings.request_timeout,
            max_redirects=self.settings.max_redirects,
            user_agent=self.settings.user_agent,
            progress_step_bytes=self.settings.progress_step_bytes,
            on_progress=on_progress,
        )
        self.pipeline = pipeline or CatalogPipeline(
            normalizer=ProductNormalizer(
                affiliate_id=self.settings.affiliate_id,
                affiliate_param=self.settings.affiliate_param,
            ),
            partitioner=CatalogPartitioner(
                sample_size=self.settings.sample_size,
                search_description_length=self.settings.search_description_length,
            ),
        )
        self.storage = storage or JSONStorage(
            self.settings.output_path,
            indent=self.settings.json_indent,
        )

    async def run(self, feed_url: Optional[str] = None) -> ExportResult:
        """
        Executa a exportação completa.

        Args:
            feed_url: URL do feed (None = settings.feed_url)

        Returns:
            ExportResult com manifesto e arquivos gravados

        Raises:
            FeedCatalogError: Qualquer falha é fatal para a execução
        """
        url = feed_url or self.settings.feed_url
        log = self.log_operation("export", feed_url=url)
        log.info("Iniciando exportação")
        started_at = datetime.now()

        feed = await self.fetcher.fetch(url)
        artifacts = self.pipeline.process(feed)
        files = self.storage.save_artifacts(artifacts)

        result = ExportResult(
            source_url=url,
            manifest=artifacts.manifest,
            files=[str(path) for path in files],
            started_at=started_at,
        )
        result.mark_finished()

        log.info(
            "Processamento concluído",
            total_products=artifacts.manifest.total_products,
            files=len(files),
        )
        return result
