"""
Módulo core: modelos de dados, exceções, tipos e constantes.
"""

from feed_catalog.core.models import (
    RawItem,
    Product,
    SearchIndexEntry,
    CategoryBucket,
    CategorySummary,
    Manifest,
    ManifestFiles,
    CatalogArtifacts,
    ExportResult,
)
from feed_catalog.core.exceptions import (
    FeedCatalogError,
    FeedDownloadError,
    FetchError,
    TransportError,
    MalformedFeedError,
    InvalidUrlError,
    StorageError,
)
from feed_catalog.core.types import (
    LogLevel,
    PriceCategory,
    ProgressCallback,
)

__all__ = [
    # Models
    "RawItem",
    "Product",
    "SearchIndexEntry",
    "CategoryBucket",
    "CategorySummary",
    "Manifest",
    "ManifestFiles",
    "CatalogArtifacts",
    "ExportResult",
    # Exceptions
    "FeedCatalogError",
    "FeedDownloadError",
    "FetchError",
    "TransportError",
    "MalformedFeedError",
    "InvalidUrlError",
    "StorageError",
    # Types
    "LogLevel",
    "PriceCategory",
    "ProgressCallback",
]
