"""
Módulo de pipeline: parsing, normalização, ordenação e particionamento.
"""

from feed_catalog.pipeline.parser import FeedParser
from feed_catalog.pipeline.normalizer import ProductNormalizer
from feed_catalog.pipeline.sorter import compare_by_price, parse_price, sort_by_price
from feed_catalog.pipeline.partitioner import CatalogPartitioner
from feed_catalog.pipeline.pipeline import CatalogPipeline

__all__ = [
    "FeedParser",
    "ProductNormalizer",
    "compare_by_price",
    "parse_price",
    "sort_by_price",
    "CatalogPartitioner",
    "CatalogPipeline",
]
