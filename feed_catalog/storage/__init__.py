"""
Módulo de storage: gravação dos artefatos gerados.
"""

from feed_catalog.storage.base import BaseStorage
from feed_catalog.storage.json_storage import JSONStorage

__all__ = [
    "BaseStorage",
    "JSONStorage",
]
