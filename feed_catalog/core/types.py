"""
Tipos customizados e enumerações do sistema.
"""

import math
from enum import Enum
from typing import Callable

from feed_catalog.core.constants import (
    BUDGET_LIMIT,
    CATEGORY_FILE_TEMPLATE,
    PREMIUM_LIMIT,
    STANDARD_LIMIT,
)


class PriceCategory(str, Enum):
    """Faixas de preço usadas para dividir o catálogo."""

    BUDGET = "budget"
    STANDARD = "standard"
    PREMIUM = "premium"
    LUXURY = "luxury"
    OTHER = "other"

    @classmethod
    def from_price(cls, price: float) -> "PriceCategory":
        """Classifica um preço já convertido; NaN vira OTHER."""
        if math.isnan(price):
            return cls.OTHER
        if price < BUDGET_LIMIT:
            return cls.BUDGET
        if price < STANDARD_LIMIT:
            return cls.STANDARD
        if price < PREMIUM_LIMIT:
            return cls.PREMIUM
        return cls.LUXURY

    @property
    def file_name(self) -> str:
        """Nome do arquivo da categoria."""
        return CATEGORY_FILE_TEMPLATE.format(category=self.value)


# Observador de progresso do download: recebe bytes baixados até o momento
ProgressCallback = Callable[[int], None]


class LogLevel(str, Enum):
    """Níveis de log aceitos pela opção --log-level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
