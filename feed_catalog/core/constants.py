"""
Constantes e padrões regex para parsing e normalização do feed.
"""

import re
from typing import Final

# =============================================================================
# CAMPOS DO FEED
# =============================================================================

FIELD_ID: Final[str] = "g:id"
FIELD_TITLE: Final[str] = "title"
FIELD_DESCRIPTION: Final[str] = "description"
FIELD_IMAGE_LINK: Final[str] = "g:image_link"
FIELD_LINK: Final[str] = "link"
FIELD_PRICE: Final[str] = "g:price"

FEED_ITEMS_PATH: Final[str] = "rss > channel > item"


# =============================================================================
# VALORES PADRÃO DO PRODUTO
# =============================================================================

DEFAULT_NAME: Final[str] = "N/A"
DEFAULT_DESCRIPTION: Final[str] = "No description available."
DEFAULT_IMAGE_URL: Final[str] = "/placeholder.svg"
DEFAULT_URL: Final[str] = "#"
DEFAULT_PRICE: Final[str] = "N/A"
DEFAULT_ID_TEMPLATE: Final[str] = "product-{index}"


# =============================================================================
# ENTIDADES HTML
# =============================================================================

# Ordem fixa: &amp; vem antes de &lt;/&gt;
HTML_ENTITIES: Final[tuple[tuple[str, str], ...]] = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
)


# =============================================================================
# PREÇO
# =============================================================================

# Tudo que não é dígito, vírgula ou ponto
PRICE_STRIP_PATTERN: Final[re.Pattern] = re.compile(r"[^0-9.,]")

# Maior número decimal no início da string
PRICE_NUMBER_PATTERN: Final[re.Pattern] = re.compile(r"\d+(?:\.\d*)?|\.\d+")

BUDGET_LIMIT: Final[float] = 500.0
STANDARD_LIMIT: Final[float] = 2000.0
PREMIUM_LIMIT: Final[float] = 5000.0


# =============================================================================
# ARTEFATOS
# =============================================================================

PRODUCTS_FILE: Final[str] = "products.json"
SAMPLE_FILE: Final[str] = "sample-products.json"
SEARCH_INDEX_FILE: Final[str] = "search-index.json"
MANIFEST_FILE: Final[str] = "index.json"
CATEGORY_FILE_TEMPLATE: Final[str] = "{category}-products.json"

SAMPLE_SIZE: Final[int] = 100
SEARCH_DESCRIPTION_MAX_LENGTH: Final[int] = 200
