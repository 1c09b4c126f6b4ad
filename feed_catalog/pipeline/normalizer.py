"""
Normalizador de itens do feed.
Converte RawItem em Product: limpa entidades HTML, adiciona parâmetro
de afiliado à URL e aplica valores padrão aos campos ausentes.
"""

from typing import Optional

from pydantic import AnyUrl, TypeAdapter, ValidationError

from config.logging_config import LoggerMixin
from feed_catalog.core.constants import (
    DEFAULT_DESCRIPTION,
    DEFAULT_ID_TEMPLATE,
    DEFAULT_IMAGE_URL,
    DEFAULT_NAME,
    DEFAULT_PRICE,
    DEFAULT_URL,
    FIELD_DESCRIPTION,
    FIELD_ID,
    FIELD_IMAGE_LINK,
    FIELD_LINK,
    FIELD_PRICE,
    FIELD_TITLE,
    HTML_ENTITIES,
)
from feed_catalog.core.exceptions import InvalidUrlError
from feed_catalog.core.models import Product, RawItem

_URL_ADAPTER = TypeAdapter(AnyUrl)


class ProductNormalizer(LoggerMixin):
    """
    Normalizador de produtos.
    Cada item do feed vira exatamente um Product com todos os campos preenchidos.
    """

    def __init__(
        self,
        affiliate_id: str = "123",
        affiliate_param: str = "aff_id",
    ):
        """
        Inicializa o normalizador.

        Args:
            affiliate_id: ID de afiliado adicionado às URLs
            affiliate_param: Nome do parâmetro de query do afiliado
        """
        self.affiliate_id = affiliate_id
        self.affiliate_param = affiliate_param

    def clean_html_entities(self, text: Optional[str]) -> Optional[str]:
        """
        Decodifica &nbsp;, &amp;, &lt;, &gt; e &quot;, nessa ordem.

        Exemplos:
            "Tom &amp; Jerry" -> "Tom & Jerry"
            "&amp;lt;b&amp;gt;" -> "<b>"
            None -> None
        """
        if not text:
            return text

        for entity, char in HTML_ENTITIES:
            text = text.replace(entity, char)
        return text

    def create_affiliate_url(self, original_url: Optional[str]) -> Optional[str]:
        """
        Adiciona o parâmetro de afiliado a uma URL absoluta.

        URLs ausentes e "#" voltam sem alteração. URLs inválidas são
        registradas como warning e também voltam sem alteração.

        Exemplos:
            "https://x.com/p" -> "https://x.com/p?aff_id=123"
            "https://x.com/p?x=1" -> "https://x.com/p?x=1&aff_id=123"
        """
        if not original_url or original_url == DEFAULT_URL:
            return original_url

        try:
            self._validate_url(original_url)
        except InvalidUrlError as e:
            self.logger.warning(
                "URL inválida, usando original",
                url=original_url,
                error=e.message,
            )
            return original_url

        separator = "&" if "?" in original_url else "?"
        return f"{original_url}{separator}{self.affiliate_param}={self.affiliate_id}"

    def normalize(self, raw_item: RawItem, index: int) -> Product:
        """
        Converte um item bruto em produto.

        Args:
            raw_item: Item bruto do feed
            index: Posição do item (usada no ID padrão)

        Returns:
            Product com todos os campos preenchidos
        """
        return Product(
            id=raw_item.get(FIELD_ID) or DEFAULT_ID_TEMPLATE.format(index=index),
            name=self.clean_html_entities(raw_item.get(FIELD_TITLE)) or DEFAULT_NAME,
            description=(
                self.clean_html_entities(raw_item.get(FIELD_DESCRIPTION))
                or DEFAULT_DESCRIPTION
            ),
            image_url=raw_item.get(FIELD_IMAGE_LINK) or DEFAULT_IMAGE_URL,
            url=self.create_affiliate_url(raw_item.get(FIELD_LINK)) or DEFAULT_URL,
            price=raw_item.get(FIELD_PRICE) or DEFAULT_PRICE,
        )

    def normalize_batch(self, raw_items: list[RawItem]) -> list[Product]:
        """Normaliza todos os itens, usando a posição na lista como índice."""
        self.logger.info("Convertendo produtos", total=len(raw_items))
        return [
            self.normalize(raw_item, index)
            for index, raw_item in enumerate(raw_items)
        ]

    @staticmethod
    def _validate_url(url: str) -> None:
        """
        Valida que a URL é absoluta e bem formada.

        Raises:
            InvalidUrlError: Se a URL não puder ser interpretada
        """
        try:
            _URL_ADAPTER.validate_python(url)
        except ValidationError as e:
            raise InvalidUrlError(url=url, cause=e) from e
