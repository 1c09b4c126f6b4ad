"""
Parser do feed de produtos (RSS 2.0 com campos Google Merchant).
Converte o XML em uma lista ordenada de itens brutos.
"""

import io
import xml.etree.ElementTree as ET
from typing import Union

from config.logging_config import LoggerMixin
from feed_catalog.core.constants import FEED_ITEMS_PATH
from feed_catalog.core.exceptions import MalformedFeedError
from feed_catalog.core.models import RawItem

FeedContent = Union[str, bytes]


class FeedParser(LoggerMixin):
    """
    Parser de feeds RSS.
    Atributos são ignorados; apenas o texto dos elementos importa.

    rss, channel e item são localizados pelo nome local, então um
    xmlns padrão na raiz não impede a leitura. Os campos do item mantêm
    o prefixo declarado no documento (g:id, g:price...).
    """

    def parse(self, content: FeedContent) -> list[RawItem]:
        """
        Extrai os itens de rss > channel > item.

        Args:
            content: XML do feed. Em bytes, o encoding declarado no
                prólogo (<?xml encoding="..."?>) é respeitado.

        Returns:
            Lista de itens brutos na ordem do feed

        Raises:
            MalformedFeedError: Se o XML for inválido ou o caminho não existir
        """
        self.logger.info("Fazendo parsing do XML", size=len(content))

        root, names = self._parse_xml(content)

        if self._local_name(root.tag) != "rss":
            raise MalformedFeedError(
                "Elemento raiz do feed não é <rss>",
                path=FEED_ITEMS_PATH,
                details={"root": root.tag},
            )

        channel = next(self._children(root, "channel"), None)
        if channel is None:
            raise MalformedFeedError(
                "Feed sem elemento <channel>",
                path=FEED_ITEMS_PATH,
            )

        items = [
            self._parse_item(element, position, names)
            for position, element in enumerate(self._children(channel, "item"))
        ]

        self.logger.info("Produtos encontrados", total=len(items))
        return items

    def _parse_xml(self, content: FeedContent) -> tuple[ET.Element, dict[ET.Element, str]]:
        """
        Faz o parsing do documento com iterparse.

        Returns:
            Elemento raiz e o nome qualificado ("g:id") de cada elemento,
            calculado com os prefixos em escopo naquele ponto do documento
        """
        source = io.BytesIO(content) if isinstance(content, bytes) else io.StringIO(content)

        names: dict[ET.Element, str] = {}
        scopes: list[dict[str, str]] = [{}]
        pending: list[tuple[str, str]] = []
        root = None

        try:
            for event, data in ET.iterparse(source, events=("start-ns", "start", "end")):
                if event == "start-ns":
                    pending.append(data)
                elif event == "start":
                    scope = dict(scopes[-1])
                    for prefix, uri in pending:
                        scope[uri] = prefix
                    pending.clear()
                    scopes.append(scope)
                    names[data] = self._qualified_name(data.tag, scope)
                    if root is None:
                        root = data
                else:
                    scopes.pop()
        except ET.ParseError as e:
            raise MalformedFeedError(
                "XML do feed inválido",
                raw_data=self._preview(content),
                cause=e,
            ) from e

        return root, names

    def _parse_item(
        self,
        element: ET.Element,
        position: int,
        names: dict[ET.Element, str],
    ) -> RawItem:
        """Converte um <item> em RawItem; o primeiro campo repetido vence."""
        fields: dict[str, str] = {}

        for child in element:
            name = names[child]
            if name in fields:
                continue
            fields[name] = "".join(child.itertext()).strip()

        return RawItem(position=position, fields=fields)

    def _children(self, element: ET.Element, local_name: str):
        """Filhos diretos com o nome local informado, em qualquer namespace."""
        return (child for child in element if self._local_name(child.tag) == local_name)

    @staticmethod
    def _local_name(tag: str) -> str:
        """Remove o namespace: "{uri}channel" -> "channel"."""
        return tag.rpartition("}")[2]

    @staticmethod
    def _qualified_name(tag: str, scope: dict[str, str]) -> str:
        """
        Converte "{uri}local" de volta para "prefixo:local".

        Exemplos:
            "{http://base.google.com/ns/1.0}id" -> "g:id"
            "{http://www.w3.org/2005/Atom}title" com xmlns padrão -> "title"
            "title" -> "title"
        """
        if not tag.startswith("{"):
            return tag

        uri, _, local = tag[1:].partition("}")
        prefix = scope.get(uri)
        return f"{prefix}:{local}" if prefix else local

    @staticmethod
    def _preview(content: FeedContent) -> str:
        """Início do documento como texto, para o erro."""
        if isinstance(content, bytes):
            return content[:200].decode("utf-8", errors="replace")
        return content[:200]
