"""
Testes unitários para o FeedFetcher.
"""

import httpx
import pytest

from feed_catalog.core.exceptions import FetchError, TransportError
from feed_catalog.fetcher import FeedFetcher
from tests.fixtures.factories import FEED_URL, feed_transport


def redirect_transport(routes: dict[str, tuple]) -> httpx.MockTransport:
    """Transport com respostas fixas por URL: (status, headers, content)."""

    def handler(request: httpx.Request) -> httpx.Response:
        status, headers, content = routes.get(str(request.url), (404, {}, b""))
        return httpx.Response(status, headers=headers, content=content)

    return httpx.MockTransport(handler)


class TestFeedFetcher:
    """Testes para FeedFetcher."""

    @pytest.mark.asyncio
    async def test_fetch_sucesso(self):
        """Retorna o corpo da resposta em bytes."""
        fetcher = FeedFetcher(transport=feed_transport(body="<rss>ok</rss>"))

        assert await fetcher.fetch(FEED_URL) == b"<rss>ok</rss>"

    @pytest.mark.asyncio
    async def test_corpo_nao_decodificado(self):
        """Bytes chegam intactos, mesmo com charset diferente no prólogo."""
        body = '<?xml version="1.0" encoding="windows-1250"?><rss>Kůň</rss>'.encode("cp1250")

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=body, headers={"Content-Type": "application/xml"})

        fetcher = FeedFetcher(transport=httpx.MockTransport(handler))

        assert await fetcher.fetch(FEED_URL) == body

    @pytest.mark.asyncio
    async def test_status_erro(self):
        """Status não 2xx levanta FetchError sem retry."""
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(503)

        fetcher = FeedFetcher(transport=httpx.MockTransport(handler))

        with pytest.raises(FetchError) as exc_info:
            await fetcher.fetch(FEED_URL)

        assert exc_info.value.status_code == 503
        assert exc_info.value.reason == "Service Unavailable"
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_segue_redirecionamento(self):
        """Location é seguido até o conteúdo."""
        transport = redirect_transport({
            "https://old.example.com/feed.xml": (301, {"Location": FEED_URL}, b""),
            FEED_URL: (200, {}, b"<rss/>"),
        })
        fetcher = FeedFetcher(transport=transport)

        assert await fetcher.fetch("https://old.example.com/feed.xml") == b"<rss/>"

    @pytest.mark.asyncio
    async def test_redirecionamento_relativo(self):
        """Location relativo é resolvido contra a URL atual."""
        transport = redirect_transport({
            "https://feeds.example.com/old.xml": (302, {"Location": "/products.xml"}, b""),
            FEED_URL: (200, {}, b"<rss/>"),
        })
        fetcher = FeedFetcher(transport=transport)

        assert await fetcher.fetch("https://feeds.example.com/old.xml") == b"<rss/>"

    @pytest.mark.asyncio
    async def test_location_em_resposta_200(self):
        """200 com Location também é seguido."""
        transport = redirect_transport({
            "https://cdn.example.com/feed.xml": (200, {"Location": FEED_URL}, b"ignorado"),
            FEED_URL: (200, {}, b"<rss/>"),
        })
        fetcher = FeedFetcher(transport=transport)

        assert await fetcher.fetch("https://cdn.example.com/feed.xml") == b"<rss/>"

    @pytest.mark.asyncio
    async def test_limite_de_redirecionamentos(self):
        """Loop de redirecionamento termina em FetchError."""
        transport = redirect_transport({
            "https://a.example.com/": (302, {"Location": "https://b.example.com/"}, b""),
            "https://b.example.com/": (302, {"Location": "https://a.example.com/"}, b""),
        })
        fetcher = FeedFetcher(max_redirects=3, transport=transport)

        with pytest.raises(FetchError) as exc_info:
            await fetcher.fetch("https://a.example.com/")

        assert "3" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_erro_de_transporte(self):
        """Falha de conexão vira TransportError com a causa."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Name or service not known", request=request)

        fetcher = FeedFetcher(transport=httpx.MockTransport(handler))

        with pytest.raises(TransportError) as exc_info:
            await fetcher.fetch(FEED_URL)

        assert isinstance(exc_info.value.cause, httpx.ConnectError)
        assert exc_info.value.url == FEED_URL

    @pytest.mark.asyncio
    async def test_progresso(self):
        """Observador é chamado a cada marco de tamanho."""
        body = "x" * 2500
        progress: list[int] = []
        fetcher = FeedFetcher(
            transport=feed_transport(body=body),
            progress_step_bytes=1000,
            on_progress=progress.append,
        )

        result = await fetcher.fetch(FEED_URL)

        assert result == body.encode("utf-8")
        assert progress
        assert all(size >= 1000 for size in progress)
        assert progress == sorted(progress)

    @pytest.mark.asyncio
    async def test_sem_progresso_abaixo_do_marco(self):
        """Arquivo menor que o marco não notifica."""
        progress: list[int] = []
        fetcher = FeedFetcher(
            transport=feed_transport(body="<rss/>"),
            on_progress=progress.append,
        )

        await fetcher.fetch(FEED_URL)

        assert progress == []
