"""
Download do feed via HTTP.
Segue redirecionamentos com limite explícito e reporta progresso
por meio de um observador injetável.
"""

from typing import Optional
from urllib.parse import urljoin

import httpx

from config.logging_config import LoggerMixin
from feed_catalog.core.exceptions import FetchError, TransportError
from feed_catalog.core.types import ProgressCallback

MEGABYTE = 1024 * 1024


class FeedFetcher(LoggerMixin):
    """
    Cliente HTTP do feed.
    Uma única tentativa por URL: sem retries, apenas saltos de redirecionamento.
    """

    def __init__(
        self,
        timeout: float = 60.0,
        max_redirects: int = 5,
        user_agent: Optional[str] = None,
        progress_step_bytes: int = 10 * MEGABYTE,
        on_progress: Optional[ProgressCallback] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Inicializa o fetcher.

        Args:
            timeout: Timeout de leitura em segundos
            max_redirects: Máximo de redirecionamentos seguidos
            user_agent: User-Agent enviado ao servidor
            progress_step_bytes: Intervalo entre notificações de progresso
            on_progress: Observador chamado com o total de bytes baixados
            transport: Transport httpx alternativo (testes)
        """
        self.timeout = httpx.Timeout(timeout, connect=10.0)
        self.max_redirects = max_redirects
        self.headers = {"User-Agent": user_agent} if user_agent else {}
        self.progress_step_bytes = progress_step_bytes
        self.on_progress = on_progress or self._log_progress
        self.transport = transport

    async def fetch(self, url: str) -> bytes:
        """
        Baixa o feed e retorna o corpo sem decodificar.

        O encoding fica a cargo do parser XML, que lê o prólogo
        (<?xml encoding="..."?>) e usa UTF-8 quando não há declaração.

        Args:
            url: URL do feed

        Returns:
            Bytes da resposta

        Raises:
            FetchError: Status HTTP de erro ou limite de redirecionamentos
            TransportError: Falha de rede (DNS, conexão, timeout)
        """
        current_url = url

        async with httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=False,
            headers=self.headers,
            transport=self.transport,
        ) as client:
            for hop in range(self.max_redirects + 1):
                self.logger.info("Baixando feed", url=current_url, hop=hop)

                try:
                    async with client.stream("GET", current_url) as response:
                        location = response.headers.get("location")

                        # 2xx com Location também é tratado como redirecionamento
                        if location and (response.is_redirect or response.is_success):
                            current_url = urljoin(current_url, location)
                            self.logger.info(
                                "Seguindo redirecionamento",
                                status=response.status_code,
                                location=current_url,
                            )
                            continue

                        if not response.is_success:
                            raise FetchError(
                                f"Falha ao baixar o feed: {response.status_code} "
                                f"{response.reason_phrase}",
                                status_code=response.status_code,
                                reason=response.reason_phrase,
                                url=current_url,
                            )

                        return await self._read_body(response)

                except (httpx.HTTPError, httpx.InvalidURL) as e:
                    raise TransportError(
                        f"Erro ao baixar o feed: {e}",
                        url=current_url,
                        cause=e,
                    ) from e

        raise FetchError(
            f"Limite de {self.max_redirects} redirecionamentos excedido",
            url=url,
            details={"last_location": current_url},
        )

    async def _read_body(self, response: httpx.Response) -> bytes:
        """Lê o corpo em streaming, notificando o observador a cada marco."""
        body = bytearray()
        next_milestone = self.progress_step_bytes

        async for chunk in response.aiter_bytes():
            body.extend(chunk)
            if len(body) >= next_milestone:
                self.on_progress(len(body))
                next_milestone = (len(body) // self.progress_step_bytes + 1) * self.progress_step_bytes

        self.logger.info(
            "Download concluído",
            size_mb=round(len(body) / MEGABYTE, 2),
            content_type=response.headers.get("content-type"),
        )
        return bytes(body)

    def _log_progress(self, downloaded: int) -> None:
        """Observador padrão: registra o tamanho baixado em MB."""
        self.logger.info(
            "Download em andamento",
            downloaded_mb=round(downloaded / MEGABYTE, 2),
        )
