"""
Testes de integração para a CLI.
"""

import json
import sys

import pytest
import structlog
from typer.testing import CliRunner

from feed_catalog import __version__, cli
from feed_catalog.core.exceptions import FetchError
from feed_catalog.exporter import CatalogExporter
from feed_catalog.fetcher import FeedFetcher
from tests.fixtures.factories import feed_transport

runner = CliRunner()


class TestCli:
    """Testes para os comandos da CLI."""

    @pytest.fixture(autouse=True)
    def cli_env(self, monkeypatch, settings_override):
        """Settings de teste, logging padrão e HTTP simulado."""
        monkeypatch.setattr(cli, "get_settings", lambda: settings_override)
        monkeypatch.setattr(
            cli,
            "setup_logging",
            lambda **kwargs: structlog.configure(
                logger_factory=structlog.PrintLoggerFactory(file=sys.stderr)
            ),
        )

        def exporter_factory(settings):
            return CatalogExporter(settings, fetcher=FeedFetcher(transport=feed_transport()))

        monkeypatch.setattr(cli, "CatalogExporter", exporter_factory)
        yield
        structlog.reset_defaults()

    def test_export_sucesso(self, temp_output_dir):
        """Exportação bem-sucedida termina com código 0."""
        result = runner.invoke(cli.app, ["export"])

        assert result.exit_code == 0
        assert (temp_output_dir / "products.json").exists()
        assert "Exportação Concluída" in result.stdout

    def test_export_saida_json(self, temp_output_dir):
        """--json imprime o resumo da execução."""
        result = runner.invoke(cli.app, ["export", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["manifest"]["totalProducts"] == 3

    def test_export_opcoes_sobrescrevem(self, tmp_path):
        """--output e --affiliate-id substituem as configurações."""
        output = tmp_path / "outro"

        result = runner.invoke(
            cli.app,
            ["export", "--output", str(output), "--affiliate-id", "999"],
        )

        assert result.exit_code == 0
        products = json.loads((output / "products.json").read_text(encoding="utf-8"))
        assert products[0]["url"].endswith("aff_id=999")

    def test_export_erro(self, monkeypatch, temp_output_dir):
        """Erro do exportador termina com código 1 e sem arquivos."""

        async def failing_run(self, feed_url=None):
            raise FetchError("Falha ao baixar o feed: 404 Not Found", status_code=404)

        monkeypatch.setattr(CatalogExporter, "run", failing_run)

        result = runner.invoke(cli.app, ["export"])

        assert result.exit_code == 1
        assert "404" in result.stdout
        assert not temp_output_dir.exists()

    def test_log_level_invalido(self, temp_output_dir):
        """Nível fora da lista é recusado antes de configurar o logging."""
        result = runner.invoke(cli.app, ["export", "--log-level", "verbose"])

        assert result.exit_code == 2
        assert isinstance(result.exception, SystemExit)
        assert not temp_output_dir.exists()

    def test_log_level_minusculo(self, monkeypatch):
        """O nível é aceito sem diferenciar maiúsculas."""
        levels = []
        monkeypatch.setattr(
            cli, "setup_logging", lambda level, **kwargs: levels.append(level)
        )

        result = runner.invoke(cli.app, ["export", "--log-level", "debug"])

        assert result.exit_code == 0
        assert levels == ["DEBUG"]

    @pytest.mark.parametrize("affiliate_id", ["", "  "])
    def test_affiliate_id_vazio(self, temp_output_dir, affiliate_id):
        """ID de afiliado vazio falha na validação com código 1."""
        result = runner.invoke(cli.app, ["export", "--affiliate-id", affiliate_id])

        assert result.exit_code == 1
        assert "affiliate_id" in result.stdout
        assert not temp_output_dir.exists()

    def test_max_redirects_fora_do_limite(self, temp_output_dir):
        """Limites declarados nas configurações valem para as opções."""
        result = runner.invoke(cli.app, ["export", "--max-redirects", "50"])

        assert result.exit_code == 1
        assert "max_redirects" in result.stdout
        assert not temp_output_dir.exists()

    def test_version(self):
        """Comando version mostra a versão do pacote."""
        result = runner.invoke(cli.app, ["version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout
