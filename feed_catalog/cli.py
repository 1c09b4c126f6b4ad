"""
Interface de linha de comando (CLI) do Feed Catalog.
Usa Typer para uma experiência moderna e rica.
"""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from config.logging_config import get_logger, setup_logging
from config.settings import Settings, get_settings
from feed_catalog.core.exceptions import FeedCatalogError
from feed_catalog.core.models import ExportResult
from feed_catalog.core.types import LogLevel
from feed_catalog.exporter import CatalogExporter

# Inicializa CLI
app = typer.Typer(
    name="feed-catalog",
    help="Exporta um feed de produtos (RSS/XML) para arquivos JSON estáticos.",
    add_completion=False,
)

# Console Rico para output formatado
console = Console()


def run_async(coro):
    """Helper para executar corrotinas."""
    return asyncio.run(coro)


@app.command("export")
def export(
    url: Optional[str] = typer.Option(None, "--url", "-u", help="URL do feed"),
    affiliate_id: Optional[str] = typer.Option(None, "--affiliate-id", "-a", help="ID de afiliado"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Diretório de saída"),
    max_redirects: Optional[int] = typer.Option(None, "--max-redirects", min=0, help="Limite de redirecionamentos"),
    log_level: Optional[LogLevel] = typer.Option(None, "--log-level", "-l", case_sensitive=False, help="Nível de log"),
    json_logs: bool = typer.Option(False, "--json-logs", help="Logs em formato JSON"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Resumo em formato JSON"),
):
    """
    Baixa o feed, processa os produtos e grava os arquivos JSON.

    Exemplos:
        feed-catalog export
        feed-catalog export --output public --affiliate-id 456
        feed-catalog export --url https://example.com/feed.xml --json
    """
    overrides = {
        "feed_url": url,
        "affiliate_id": affiliate_id,
        "output_path": output,
        "max_redirects": max_redirects,
        "log_level": log_level.value if log_level else None,
    }

    try:
        settings = _build_settings(overrides)
    except ValidationError as e:
        console.print("[red]✗ Configuração inválida[/red]")
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            console.print(f"  [red]{field}: {escape(error['msg'])}[/red]")
        raise typer.Exit(code=1)

    setup_logging(level=settings.log_level, json_format=json_logs)
    logger = get_logger("cli")

    try:
        result = run_async(CatalogExporter(settings).run())
    except FeedCatalogError as e:
        logger.error("Erro na exportação", **e.to_dict())
        console.print(f"[red]✗ {e.message}[/red]")
        raise typer.Exit(code=1)

    if json_output:
        console.print_json(result.model_dump_json(by_alias=True))
        return

    _display_result(result)


@app.command("version")
def version():
    """
    Exibe a versão do sistema.
    """
    from feed_catalog import __version__

    console.print(f"[bold blue]Feed Catalog[/bold blue] v{__version__}")


def _build_settings(overrides: dict) -> Settings:
    """
    Aplica as opções da linha de comando sobre as configurações carregadas.

    Raises:
        ValidationError: Se algum valor final for inválido
    """
    values = get_settings().model_dump()
    values.update({key: value for key, value in overrides.items() if value is not None})
    return Settings.model_validate(values)


# FUNÇÕES DE DISPLAY

def _display_result(result: ExportResult):
    """Exibe resumo da exportação formatado."""
    manifest = result.manifest

    console.print()
    console.print(Panel(
        f"[bold]Feed:[/bold] {result.source_url}\n"
        f"[bold]Produtos:[/bold] {manifest.total_products}\n"
        f"[bold]Arquivos:[/bold] {len(result.files)}\n"
        f"[bold]Duração:[/bold] {result.duration_seconds or 0:.2f}s",
        title="📦 Exportação Concluída",
        border_style="green",
    ))

    if not manifest.categories:
        console.print("[yellow]Nenhum produto encontrado.[/yellow]")
        return

    table = Table(title="Categorias")
    table.add_column("Categoria", style="cyan")
    table.add_column("Produtos", justify="right", style="green")
    table.add_column("Arquivo", style="blue")

    for category in manifest.categories:
        table.add_row(category.name, str(category.count), category.file)

    console.print(table)


# ENTRY POINT

def main():
    """Entry point principal."""
    app()


if __name__ == "__main__":
    main()
