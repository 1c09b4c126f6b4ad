"""
Configurações e fixtures compartilhadas para pytest.
"""

from datetime import datetime, timezone
from pathlib import Path

import pytest

from config.settings import Settings
from feed_catalog.core.models import Product, RawItem
from tests.fixtures.factories import FEED_URL, make_product


# FIXTURES DE DIRETÓRIOS

@pytest.fixture
def temp_output_dir(tmp_path) -> Path:
    """Diretório temporário (ainda inexistente) para os artefatos."""
    return tmp_path / "public"


# FIXTURES DE ITENS BRUTOS

@pytest.fixture
def raw_item_completo() -> RawItem:
    """Item bruto com todos os campos."""
    return RawItem(
        position=0,
        fields={
            "g:id": "SDL-001",
            "title": "Sedlo &amp; podložka",
            "description": "Kůže&nbsp;&quot;Premium&quot;",
            "link": "https://www.horsimo.cz/sedlo",
            "g:image_link": "https://www.horsimo.cz/img/sedlo.jpg",
            "g:price": "6000.00 CZK",
        },
    )


@pytest.fixture
def raw_item_vazio() -> RawItem:
    """Item bruto sem nenhum campo."""
    return RawItem(position=7, fields={})


# FIXTURES DE PRODUTOS

@pytest.fixture
def products_mixed() -> list[Product]:
    """Produtos com preços válidos e inválidos, fora de ordem."""
    return [
        make_product("1000.00 CZK"),
        make_product("N/A"),
        make_product("6000.00 CZK"),
        make_product("450,50 CZK"),
        make_product("2500.00 CZK"),
    ]


@pytest.fixture
def generated_at() -> datetime:
    """Timestamp fixo para o manifesto."""
    return datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


# FIXTURES DE CONFIGURAÇÃO

@pytest.fixture
def settings_override(temp_output_dir) -> Settings:
    """Settings de teste apontando para diretório temporário."""
    return Settings(
        _env_file=None,
        env="testing",
        feed_url=FEED_URL,
        output_path=temp_output_dir,
        affiliate_id="123",
    )
