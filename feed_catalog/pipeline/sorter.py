"""
Conversão de preço e ordenação do catálogo.
Produtos são ordenados do mais caro para o mais barato.
"""

import math
from functools import cmp_to_key
from typing import Optional

from feed_catalog.core.constants import PRICE_NUMBER_PATTERN, PRICE_STRIP_PATTERN
from feed_catalog.core.models import Product


def parse_price(price_raw: Optional[str]) -> float:
    """
    Converte string de preço para float.

    Remove tudo que não é dígito, vírgula ou ponto, troca a primeira
    vírgula por ponto e lê o número decimal do início da string.

    Exemplos:
        "1000.00 CZK" -> 1000.0
        "12,99 €" -> 12.99
        "€1,200.00" -> 1.2 (a vírgula é tratada como separador decimal)
        "N/A" -> nan
    """
    if not price_raw:
        return math.nan

    cleaned = PRICE_STRIP_PATTERN.sub("", price_raw).replace(",", ".", 1)
    match = PRICE_NUMBER_PATTERN.match(cleaned)
    if match is None:
        return math.nan
    return float(match.group(0))


def compare_by_price(a: Product, b: Product) -> int:
    """
    Comparador do mais caro para o mais barato.

    Preço inválido perde a comparação: se o de b é inválido, a vem antes;
    senão, se o de a é inválido, b vem antes. Com vários preços inválidos
    a ordem entre eles depende do algoritmo de ordenação.
    """
    price_a = parse_price(a.price)
    price_b = parse_price(b.price)

    if math.isnan(price_b):
        return -1
    if math.isnan(price_a):
        return 1
    if price_b > price_a:
        return 1
    if price_b < price_a:
        return -1
    return 0


def sort_by_price(products: list[Product]) -> list[Product]:
    """Retorna nova lista ordenada por preço decrescente."""
    return sorted(products, key=cmp_to_key(compare_by_price))
