"""
Exportador de catálogo a partir de feed de produtos (RSS/XML).
"""

__version__ = "1.0.0"
