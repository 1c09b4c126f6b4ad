"""Permite executar com `python -m feed_catalog`."""

from feed_catalog.cli import main

main()
