"""Printer factory selection from configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from docgen.backends.github import GithubMarkdownPrinter
from docgen.backends.techdocs import TechdocsMarkdownPrinter

if TYPE_CHECKING:
    from docgen.backends.base import MarkdownPrinter, PrinterFactory
    from docgen.config import PrinterConfig


def create_printer_factory(config: PrinterConfig) -> PrinterFactory:
    """Create a factory producing a fresh printer of the configured dialect.

    Raises:
        ValueError: If the configured format is unknown
    """
    if config.format == "github":

        def make_github() -> MarkdownPrinter:
            return GithubMarkdownPrinter(config.source_base_url)

        return make_github

    if config.format == "techdocs":

        def make_techdocs() -> MarkdownPrinter:
            return TechdocsMarkdownPrinter(config.source_base_url, config.code_language)

        return make_techdocs

    raise ValueError(f"Unknown printer format: {config.format}")
