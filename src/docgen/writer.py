"""Write the index and interface pages of an API model to disk."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from docgen.logger import get_logger

if TYPE_CHECKING:
    from docgen.backends.base import PrinterFactory
    from docgen.models import ApiModel, InterfaceInfo
    from docgen.printer import ApiDocPrinter

logger = get_logger()


class DocsWriter:
    """Enumerate the pages of an API model and write them to a directory.

    File names come from the printer dialect, so links emitted by the printer
    (page_link, index_link) resolve to the files written here.
    """

    def __init__(self, doc_printer: ApiDocPrinter, printer_factory: PrinterFactory):
        self.doc_printer = doc_printer
        self.printer_factory = printer_factory

    def interface_pages(self, api_model: ApiModel) -> list[InterfaceInfo]:
        """Get interfaces implemented by at least one API, in first-seen order."""
        seen: set[str] = set()
        pages: list[InterfaceInfo] = []
        for api in api_model.apis:
            for ref in api.interfaces:
                if ref.id in seen:
                    continue
                seen.add(ref.id)
                interface = api_model.get_interface_by_id(ref.id)
                if interface is None:
                    logger.warning("API %s implements unknown interface %s", api.id, ref.id)
                    continue
                pages.append(interface)
        logger.checks("Found %d interface pages", len(pages))
        return pages

    def write(self, api_model: ApiModel, output_dir: Path) -> list[Path]:
        """Write the index and one page per implemented interface.

        Returns:
            Paths of all written files, index first
        """
        output_dir.mkdir(parents=True, exist_ok=True)
        naming = self.printer_factory()

        written: list[Path] = []

        index_path = output_dir / naming.index_file_name
        index_path.write_bytes(self.doc_printer.print_api_index(api_model.apis))
        logger.changes("Wrote %s", index_path)
        written.append(index_path)

        for interface in self.interface_pages(api_model):
            page_path = output_dir / naming.page_file_name(interface.name)
            page_path.write_bytes(self.doc_printer.print_interface(interface, api_model.apis))
            logger.changes("Wrote %s", page_path)
            written.append(page_path)

        return written
