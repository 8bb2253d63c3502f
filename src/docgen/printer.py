"""Render an API documentation model into cross-linked markdown pages."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cmp_to_key
from typing import TYPE_CHECKING

from docgen.config import IndexConfig
from docgen.logger import get_logger
from docgen.sorting import sort_selector

if TYPE_CHECKING:
    from docgen.backends.base import MarkdownPrinter, PrinterFactory
    from docgen.models import ApiDoc, InterfaceInfo

logger = get_logger()

SUPPORTING_TYPES_INTRO = (
    "These types are part of the API declaration, but may not be unique to this API."
)


class ApiDocPrinter:
    """Print ApiDoc data, typically produced by an API extractor, as markdown.

    Every print method obtains a fresh printer from the factory, so no state is
    shared between documents. Inverse relationships (which APIs implement a
    type, which members reference a supporting type) are derived from the model
    on each call.
    """

    def __init__(self, printer_factory: PrinterFactory, index_config: IndexConfig | None = None):
        """Initialize with a printer factory.

        Args:
            printer_factory: Called once per document to obtain an output surface
            index_config: Title and intro for the index page
        """
        self.printer_factory = printer_factory
        self.index_config = index_config or IndexConfig()

    def print_api_index(self, api_docs: Sequence[ApiDoc]) -> bytes:
        """Print an index page with all ApiRefs and the types they implement."""
        printer = self.printer_factory()
        logger.debug("Rendering index of %d APIs", len(api_docs))

        printer.header(1, self.index_config.title)
        printer.paragraph(*self.index_config.intro)

        for api in api_docs:
            printer.header(3, api.display_name, api.id)

            printer.paragraph(api.description)

            type_links = [f"[{ref.name}]({printer.page_link(ref.name)})" for ref in api.interfaces]
            plural = "" if len(type_links) == 1 else "s"
            printer.paragraph(f"Implemented type{plural}: ", ", ".join(type_links))

            printer.paragraph("ApiRef: ", printer.src_link(api, api.name))

        return printer.finalize()

    def print_interface(self, api_type: InterfaceInfo, api_docs: Sequence[ApiDoc]) -> bytes:
        """Print the documentation page of a type implemented by one or more ApiRefs."""
        printer = self.printer_factory()
        logger.debug("Rendering page for %s", api_type.name)

        printer.header(1, api_type.name)

        printer.paragraph(f"The {api_type.name} type is defined at {printer.src_link(api_type)}.")

        api_links = [
            f"[{api.name}]({printer.index_link()}"
            f"{printer.header_link(api.display_name, api.id)})"
            for api in api_docs
            if api_type.id in api.interface_ids
        ]

        if len(api_links) == 1:
            printer.paragraph("The following Utility API implements this type: ", api_links[0])
        else:
            printer.paragraph("The following Utility APIs implement this type:")
            for link in api_links:
                printer.text(f"  - {link}")

        printer.header(2, "Members")
        self._add_interface_members(printer, api_type)

        if api_type.dependent_types:
            printer.header(2, "Supporting types")
            printer.paragraph(SUPPORTING_TYPES_INTRO)
            self._add_interface_types(printer, api_type)

        return printer.finalize()

    def _add_interface_members(self, printer: MarkdownPrinter, api_type: InterfaceInfo) -> None:
        for member in api_type.members:
            suffix = "()" if member.is_method else ""
            printer.header(3, f"{member.name}{suffix}", member.path)

            for doc in member.docs:
                printer.text(doc)

            printer.code(member)

    def _add_interface_types(self, printer: MarkdownPrinter, api_type: InterfaceInfo) -> None:
        # Dependent types arrive in discovery order; present them alphabetically
        sorted_types = sorted(
            api_type.dependent_types, key=cmp_to_key(sort_selector(lambda t: t.name))
        )
        referrers = [*api_type.members, *api_type.dependent_types]

        for dep_type in sorted_types:
            printer.header(3, dep_type.name, dep_type.path)

            for doc in dep_type.docs:
                printer.text(doc)
            printer.code(dep_type)

            printer.paragraph(f"Defined at {printer.src_link(dep_type)}.")

            usage_links = [
                f"[{ref.name}]({printer.header_link(ref.name, ref.path)})"
                for ref in referrers
                if any(link.id == dep_type.id for link in ref.links)
            ]
            if usage_links:
                printer.paragraph(f"Referenced by: {', '.join(usage_links)}.")
