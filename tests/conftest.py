"""Pytest configuration and fixtures for docgen tests."""

from __future__ import annotations

from typing import Any

import pytest

from docgen import logger
from docgen.backends.base import CodeSnippet, SourceRef
from docgen.models import (
    ApiDoc,
    FieldInfo,
    InterfaceInfo,
    InterfaceRef,
    MemberKind,
    TypeInfo,
    TypeLink,
)


class RecordingPrinter:
    """In-memory output surface that records every structural call.

    Link helpers return recognizable tokens so tests can assert on how links
    were composed without depending on a concrete markdown dialect.
    """

    index_file_name = "INDEX.md"

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []
        self.finalized = False

    def page_file_name(self, name: str) -> str:
        return f"{name}.page"

    def header(self, level: int, text: str, anchor: str | None = None) -> None:
        self.calls.append(("header", level, text, anchor))

    def paragraph(self, *fragments: str) -> None:
        self.calls.append(("paragraph", "".join(fragments)))

    def text(self, line: str) -> None:
        self.calls.append(("text", line))

    def code(self, snippet: CodeSnippet) -> None:
        self.calls.append(("code", snippet.text))

    def src_link(self, location: SourceRef, text: str | None = None) -> str:
        return f"<src {location.file}:{location.line_in_file} {text}>"

    def page_link(self, name: str) -> str:
        return f"<page {name}>"

    def header_link(self, header: str, anchor: str | None = None) -> str:
        return f"<#{header}|{anchor}>"

    def index_link(self) -> str:
        return "<index>"

    def finalize(self) -> bytes:
        self.finalized = True
        return "\n".join(repr(call) for call in self.calls).encode()

    # Query helpers

    def headers(self, level: int | None = None) -> list[tuple[str, str | None]]:
        return [
            (call[2], call[3])
            for call in self.calls
            if call[0] == "header" and (level is None or call[1] == level)
        ]

    def paragraphs(self) -> list[str]:
        return [call[1] for call in self.calls if call[0] == "paragraph"]

    def texts(self) -> list[str]:
        return [call[1] for call in self.calls if call[0] == "text"]


class Recorder:
    """Printer factory that keeps every printer it created."""

    def __init__(self) -> None:
        self.printers: list[RecordingPrinter] = []

    def __call__(self) -> RecordingPrinter:
        printer = RecordingPrinter()
        self.printers.append(printer)
        return printer

    @property
    def last(self) -> RecordingPrinter:
        return self.printers[-1]


@pytest.fixture
def recorder() -> Recorder:
    """Printer factory recording all calls."""
    return Recorder()


@pytest.fixture(autouse=True)
def clean_logger() -> None:
    """Reset logger state between tests."""
    logger.reset_logger()


def make_api(api_id: str, name: str, *interfaces: InterfaceInfo, description: str = "") -> ApiDoc:
    """Build an ApiDoc implementing the given interfaces."""
    return ApiDoc(
        id=api_id,
        name=name,
        description=description,
        file=f"src/{name}.ts",
        line_in_file=10,
        interfaces=tuple(InterfaceRef(id=i.id, name=i.name) for i in interfaces),
    )


def make_type(type_id: str, name: str, *linked: str) -> TypeInfo:
    """Build a supporting type linking to the given type ids."""
    return TypeInfo(
        id=type_id,
        name=name,
        path=f"path-{name}",
        file="src/types.ts",
        line_in_file=5,
        text=f"type {name} = {{}}",
        docs=(f"Docs for {name}.",),
        links=tuple(TypeLink(id=target) for target in linked),
    )


def make_member(name: str, kind: MemberKind = MemberKind.METHOD, *linked: str) -> FieldInfo:
    """Build an interface member linking to the given type ids."""
    return FieldInfo(
        name=name,
        kind=kind,
        path=f"member-{name}",
        text=f"{name}(): void",
        docs=(f"Docs for {name}.",),
        links=tuple(TypeLink(id=target) for target in linked),
    )

