"""Data models for docgen.

The model is produced upstream by API extraction and is read-only for the
duration of every render call.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

# Conventional suffix on ApiRef names, stripped for display
API_REF_SUFFIX = "ApiRef"

_API_REF_SUFFIX_RE = re.compile(rf"{API_REF_SUFFIX}$")


def api_display_name(name: str) -> str:
    """Strip a single trailing ApiRef marker from an API name.

    Example:
        api_display_name("errorApiRef") -> "error"
    """
    return _API_REF_SUFFIX_RE.sub("", name)


class MemberKind(str, Enum):
    """Kind of interface member."""

    METHOD = "method"
    PROP = "prop"


@dataclass(frozen=True)
class SourceLocation:
    """Position of a declaration in the documented repository."""

    file: str
    line_in_file: int = 1


@dataclass(frozen=True)
class TypeLink:
    """Reference from a code snippet to another documented type.

    ``location`` is the (start, end) character span inside the snippet text
    that should be highlighted as a link, if known.
    """

    id: str
    path: str = ""
    name: str = ""
    location: tuple[int, int] | None = None


@dataclass(frozen=True)
class InterfaceRef:
    """An interface type implemented by an API."""

    id: str
    name: str


@dataclass(frozen=True)
class FieldInfo:
    """A member of an interface type."""

    name: str
    kind: MemberKind
    path: str
    text: str = ""
    docs: tuple[str, ...] = ()
    links: tuple[TypeLink, ...] = ()

    @property
    def is_method(self) -> bool:
        return self.kind is MemberKind.METHOD


@dataclass(frozen=True)
class TypeInfo:
    """A supporting type that is part of an interface declaration."""

    id: str
    name: str
    path: str
    file: str
    line_in_file: int = 1
    text: str = ""
    docs: tuple[str, ...] = ()
    links: tuple[TypeLink, ...] = ()


@dataclass(frozen=True)
class InterfaceInfo:
    """An interface type documented on its own page."""

    id: str
    name: str
    file: str
    line_in_file: int = 1
    members: tuple[FieldInfo, ...] = ()
    dependent_types: tuple[TypeInfo, ...] = ()


@dataclass(frozen=True)
class ApiDoc:
    """A Utility API and the interface types it implements."""

    id: str
    name: str
    description: str
    file: str
    line_in_file: int = 1
    interfaces: tuple[InterfaceRef, ...] = ()

    @property
    def display_name(self) -> str:
        return api_display_name(self.name)

    @property
    def interface_ids(self) -> set[str]:
        """Get just the IDs of implemented interfaces."""
        return {ref.id for ref in self.interfaces}


def _default_apis() -> list[ApiDoc]:
    return []


def _default_interfaces() -> list[InterfaceInfo]:
    return []


@dataclass
class ApiModel:
    """Complete documentation model: all APIs and all interface types."""

    apis: list[ApiDoc] = field(default_factory=_default_apis)
    interfaces: list[InterfaceInfo] = field(default_factory=_default_interfaces)

    def get_interface_by_id(self, interface_id: str) -> InterfaceInfo | None:
        """Get an interface type by its ID."""
        for interface in self.interfaces:
            if interface.id == interface_id:
                return interface
        return None
