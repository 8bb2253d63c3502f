"""Pydantic schemas for serialized API model data."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from .models import MemberKind


class TypeLinkSchema(BaseModel):
    """Schema for a link from a snippet to another type."""

    id: str
    path: str = ""
    name: str = ""
    location: tuple[int, int] | None = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id_to_string(cls, v: Any) -> str:
        """Numeric ids are common in extractor output."""
        return str(v)


def _ensure_str_list(v: Any) -> list[str]:
    if v is None:
        return []
    if isinstance(v, list):
        return [str(item) for item in v]  # type: ignore[misc]
    return [str(v)]


class FieldSchema(BaseModel):
    """Schema for an interface member."""

    name: str
    kind: MemberKind = MemberKind.PROP
    path: str
    text: str = ""
    docs: list[str] = Field(default_factory=list)
    links: list[TypeLinkSchema] = Field(default_factory=list)

    @field_validator("links", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        """Treat a null list as empty."""
        return [] if v is None else v

    @field_validator("docs", mode="before")
    @classmethod
    def ensure_docs_list(cls, v: Any) -> list[str]:
        """Ensure value is a list."""
        return _ensure_str_list(v)


class TypeSchema(BaseModel):
    """Schema for a supporting (dependent) type."""

    id: str
    name: str
    path: str
    file: str
    line_in_file: int = 1
    text: str = ""
    docs: list[str] = Field(default_factory=list)
    links: list[TypeLinkSchema] = Field(default_factory=list)

    @field_validator("links", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        """Treat a null list as empty."""
        return [] if v is None else v

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id_to_string(cls, v: Any) -> str:
        """Numeric ids are common in extractor output."""
        return str(v)

    @field_validator("docs", mode="before")
    @classmethod
    def ensure_docs_list(cls, v: Any) -> list[str]:
        """Ensure value is a list."""
        return _ensure_str_list(v)


class InterfaceSchema(BaseModel):
    """Schema for an interface type."""

    id: str
    name: str
    file: str
    line_in_file: int = 1
    members: list[FieldSchema] = Field(default_factory=list)
    dependent_types: list[TypeSchema] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id_to_string(cls, v: Any) -> str:
        """Numeric ids are common in extractor output."""
        return str(v)

    @field_validator("members", "dependent_types", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        """Treat a null list as empty."""
        return [] if v is None else v


class ApiSchema(BaseModel):
    """Schema for a Utility API entry."""

    id: str
    name: str
    description: str = ""
    file: str
    line_in_file: int = 1
    interfaces: list[str] = Field(default_factory=list)  # Interface ids

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id_to_string(cls, v: Any) -> str:
        """Numeric ids are common in extractor output."""
        return str(v)

    @field_validator("description", mode="before")
    @classmethod
    def none_to_blank(cls, v: Any) -> str:
        """Missing descriptions render as an empty paragraph."""
        return "" if v is None else str(v)

    @field_validator("interfaces", mode="before")
    @classmethod
    def ensure_list(cls, v: Any) -> list[str]:
        """Ensure value is a list."""
        return _ensure_str_list(v)


class ApiModelSchema(BaseModel):
    """Schema for the entire serialized API model."""

    apis: list[ApiSchema] = Field(default_factory=list)
    interfaces: list[InterfaceSchema] = Field(default_factory=list)
