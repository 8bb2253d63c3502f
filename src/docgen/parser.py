"""YAML/JSON parser for serialized API models."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from .exceptions import MissingReferenceError, ParseError, ValidationError
from .logger import get_logger
from .models import (
    ApiDoc,
    ApiModel,
    FieldInfo,
    InterfaceInfo,
    InterfaceRef,
    TypeInfo,
    TypeLink,
)
from .schemas import ApiModelSchema, TypeLinkSchema

logger = get_logger()


def _to_links(links: list[TypeLinkSchema]) -> tuple[TypeLink, ...]:
    return tuple(
        TypeLink(id=link.id, path=link.path, name=link.name, location=link.location)
        for link in links
    )


class ApiModelParser:
    """Parser for serialized API model files.

    JSON is a subset of YAML, so both formats go through ``yaml.safe_load``.
    For loading with config discovery and validation, use load_api_model()
    from docgen.loader.
    """

    def parse_file(self, file_path: Path | str) -> ApiModel:
        """Parse a YAML or JSON file into an ApiModel."""
        path = Path(file_path)
        if not path.exists():
            raise ParseError(f"File not found: {file_path}")

        try:
            with path.open(encoding="utf-8") as f:
                data: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ParseError(f"Failed to parse YAML: {e}") from e

        if not isinstance(data, dict):
            raise ParseError("API model must contain a dictionary at the root level")

        return self.parse_data(data)  # type: ignore[arg-type]

    def parse_data(self, data: dict[str, Any]) -> ApiModel:
        """Convert already-loaded data into an ApiModel."""
        try:
            schema = ApiModelSchema(**data)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid API model structure: {e}") from e

        interfaces: list[InterfaceInfo] = []
        for iface in schema.interfaces:
            members = tuple(
                FieldInfo(
                    name=m.name,
                    kind=m.kind,
                    path=m.path,
                    text=m.text,
                    docs=tuple(m.docs),
                    links=_to_links(m.links),
                )
                for m in iface.members
            )
            dependent_types = tuple(
                TypeInfo(
                    id=t.id,
                    name=t.name,
                    path=t.path,
                    file=t.file,
                    line_in_file=t.line_in_file,
                    text=t.text,
                    docs=tuple(t.docs),
                    links=_to_links(t.links),
                )
                for t in iface.dependent_types
            )
            interfaces.append(
                InterfaceInfo(
                    id=iface.id,
                    name=iface.name,
                    file=iface.file,
                    line_in_file=iface.line_in_file,
                    members=members,
                    dependent_types=dependent_types,
                )
            )

        names_by_id = {iface.id: iface.name for iface in interfaces}

        apis: list[ApiDoc] = []
        for api in schema.apis:
            refs: list[InterfaceRef] = []
            for interface_id in api.interfaces:
                if interface_id not in names_by_id:
                    raise MissingReferenceError(
                        f"API {api.id} implements unknown interface: {interface_id}"
                    )
                refs.append(InterfaceRef(id=interface_id, name=names_by_id[interface_id]))
            apis.append(
                ApiDoc(
                    id=api.id,
                    name=api.name,
                    description=api.description,
                    file=api.file,
                    line_in_file=api.line_in_file,
                    interfaces=tuple(refs),
                )
            )

        logger.checks("Parsed %d APIs and %d interface types", len(apis), len(interfaces))

        return ApiModel(apis=apis, interfaces=interfaces)
