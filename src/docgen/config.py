"""Configuration loader for docgen.

A single ``docgen_config.yaml`` selects the markdown dialect and controls
source links and the index page boilerplate.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

DEFAULT_CONFIG_NAME = "docgen_config.yaml"

PRINTER_FORMATS = ("github", "techdocs")

DEFAULT_INDEX_TITLE = "Backstage Core Utility APIs"

DEFAULT_INDEX_INTRO = [
    "The following is a list of all Utility APIs defined by `@backstage/core`.",
    "They are available to use by plugins and components, and can be accessed ",
    "using the `useApi` hook, also provided by `@backstage/core`.",
    "For more information, see https://github.com/backstage/backstage/blob/master/docs/api/utility-apis.md.",
]


class PrinterConfig(BaseModel):
    """Configuration for the markdown output surface."""

    format: str = "github"
    source_base_url: str | None = None  # Prefix for source links, e.g. a GitHub blob URL
    code_language: str = "ts"  # Fenced block language (techdocs only)

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Ensure the format names a known dialect."""
        if v not in PRINTER_FORMATS:
            raise ValueError(
                f"Invalid printer format: '{v}'. Valid values: {', '.join(PRINTER_FORMATS)}"
            )
        return v


class IndexConfig(BaseModel):
    """Configuration for the index page boilerplate."""

    title: str = DEFAULT_INDEX_TITLE
    intro: list[str] = Field(default_factory=lambda: list(DEFAULT_INDEX_INTRO))

    @field_validator("intro", mode="before")
    @classmethod
    def ensure_list(cls, v: Any) -> list[str]:
        """Accept a single string as a one-fragment paragraph."""
        if v is None:
            return []
        if isinstance(v, list):
            return [str(item) for item in v]  # type: ignore[misc]
        return [str(v)]


class DocgenConfig(BaseModel):
    """Top-level docgen configuration."""

    printer: PrinterConfig = Field(default_factory=PrinterConfig)
    index: IndexConfig = Field(default_factory=IndexConfig)


def load_docgen_config(config_path: Path | str) -> DocgenConfig:
    """Load docgen configuration from YAML file.

    Args:
        config_path: Path to docgen_config.yaml file

    Returns:
        Validated DocgenConfig

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config is invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with config_path.open(encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse config: {e}") from e

    if not data:
        raise ValueError("Empty configuration file")

    if not isinstance(data, dict):
        raise ValueError("Config must contain a dictionary at the root level")

    # pydantic.ValidationError subclasses ValueError
    return DocgenConfig.model_validate(data)
