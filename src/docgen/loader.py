"""API model loading with config discovery and validation."""

from __future__ import annotations

from collections import Counter
from pathlib import Path

from .config import DEFAULT_CONFIG_NAME, DocgenConfig, load_docgen_config
from .exceptions import ValidationError
from .models import ApiModel
from .parser import ApiModelParser


def discover_config(model_path: Path | str, config_path: Path | None = None) -> DocgenConfig:
    """Discover docgen config from various locations.

    Search order:
    1. Explicit config_path argument (CLI --config)
    2. Model directory / docgen_config.yaml
    3. Current directory / docgen_config.yaml

    Falls back to the default configuration when nothing is found.
    """
    if config_path:
        return load_docgen_config(config_path)

    dir_config = Path(model_path).parent / DEFAULT_CONFIG_NAME
    if dir_config.exists():
        return load_docgen_config(dir_config)

    cwd_config = Path(DEFAULT_CONFIG_NAME)
    if cwd_config.exists():
        return load_docgen_config(cwd_config)

    return DocgenConfig()


def load_api_model(path: Path | str) -> ApiModel:
    """Load and validate a serialized API model.

    Args:
        path: Path to the YAML or JSON model file

    Returns:
        ApiModel with interface references resolved
    """
    api_model = ApiModelParser().parse_file(path)
    validate_api_model(api_model)
    return api_model


def validate_api_model(api_model: ApiModel) -> None:
    """Validate that identifiers are unique within each entity kind."""
    _check_unique("API", [api.id for api in api_model.apis])
    _check_unique("Interface", [iface.id for iface in api_model.interfaces])
    for iface in api_model.interfaces:
        _check_unique(
            f"Supporting type in {iface.name}",
            [t.id for t in iface.dependent_types],
        )


def _check_unique(kind: str, ids: list[str]) -> None:
    duplicates = sorted(i for i, count in Counter(ids).items() if count > 1)
    if duplicates:
        raise ValidationError(f"{kind} ids must be unique, duplicated: {', '.join(duplicates)}")
