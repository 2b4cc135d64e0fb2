"""Documentation options.

Options can be given in code, read from the ``documentation:`` section of a
route file, and overridden from the command line.
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from swagger_docgen.errors import ConfigError

DEFAULT_MOUNT_PATH = "/swagger_doc"
DEFAULT_API_VERSION = "0.1"


class DocumentationConfig(BaseModel):
    """Recognized documentation options and their defaults."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    mount_path: str = DEFAULT_MOUNT_PATH
    base_path: str | None = None  # None: use the request's own base URL
    api_version: str = DEFAULT_API_VERSION
    markdown: bool = False
    hide_documentation_path: bool = False

    @field_validator("mount_path")
    @classmethod
    def _mount_path(cls, value: str) -> str:
        path = value.rstrip("/")
        if not path.startswith("/"):
            raise ValueError("mount_path must start with '/' and name at least one segment")
        return path

    @field_validator("api_version", mode="before")
    @classmethod
    def _version_str(cls, value):
        # YAML reads 0.1 as a float
        return value if value is None else str(value)

    def with_overrides(self, **options) -> "DocumentationConfig":
        """Return a copy with every option that is not None replaced."""
        changes = {k: v for k, v in options.items() if v is not None}
        if not changes:
            return self
        return DocumentationConfig(**{**self.model_dump(), **changes})


def parse_config(data: dict | None) -> DocumentationConfig:
    if data is None:
        return DocumentationConfig()
    if not isinstance(data, dict):
        raise ConfigError("documentation options must be a mapping")
    try:
        return DocumentationConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"invalid documentation options: {e}") from e


def load_config(file_path: Path) -> DocumentationConfig:
    """Read documentation options from a route file's ``documentation:`` section."""
    try:
        doc = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"cannot read {file_path}: {e}") from e

    if not isinstance(doc, dict):
        return DocumentationConfig()
    return parse_config(doc.get("documentation"))
