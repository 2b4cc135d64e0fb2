"""Data models for registered route metadata.

Route sources (the route file loader, a host web framework) convert their
metadata into these models once, at ingestion. Everything downstream reads
them without further shape checks.
"""

from collections.abc import Mapping

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class ParameterSpec(BaseModel):
    """Raw metadata for a single route parameter or request header."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: str | None = None  # type name, primitive, or Array[...] marker
    description: str = Field("", validation_alias=AliasChoices("description", "desc"))
    required: bool = False
    full_name: str | None = Field(None, validation_alias=AliasChoices("full_name", "fullName"))

    @field_validator("type", "full_name", mode="before")
    @classmethod
    def _optional_str(cls, value):
        return None if value is None else str(value)

    @field_validator("description", mode="before")
    @classmethod
    def _description_str(cls, value):
        return "" if value is None else str(value)

    @field_validator("required", mode="before")
    @classmethod
    def _truthy(cls, value):
        return bool(value)

    @classmethod
    def from_raw(cls, value) -> "ParameterSpec":
        """Build a spec from whatever a route source supplied.

        Anything that is not a mapping carries no usable metadata and yields
        the all-defaults spec. Never raises.
        """
        if isinstance(value, ParameterSpec):
            return value
        if not isinstance(value, Mapping):
            return cls()
        return cls.model_validate({str(k): v for k, v in value.items()})


class RouteDescriptor(BaseModel):
    """Static metadata describing one HTTP endpoint."""

    model_config = ConfigDict(frozen=True)

    method: str  # GET / POST / PUT / DELETE / PATCH
    path: str  # /users/:id(.:format)
    description: str | None = None
    notes: str | None = None
    params: dict[str, ParameterSpec] = {}
    headers: dict[str, ParameterSpec] = {}
    http_codes: dict[int | str, str] = {}  # {status_code: reason}
    version: str | None = None

    @field_validator("method", mode="before")
    @classmethod
    def _upper_method(cls, value):
        return str(value).upper()

    @field_validator("params", "headers", mode="before")
    @classmethod
    def _normalize_specs(cls, value):
        if value is None:
            return {}
        if isinstance(value, Mapping):
            return {str(name): ParameterSpec.from_raw(spec) for name, spec in value.items()}
        if isinstance(value, (list, tuple)):
            return {str(name): ParameterSpec() for name in value}
        return {}

    @field_validator("http_codes", mode="before")
    @classmethod
    def _normalize_codes(cls, value):
        if not isinstance(value, Mapping):
            return {}
        return {code: "" if reason is None else str(reason) for code, reason in value.items()}

    @field_validator("version", mode="before")
    @classmethod
    def _version_str(cls, value):
        return None if value is None else str(value)
