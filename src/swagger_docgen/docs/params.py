"""Parameter classifier.

Turns the raw parameter and header metadata of a route into Swagger 1.1
parameter entries (paramType / name / description / dataType / required).
"""

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from swagger_docgen.routes.base import ParameterSpec

UPLOADED_FILE_TYPES = frozenset({
    "werkzeug.datastructures.FileStorage",
    "Rack::Multipart::UploadedFile",
})
BODY_METHODS = ("POST", "PUT")
DEFAULT_TYPE = "String"


class ParameterDescriptor(BaseModel):
    """A classified parameter as it appears in a resource document."""

    model_config = ConfigDict(populate_by_name=True)

    location: str = Field(alias="paramType")  # path / query / body / header
    name: str
    description: str = ""
    data_type: str = Field(DEFAULT_TYPE, alias="dataType")
    required: bool = False


def param_location(name: str, path: str, method: str) -> str:
    """Decide where a parameter travels.

    A parameter is a path parameter when ``:name`` occurs anywhere in the raw
    path pattern, so ``:id`` also matches inside ``:identifier``.
    """
    if f":{name}" in path:
        return "path"
    if method.upper() in BODY_METHODS:
        return "body"
    return "query"


def _data_type(spec: ParameterSpec) -> str:
    if spec.type in UPLOADED_FILE_TYPES:
        return "file"
    return spec.type or DEFAULT_TYPE


def classify(params: Mapping | None, path: str, method: str) -> list[ParameterDescriptor]:
    """Classify route parameters in their declared order."""
    if not params:
        return []

    result = []
    for name, raw in params.items():
        spec = ParameterSpec.from_raw(raw)
        result.append(
            ParameterDescriptor(
                location=param_location(str(name), path, method),
                name=spec.full_name or str(name),
                description=spec.description,
                data_type=_data_type(spec),
                required=spec.required,
            )
        )
    return result


def classify_headers(headers: Mapping | None) -> list[ParameterDescriptor]:
    """Header parameters are always plain strings located in the header."""
    if not headers:
        return []

    result = []
    for name, raw in headers.items():
        spec = ParameterSpec.from_raw(raw)
        result.append(
            ParameterDescriptor(
                location="header",
                name=str(name),
                description=spec.description,
                data_type=DEFAULT_TYPE,
                required=spec.required,
            )
        )
    return result
