"""Document assembler.

Builds the two Swagger 1.1 documents served by the documentation endpoints:
the resource listing and the per-resource API declaration.
"""

import re
import textwrap
from collections.abc import Iterable
from typing import ClassVar

import markdown as markdown_lib
from pydantic import BaseModel, ConfigDict, Field

from swagger_docgen.routes.base import RouteDescriptor
from swagger_docgen.routes.index import ResourceIndex

from .models import ModelSchema, TypeCatalog, extract_models
from .params import ParameterDescriptor, classify, classify_headers
from .path import FORMAT_SUFFIX, template

SWAGGER_VERSION = "1.1"
NICKNAME_RE = re.compile(r"[/:().]")


class _Document(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # keys emitted as null instead of being left out
    nullable_keys: ClassVar[tuple[str, ...]] = ()

    def to_dict(self) -> dict:
        """Dump with Swagger field names, leaving out unset optional fields."""
        data = self.model_dump(by_alias=True, exclude_none=True)
        for key in self.nullable_keys:
            data.setdefault(key, None)
        return data


class ResourceEntry(_Document):
    path: str


class ListingDocument(_Document):
    nullable_keys: ClassVar[tuple[str, ...]] = ("basePath",)

    api_version: str = Field(alias="apiVersion")
    swagger_version: str = Field(SWAGGER_VERSION, alias="swaggerVersion")
    base_path: str | None = Field(None, alias="basePath")
    operations: list = []
    apis: list[ResourceEntry] = []


class ErrorResponse(_Document):
    code: int | str
    reason: str


class Operation(_Document):
    notes: str | None = None
    summary: str = ""
    nickname: str
    http_method: str = Field(alias="httpMethod")
    parameters: list[ParameterDescriptor] = []
    error_responses: list[ErrorResponse] | None = Field(None, alias="errorResponses")


class ApiEntry(_Document):
    path: str
    operations: list[Operation]


class ResourceDocument(_Document):
    nullable_keys: ClassVar[tuple[str, ...]] = ("basePath",)

    api_version: str = Field(alias="apiVersion")
    swagger_version: str = Field(SWAGGER_VERSION, alias="swaggerVersion")
    base_path: str | None = Field(None, alias="basePath")
    resource_path: str = Field("", alias="resourcePath")
    apis: list[ApiEntry] = []
    models: dict[str, ModelSchema] = {}


def nickname(method: str, path: str) -> str:
    """``GET`` + ``/users/:id`` gives ``GET-users--id``."""
    return method + NICKNAME_RE.sub("-", path)


def render_notes(notes: str | None, markdown: bool) -> str | None:
    if notes is None or not markdown:
        return notes
    return markdown_lib.markdown(textwrap.dedent(notes))


def parse_http_codes(codes: dict | None) -> list[ErrorResponse]:
    return [ErrorResponse(code=code, reason=reason) for code, reason in (codes or {}).items()]


def documentation_prefix(mount_path: str) -> str:
    """The templated mount path that resource paths are listed under."""
    return template(mount_path.replace(FORMAT_SUFFIX, ""))


def is_documentation_resource(key: str, mount_path: str) -> bool:
    return f"/{key}/".startswith(documentation_prefix(mount_path) + "/")


def list_resources(
    index: ResourceIndex,
    mount_path: str,
    api_version: str,
    base_path: str | None,
    hide_mount_path: bool = False,
) -> ListingDocument:
    """Build the resource listing with one entry per indexed resource."""
    prefix = documentation_prefix(mount_path)
    apis = []
    for key in index.keys():
        if hide_mount_path and is_documentation_resource(key, mount_path):
            continue
        apis.append(ResourceEntry(path=f"{prefix}/{key}.{{format}}"))

    return ListingDocument(api_version=api_version, base_path=base_path, apis=apis)


def describe_operation(route: RouteDescriptor, markdown: bool = False) -> Operation:
    http_codes = parse_http_codes(route.http_codes)
    return Operation(
        notes=render_notes(route.notes, markdown),
        summary=route.description or "",
        nickname=nickname(route.method, route.path),
        http_method=route.method,
        parameters=classify_headers(route.headers) + classify(route.params, route.path, route.method),
        error_responses=http_codes or None,
    )


def describe_resource(
    routes: Iterable[RouteDescriptor],
    catalog: TypeCatalog,
    api_version: str,
    base_path: str | None,
    markdown: bool = False,
) -> ResourceDocument:
    """Build the API declaration for one resource's routes."""
    routes = list(routes)
    apis = [
        ApiEntry(
            path=template(route.path, route.version or api_version),
            operations=[describe_operation(route, markdown)],
        )
        for route in routes
    ]
    return ResourceDocument(
        api_version=api_version,
        base_path=base_path,
        apis=apis,
        models=extract_models(routes, catalog),
    )
