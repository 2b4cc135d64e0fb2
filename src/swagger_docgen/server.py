"""Flask endpoints serving the generated documentation.

    app = Flask(__name__)
    index = ResourceIndex(my_routes)
    add_swagger_documentation(app, index, catalog, DocumentationConfig(markdown=True))

``GET /swagger_doc`` returns the resource listing and
``GET /swagger_doc/<name>`` the API declaration of one resource.
"""

import re

from flask import Blueprint, Flask, jsonify, request

from swagger_docgen.config import DocumentationConfig
from swagger_docgen.docs.assembler import describe_resource, list_resources
from swagger_docgen.docs.models import DictTypeCatalog, TypeCatalog
from swagger_docgen.docs.path import FORMAT_SUFFIX
from swagger_docgen.routes.base import RouteDescriptor
from swagger_docgen.routes.index import ResourceIndex

JSON_SUFFIX = ".json"
DEFAULT_BLUEPRINT_NAME = "swagger_doc"


def documentation_routes(mount_path: str) -> list[RouteDescriptor]:
    """Route descriptors for the two documentation endpoints themselves."""
    return [
        RouteDescriptor(
            method="GET",
            path=f"{mount_path}{FORMAT_SUFFIX}",
            description="Swagger compatible API description",
        ),
        RouteDescriptor(
            method="GET",
            path=f"{mount_path}/:name{FORMAT_SUFFIX}",
            description="Swagger compatible API description for specific API",
            params={"name": {"desc": "Resource name of mounted API", "type": "string", "required": True}},
        ),
    ]


def blueprint_name(mount_path: str) -> str:
    """``/api/swagger_doc`` mounts as blueprint ``apiswagger_doc``."""
    return re.sub(r"\W", "", mount_path.replace(FORMAT_SUFFIX, "")) or DEFAULT_BLUEPRINT_NAME


def create_blueprint(
    index: ResourceIndex,
    catalog: TypeCatalog,
    config: DocumentationConfig,
) -> Blueprint:
    bp = Blueprint(blueprint_name(config.mount_path), __name__)
    mount = config.mount_path.replace(FORMAT_SUFFIX, "").rstrip("/")

    def _base_path() -> str:
        return config.base_path or request.host_url.rstrip("/")

    @bp.after_request
    def _allow_cross_origin(response):
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Request-Method"] = "*"
        return response

    @bp.get(mount)
    def resource_listing():
        doc = list_resources(
            index,
            config.mount_path,
            config.api_version,
            _base_path(),
            config.hide_documentation_path,
        )
        return jsonify(doc.to_dict())

    @bp.get(f"{mount}/<name>")
    def api_declaration(name: str):
        if name.endswith(JSON_SUFFIX):
            name = name[: -len(JSON_SUFFIX)]
        doc = describe_resource(
            index.routes_for(name),
            catalog,
            config.api_version,
            _base_path(),
            config.markdown,
        )
        return jsonify(doc.to_dict())

    return bp


def add_swagger_documentation(
    app: Flask,
    index: ResourceIndex,
    catalog: TypeCatalog | None = None,
    config: DocumentationConfig | None = None,
) -> Blueprint:
    """Mount the documentation endpoints on ``app``.

    The documentation endpoints are registered into ``index`` like any other
    route, then the index is frozen. Call this after all routes are known.
    """
    config = config or DocumentationConfig()
    catalog = catalog if catalog is not None else DictTypeCatalog()

    index.register_all(documentation_routes(config.mount_path))
    index.freeze()

    bp = create_blueprint(index, catalog, config)
    app.register_blueprint(bp)
    return bp


def create_app(
    index: ResourceIndex,
    catalog: TypeCatalog | None = None,
    config: DocumentationConfig | None = None,
) -> Flask:
    """Standalone app serving documentation for an already loaded index."""
    app = Flask(__name__)
    add_swagger_documentation(app, index, catalog, config)
    return app
