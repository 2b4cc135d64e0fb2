"""Route file loader.

Reads a YAML (or JSON) route file describing an API's routes and entities:

    documentation:
      api_version: "1.0"
    routes:
      - method: GET
        path: /users/:id(.:format)
        description: Get a user
        params:
          id: {type: Integer, desc: User id, required: true}
        http_codes: {404: User not found}
    entities:
      app.entities.User:
        name: {type: String}
        friends: {type: "Array[User]"}
"""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from swagger_docgen.docs.models import DictTypeCatalog
from swagger_docgen.errors import RouteFileError

from .base import RouteDescriptor
from .index import ResourceIndex

logger = logging.getLogger(__name__)


def _read(file_path: Path) -> dict:
    try:
        doc = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise RouteFileError(f"cannot read {file_path}: {e}") from e

    if doc is None:
        return {}
    if not isinstance(doc, dict):
        raise RouteFileError(f"{file_path}: expected a mapping at the top level")
    return doc


def parse_routes(items: list | None, source: str = "<routes>") -> list[RouteDescriptor]:
    routes = []
    for position, item in enumerate(items or [], start=1):
        if not isinstance(item, dict):
            raise RouteFileError(f"{source}: route #{position} must be a mapping")
        try:
            routes.append(RouteDescriptor.model_validate(item))
        except ValidationError as e:
            raise RouteFileError(f"{source}: route #{position} is invalid: {e}") from e
    return routes


def load_routes(file_path: Path) -> list[RouteDescriptor]:
    """Parse the ``routes:`` section of a route file, in file order."""
    doc = _read(file_path)
    routes = parse_routes(doc.get("routes"), source=str(file_path))
    logger.debug("Loaded %d routes from %s", len(routes), file_path)
    return routes


def load_catalog(file_path: Path) -> DictTypeCatalog:
    """Build a type catalog from the ``entities:`` section of a route file."""
    entities = _read(file_path).get("entities") or {}
    if not isinstance(entities, dict):
        raise RouteFileError(f"{file_path}: entities must be a mapping")
    return DictTypeCatalog(entities)


def load_index(file_path: Path) -> ResourceIndex:
    """Register every route of a route file into a fresh, unfrozen index."""
    return ResourceIndex(load_routes(file_path))
