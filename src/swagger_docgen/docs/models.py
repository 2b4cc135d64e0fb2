"""Model extractor.

Derives Swagger 1.1 model definitions for every entity type referenced by a
set of routes' parameter types. Entity types are looked up through a
TypeCatalog supplied by the host application; nested entities reachable
through ``Array[...]`` fields are discovered recursively.
"""

import logging
import re
from collections.abc import Iterable, Mapping
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field, field_validator

from swagger_docgen.routes.base import RouteDescriptor

logger = logging.getLogger(__name__)

ARRAY_MARKER = "array"
ARRAY_INNER_RE = re.compile(r"\[(.*?)\]", re.DOTALL)
QUALIFIER_RE = re.compile(r"::|\.")


class FieldExposure(BaseModel):
    type: str = "String"

    @field_validator("type", mode="before")
    @classmethod
    def _type_str(cls, value):
        return "String" if value is None else str(value)


class EntityType(BaseModel):
    """An entity and the fields it exposes. ``exposures`` is None when the
    entity declares no exposure map at all."""

    name: str
    exposures: dict[str, FieldExposure] | None = None

    @field_validator("exposures", mode="before")
    @classmethod
    def _normalize_exposures(cls, value):
        if not isinstance(value, Mapping):
            return None
        return {
            str(field): spec if isinstance(spec, Mapping) else {"type": spec}
            for field, spec in value.items()
        }


class TypeCatalog(Protocol):
    def resolve(self, name: str) -> EntityType | None:
        """Return the entity registered under ``name``, or None."""
        ...


class DictTypeCatalog:
    """TypeCatalog backed by a mapping of type name to exposure map.

    Names resolve exactly first, then by their unqualified form, so
    ``app.entities.User`` and ``User`` find the same entity.
    """

    def __init__(self, entities: Mapping | None = None):
        self._entities: dict[str, EntityType] = {}
        self._by_short_name: dict[str, EntityType] = {}
        for name, exposures in (entities or {}).items():
            self.add(str(name), exposures)

    def add(self, name: str, exposures) -> EntityType:
        entity = EntityType(name=name, exposures=exposures)
        self._entities[name] = entity
        self._by_short_name.setdefault(unqualify(name), entity)
        return entity

    def resolve(self, name: str) -> EntityType | None:
        if not name:
            return None
        return self._entities.get(name) or self._by_short_name.get(unqualify(name))

    def __len__(self) -> int:
        return len(self._entities)


class ItemsSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: str | None = None
    ref: str | None = Field(None, alias="$ref")


class PropertySchema(BaseModel):
    type: str
    items: ItemsSchema | None = None


class ModelSchema(BaseModel):
    id: str
    properties: dict[str, PropertySchema] = {}


def unqualify(name: str) -> str:
    """``app.entities.User`` and ``App::Entities::User`` both become ``User``."""
    return QUALIFIER_RE.split(name)[-1]


def parse_array_type(declared: str) -> str | None:
    """Return the element type of an array type declaration.

    Returns None when ``declared`` is not an array type (no case-insensitive
    ``array`` marker) or carries no ``[...]`` pair. The element type is the
    text up to the first closing bracket, so ``Array[Array[User]]`` yields
    ``Array[User``.
    """
    if ARRAY_MARKER not in declared.lower():
        return None
    match = ARRAY_INNER_RE.search(declared)
    if match is None:
        return None
    return match.group(1)


def _property_schema(declared: str, catalog: TypeCatalog, models: dict[str, ModelSchema]) -> PropertySchema:
    inner = parse_array_type(declared)
    if inner is None:
        return PropertySchema(type=declared)

    if catalog.resolve(inner) is not None:
        add_model(inner, catalog, models)
        return PropertySchema(type="Array", items=ItemsSchema(ref=unqualify(inner)))
    return PropertySchema(type="Array", items=ItemsSchema(type=unqualify(inner)))


def add_model(type_name: str, catalog: TypeCatalog, models: dict[str, ModelSchema]) -> None:
    """Add the model for ``type_name`` and every entity it references."""
    model_id = unqualify(type_name)
    if model_id in models:
        return

    entity = catalog.resolve(type_name)
    if entity is None:
        return
    if entity.exposures is None:
        logger.debug("Entity %s exposes no fields, skipping model", entity.name)
        return

    # Registered before its fields so self references stop here.
    schema = ModelSchema(id=model_id)
    models[model_id] = schema
    for field, exposure in entity.exposures.items():
        schema.properties[field] = _property_schema(exposure.type, catalog, models)


def extract_models(routes: Iterable[RouteDescriptor], catalog: TypeCatalog) -> dict[str, ModelSchema]:
    """Collect the models referenced by the parameters of ``routes``."""
    models: dict[str, ModelSchema] = {}
    for route in routes:
        for spec in route.params.values():
            if spec.type:
                add_model(spec.type, catalog, models)
    return models
