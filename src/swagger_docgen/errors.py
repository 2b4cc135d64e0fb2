"""Exceptions raised at the lifecycle and file boundaries.

The documentation engine itself never raises for malformed route metadata;
it degrades to incomplete but valid documents instead.
"""


class SwaggerDocError(Exception):
    """Base class for all swagger-docgen errors."""


class IndexFrozenError(SwaggerDocError):
    """A route was registered after the resource index was frozen."""


class RouteFileError(SwaggerDocError):
    """A route file could not be read or contains an invalid route."""


class ConfigError(SwaggerDocError):
    """Documentation options could not be loaded."""
