"""Resource index: buckets registered routes under their resource key.

The index is built while the host application registers its routes and is
then frozen before documentation requests are served. After freezing it is
only read, so documentation requests never race with registration.
"""

import logging
import re
from collections.abc import Iterable, Iterator

from swagger_docgen.errors import IndexFrozenError

from .base import RouteDescriptor

logger = logging.getLogger(__name__)

RESOURCE_RE = re.compile(r"/(\w*?)(?:[./(]|$)")


def resource_key(path: str) -> str | None:
    """Return the lowercased first path segment of a route path.

    The segment must follow a ``/`` and end at ``.``, ``/``, ``(`` or the end
    of the path. Returns None when there is no such segment or it is empty.
    """
    match = RESOURCE_RE.search(path)
    if not match or not match.group(1):
        return None
    return match.group(1).lower()


class ResourceIndex:
    """Ordered mapping of resource key to the routes registered under it."""

    def __init__(self, routes: Iterable[RouteDescriptor] = ()):
        self._resources: dict[str, list[RouteDescriptor]] = {}
        self._frozen = False
        self.register_all(routes)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Stop accepting registrations. Freezing twice is harmless."""
        self._frozen = True

    def register(self, route: RouteDescriptor) -> str | None:
        """Add a route to its resource bucket and return the key used.

        Routes without a resource key are left out of the documentation.
        A route already present in its bucket is not added again.
        """
        if self._frozen:
            raise IndexFrozenError(f"cannot register {route.method} {route.path}: index is frozen")

        key = resource_key(route.path)
        if key is None:
            logger.debug("Skipping %s %s: no resource segment", route.method, route.path)
            return None

        bucket = self._resources.setdefault(key, [])
        if route not in bucket:
            bucket.append(route)
        return key

    def register_all(self, routes: Iterable[RouteDescriptor]) -> None:
        for route in routes:
            self.register(route)

    def keys(self) -> list[str]:
        return list(self._resources)

    def routes_for(self, key: str) -> list[RouteDescriptor]:
        """Routes under ``key`` in registration order; empty when unknown."""
        return list(self._resources.get(key, []))

    def __contains__(self, key: object) -> bool:
        return key in self._resources

    def __iter__(self) -> Iterator[str]:
        return iter(self._resources)

    def __len__(self) -> int:
        return len(self._resources)
