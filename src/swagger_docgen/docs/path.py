"""Rewrites route path patterns into Swagger path templates."""

import re

FORMAT_SUFFIX = "(.:format)"
PLACEHOLDER_RE = re.compile(r":([a-zA-Z_]\w*)")


def template(path: str, version: str | None = None) -> str:
    """Convert ``/users/:id(.:format)`` into ``/users/{id}.{format}``.

    When a version is given, a ``{version}`` placeholder is replaced with it.
    """
    templated = path.replace(FORMAT_SUFFIX, ".{format}")
    templated = PLACEHOLDER_RE.sub(r"{\1}", templated)
    if version is not None:
        templated = templated.replace("{version}", str(version))
    return templated
