"""
Service-layer exceptions.

All of them are ValueErrors so routers can keep translating service
failures into HTTP errors with a plain ``except`` clause.
"""


class CatalogError(ValueError):
    """Base class for errors raised by the auth and catalog services."""


class BadRequestError(CatalogError):
    """Malformed identifier or a request the current state rejects."""


class NotFoundError(CatalogError):
    """The requested record does not exist."""


class ConflictError(CatalogError):
    """A uniqueness rule would be violated."""
