"""Resolve the reference id under which a service is registered."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Protocol, runtime_checkable


@runtime_checkable
class ReferencedService(Protocol):
    """A service that names its own reference id."""

    def reference(self) -> str:
        """Return the id under which the service is registered."""


def get_reference(service) -> str:
    """Return the service's reference id.

    A service that provides ``reference()`` names itself; an anonymous
    namespace is named after its first field; any other object is named
    after its class. Built-in values have no reference and give "".
    """
    if not isinstance(service, type) and isinstance(service, ReferencedService):
        return service.reference()
    if isinstance(service, SimpleNamespace):
        fields = vars(service)
        if not fields:
            raise ValueError("anonymous service has no fields to name it by")
        return next(iter(fields))
    cls = type(service)
    if cls.__module__ == "builtins":
        return ""
    return cls.__name__