"""Application layer - settings, documents, serialization and services."""

from .factory import ServiceFactory, get_factory, reset_factory, set_factory
from .serialization import from_dict, serializable_types, to_dict

__all__ = [
    "ServiceFactory",
    "from_dict",
    "get_factory",
    "reset_factory",
    "serializable_types",
    "set_factory",
    "to_dict",
]
