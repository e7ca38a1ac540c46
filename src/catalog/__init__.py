"""Type enumeration and by-name construction for the fixture."""

from catalog.types import (
    DEFAULT_NAMESPACE,
    TypeCatalog,
    TypeRecord,
    UnknownTypeError,
    create,
    list_types,
    print_types,
    resolve_type,
)

__all__ = [
    "DEFAULT_NAMESPACE",
    "TypeCatalog",
    "TypeRecord",
    "UnknownTypeError",
    "create",
    "list_types",
    "print_types",
    "resolve_type",
]
