"""Catalog of the types declared by the scripting fixture.

A harness uses this to enumerate the fixture's types as ``Namespace.Name``
and to construct any of them by name without importing them directly.
"""

from __future__ import annotations

import inspect
import logging
import sys
from typing import TYPE_CHECKING, Literal, TextIO

from pydantic import BaseModel, Field

from entities.markers import OVO, OWO, UWU
from entities.numeric import NumericEntity

if TYPE_CHECKING:
    from settings.config import FixtureConfig

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "Tests"

TypeKind = Literal["entity", "marker"]

# Declaration order is the enumeration order.
DECLARED_TYPES: tuple[tuple[type, TypeKind], ...] = (
    (NumericEntity, "entity"),
    (UWU, "marker"),
    (OWO, "marker"),
    (OVO, "marker"),
)


class UnknownTypeError(LookupError):
    """Raised when a name does not resolve to a declared type."""


class TypeRecord(BaseModel):
    """A type declared by the fixture."""

    namespace: str
    name: str
    qualified_name: str
    kind: TypeKind
    field_names: list[str] = Field(
        default_factory=list, description="Public readable/writable fields"
    )
    method_names: list[str] = Field(
        default_factory=list, description="Public methods"
    )


def _public_members(cls: type) -> tuple[list[str], list[str]]:
    fields: list[str] = []
    methods: list[str] = []
    for name, member in vars(cls).items():
        if name.startswith("_"):
            continue
        if isinstance(member, property):
            fields.append(name)
        elif inspect.isfunction(member):
            methods.append(name)
    return fields, methods


def _build_record(cls: type, kind: TypeKind, namespace: str) -> TypeRecord:
    fields, methods = _public_members(cls)
    return TypeRecord(
        namespace=namespace,
        name=cls.__name__,
        qualified_name=f"{namespace}.{cls.__name__}",
        kind=kind,
        field_names=fields,
        method_names=methods,
    )


def list_types(namespace: str = DEFAULT_NAMESPACE) -> list[TypeRecord]:
    return [_build_record(cls, kind, namespace) for cls, kind in DECLARED_TYPES]


def print_types(
    namespace: str = DEFAULT_NAMESPACE, stream: TextIO | None = None
) -> None:
    """Write one ``Namespace.Name`` line per declared type."""
    out = stream if stream is not None else sys.stdout
    for record in list_types(namespace):
        print(record.qualified_name, file=out)


def resolve_type(name: str, namespace: str = DEFAULT_NAMESPACE) -> type:
    """Resolve a bare or namespace-qualified type name.

    Raises:
        UnknownTypeError: If the name is not declared under ``namespace``.
    """
    prefix, _, bare = name.rpartition(".")
    if prefix and prefix != namespace:
        msg = f"type {name!r} is not in namespace {namespace!r}"
        raise UnknownTypeError(msg)

    for cls, _kind in DECLARED_TYPES:
        if cls.__name__ == bare:
            return cls

    msg = f"unknown type {name!r} in namespace {namespace!r}"
    raise UnknownTypeError(msg)


def create(name: str, namespace: str = DEFAULT_NAMESPACE) -> object:
    """Resolve ``name`` and construct a fresh, default-initialized instance."""
    cls = resolve_type(name, namespace)
    logger.debug("constructing %s.%s", namespace, cls.__name__)
    return cls()


class TypeCatalog:
    """The declared types bound to a configured namespace."""

    def __init__(
        self, namespace: str = DEFAULT_NAMESPACE, *, reject_non_finite: bool = False
    ) -> None:
        self.namespace = namespace
        self.reject_non_finite = reject_non_finite

    @classmethod
    def from_config(cls, config: FixtureConfig) -> TypeCatalog:
        return cls(config.namespace, reject_non_finite=config.reject_non_finite)

    def list_types(self) -> list[TypeRecord]:
        return list_types(self.namespace)

    def print_types(self, stream: TextIO | None = None) -> None:
        print_types(self.namespace, stream)

    def resolve_type(self, name: str) -> type:
        return resolve_type(name, self.namespace)

    def create(self, name: str) -> object:
        """Construct ``name``; entities inherit the catalog's non-finite guard."""
        cls = self.resolve_type(name)
        logger.debug("constructing %s.%s", self.namespace, cls.__name__)
        if cls is NumericEntity:
            return NumericEntity(reject_non_finite=self.reject_non_finite)
        return cls()


__all__ = [
    "DECLARED_TYPES",
    "DEFAULT_NAMESPACE",
    "TypeCatalog",
    "TypeKind",
    "TypeRecord",
    "UnknownTypeError",
    "create",
    "list_types",
    "print_types",
    "resolve_type",
]
