"""Intermediate Representation (IR) of a decoded GraphQL schema.

These dataclasses are built once by the decoder and never mutated. Sequences
are tuples and keep the order in which the introspection result listed them.
"""

from dataclasses import dataclass, field
from enum import Enum

from .typeref import TypeRef


class TypeKind(str, Enum):
    """Introspection kinds a named type can have."""
    SCALAR = "SCALAR"
    OBJECT = "OBJECT"
    INTERFACE = "INTERFACE"
    UNION = "UNION"
    ENUM = "ENUM"
    INPUT_OBJECT = "INPUT_OBJECT"


@dataclass(frozen=True)
class Argument:
    """An argument of a field or directive, or a field of an input object."""
    name: str
    type_ref: TypeRef
    description: str | None = None
    default_value: str | None = None  # raw GraphQL literal, e.g. '"world"'


@dataclass(frozen=True)
class FieldDefinition:
    """A field of an object or interface type."""
    name: str
    type_ref: TypeRef
    description: str | None = None
    arguments: tuple[Argument, ...] = ()
    is_deprecated: bool = False
    deprecation_reason: str | None = None


@dataclass(frozen=True)
class EnumValueDefinition:
    name: str
    description: str | None = None
    is_deprecated: bool = False
    deprecation_reason: str | None = None


@dataclass(frozen=True)
class TypeDefinition:
    """A named type. Only the collections relevant to its kind are filled."""
    name: str
    kind: TypeKind
    description: str | None = None
    fields: tuple[FieldDefinition, ...] = ()
    input_fields: tuple[Argument, ...] = ()
    enum_values: tuple[EnumValueDefinition, ...] = ()
    possible_types: tuple[str, ...] = ()
    interfaces: tuple[str, ...] = ()


@dataclass(frozen=True)
class DirectiveDefinition:
    name: str
    description: str | None = None
    locations: tuple[str, ...] = ()
    arguments: tuple[Argument, ...] = ()


@dataclass(frozen=True)
class RootTypes:
    """Names of the root operation types."""
    query: str | None = None
    mutation: str | None = None
    subscription: str | None = None


@dataclass(frozen=True)
class SchemaDocument:
    """Complete decoded schema: named types plus root operation type names."""
    types: dict[str, TypeDefinition] = field(default_factory=dict)
    roots: RootTypes = field(default_factory=RootTypes)
    directives: tuple[DirectiveDefinition, ...] = ()

    def get_type(self, name: str) -> TypeDefinition | None:
        """Look up a type by name."""
        return self.types.get(name)

    def types_of_kind(self, kind: TypeKind) -> list[TypeDefinition]:
        """Return all types of the given kind, in decode order."""
        return [t for t in self.types.values() if t.kind == kind]

    @property
    def query_type(self) -> TypeDefinition | None:
        return self.types.get(self.roots.query) if self.roots.query else None

    @property
    def mutation_type(self) -> TypeDefinition | None:
        return self.types.get(self.roots.mutation) if self.roots.mutation else None

    @property
    def subscription_type(self) -> TypeDefinition | None:
        return self.types.get(self.roots.subscription) if self.roots.subscription else None

    def __len__(self) -> int:
        return len(self.types)

    def __contains__(self, name: object) -> bool:
        return name in self.types
