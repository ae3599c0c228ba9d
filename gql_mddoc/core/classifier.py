"""Assigns every named type of a schema to exactly one output category."""

from enum import Enum

from .errors import RenderError
from .ir import RootTypes, SchemaDocument, TypeDefinition, TypeKind

BUILTIN_SCALARS = ("String", "Int", "Float", "Boolean", "ID")


class Category(str, Enum):
    """Output categories, declared in document order.

    The values double as file-safe identifiers for the writer.
    """
    QUERIES = "queries"
    MUTATIONS = "mutations"
    SUBSCRIPTIONS = "subscriptions"
    OBJECTS = "objects"
    INPUTS = "inputs"
    INTERFACES = "interfaces"
    ENUMS = "enums"
    UNIONS = "unions"
    SCALARS = "scalars"

    @property
    def heading(self) -> str:
        """Human-readable heading, e.g. 'Queries'."""
        return self.value.capitalize()


def classify(definition: TypeDefinition, roots: RootTypes) -> Category:
    """Return the category of a type.

    Root operation types are checked before the kind, since they are OBJECT
    types whose fields are entry points rather than data shapes.
    """
    name = definition.name
    if name == roots.query:
        return Category.QUERIES
    if name == roots.mutation:
        return Category.MUTATIONS
    if name == roots.subscription:
        return Category.SUBSCRIPTIONS

    kind = definition.kind
    if kind == TypeKind.OBJECT:
        return Category.OBJECTS
    elif kind == TypeKind.INPUT_OBJECT:
        return Category.INPUTS
    elif kind == TypeKind.INTERFACE:
        return Category.INTERFACES
    elif kind == TypeKind.ENUM:
        return Category.ENUMS
    elif kind == TypeKind.UNION:
        return Category.UNIONS
    elif kind == TypeKind.SCALAR:
        return Category.SCALARS
    raise RenderError(f"No category for kind {kind!r}", type_name=name)


def group_by_category(
    document: SchemaDocument,
    include_builtin_scalars: bool = True,
) -> dict[Category, list[TypeDefinition]]:
    """Group all types of a document by category.

    All nine categories are present in the result, in document order, each
    holding its types in decode order (possibly none).
    """
    groups: dict[Category, list[TypeDefinition]] = {category: [] for category in Category}
    for definition in document.types.values():
        category = classify(definition, document.roots)
        if (
            category == Category.SCALARS
            and not include_builtin_scalars
            and definition.name in BUILTIN_SCALARS
        ):
            continue
        groups[category].append(definition)
    return groups
