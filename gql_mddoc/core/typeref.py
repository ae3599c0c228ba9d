"""Type references: GraphQL's LIST / NON_NULL wrapping as a small sum type.

A type occurrence in an introspection result is a chain of nodes such as
NON_NULL -> LIST -> NON_NULL -> SCALAR(String). It is decoded into nested
NamedType / ListType / NonNullType values and printed back in SDL form,
e.g. ``[String!]!``.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from pydantic import ValidationError

from .errors import DecodeError
from .introspection import RawTypeRef

LIST = "LIST"
NON_NULL = "NON_NULL"
NAMED_KINDS = ("SCALAR", "OBJECT", "INTERFACE", "UNION", "ENUM", "INPUT_OBJECT")


@dataclass(frozen=True)
class NamedType:
    name: str

    def __str__(self) -> str:
        return print_type_ref(self)


@dataclass(frozen=True)
class ListType:
    of_type: "TypeRef"

    def __str__(self) -> str:
        return print_type_ref(self)


@dataclass(frozen=True)
class NonNullType:
    of_type: "TypeRef"

    def __str__(self) -> str:
        return print_type_ref(self)


TypeRef = Union[NamedType, ListType, NonNullType]


def decode_type_ref(
    node: RawTypeRef | Mapping[str, Any] | None,
    *,
    type_name: str | None = None,
    field_name: str | None = None,
) -> TypeRef:
    """Decode an introspection type node into a TypeRef.

    Args:
        node: The `type` / `ofType` node, as a RawTypeRef or a plain mapping
        type_name: Owning type, used for error context only
        field_name: Owning field or argument, used for error context only

    Raises:
        DecodeError: If a wrapper has no `ofType`, a named node has no name,
            NON_NULL directly wraps NON_NULL, or the kind is unknown.
    """
    if isinstance(node, Mapping):
        try:
            node = RawTypeRef.model_validate(node)
        except ValidationError as e:
            raise DecodeError(
                "Malformed type reference",
                type_name=type_name,
                field_name=field_name,
                expected="an object with kind/name/ofType",
                found=e.errors()[0]["msg"],
            ) from e
    if node is None:
        raise DecodeError(
            "Missing type reference",
            type_name=type_name,
            field_name=field_name,
            expected="a type node",
            found="null",
        )

    if node.kind in (LIST, NON_NULL):
        if node.of_type is None:
            raise DecodeError(
                f"{node.kind} type reference without ofType",
                type_name=type_name,
                field_name=field_name,
                expected="a wrapped type",
                found="null",
            )
        inner = decode_type_ref(node.of_type, type_name=type_name, field_name=field_name)
        if node.kind == LIST:
            return ListType(inner)
        if isinstance(inner, NonNullType):
            raise DecodeError(
                "NON_NULL type reference wraps another NON_NULL",
                type_name=type_name,
                field_name=field_name,
            )
        return NonNullType(inner)

    if node.kind not in NAMED_KINDS:
        raise DecodeError(
            "Unknown type reference kind",
            type_name=type_name,
            field_name=field_name,
            expected=f"one of {', '.join((LIST, NON_NULL) + NAMED_KINDS)}",
            found=repr(node.kind),
        )
    if not node.name:
        raise DecodeError(
            f"{node.kind} type reference without a name",
            type_name=type_name,
            field_name=field_name,
            expected="a non-empty name",
            found=repr(node.name),
        )
    return NamedType(node.name)


def print_type_ref(ref: TypeRef) -> str:
    """Render a TypeRef as an SDL signature, e.g. ``[String!]!``."""
    if isinstance(ref, NonNullType):
        return f"{print_type_ref(ref.of_type)}!"
    if isinstance(ref, ListType):
        return f"[{print_type_ref(ref.of_type)}]"
    return ref.name


def named_type(ref: TypeRef) -> str:
    """Return the innermost named type of a reference."""
    while not isinstance(ref, NamedType):
        ref = ref.of_type
    return ref.name

