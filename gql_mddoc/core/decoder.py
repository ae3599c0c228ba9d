"""Introspection result decoder.

Turns the JSON-shaped result of an introspection query into a SchemaDocument.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from .errors import DecodeError
from .introspection import (
    RawDirective,
    RawEnumValue,
    RawField,
    RawInputValue,
    RawSchema,
    RawType,
    RawTypeRef,
)
from .ir import (
    Argument,
    DirectiveDefinition,
    EnumValueDefinition,
    FieldDefinition,
    RootTypes,
    SchemaDocument,
    TypeDefinition,
    TypeKind,
)
from .typeref import TypeRef, decode_type_ref, named_type

logger = logging.getLogger(__name__)

INTROSPECTION_PREFIX = "__"


def extract_schema(payload: Any) -> Mapping[str, Any]:
    """Return the `__schema` object of an introspection result.

    Accepts a full response (``{"data": {"__schema": ...}}``), the bare
    ``{"__schema": ...}`` object, or either one as JSON text.
    """
    if isinstance(payload, (str, bytes, bytearray)):
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError as e:
            raise DecodeError(f"Introspection result is not valid JSON: {e}") from e

    if not isinstance(payload, Mapping):
        raise DecodeError(
            "Introspection result is not an object",
            expected="object",
            found=type(payload).__name__,
        )

    if "__schema" not in payload:
        if payload.get("errors") and not payload.get("data"):
            messages = "; ".join(
                e.get("message", str(e)) if isinstance(e, Mapping) else str(e)
                for e in payload["errors"]
            )
            raise DecodeError(f"Introspection query failed: {messages}")
        if "data" not in payload:
            raise DecodeError("data not in response", expected="'data' or '__schema'")
        payload = payload["data"]
        if not isinstance(payload, Mapping) or "__schema" not in payload:
            raise DecodeError("schema not in response", expected="'data.__schema'")

    schema = payload["__schema"]
    if not isinstance(schema, Mapping):
        raise DecodeError(
            "__schema is not an object",
            expected="object",
            found=type(schema).__name__,
        )
    return schema


class SchemaDecoder:
    """Decodes an introspection result into a SchemaDocument."""

    def __init__(self, payload: Any):
        """Initialize the decoder with a raw introspection result."""
        self.payload = payload
        self._types: dict[str, TypeDefinition] = {}
        # (referenced type, owning type, owning field) for the dangling check
        self._references: list[tuple[str, str, str | None]] = []
        self._skipped = 0

    def decode(self) -> SchemaDocument:
        """Decode the payload. Either a full document is returned or DecodeError is raised."""
        self._types = {}
        self._references = []
        self._skipped = 0
        raw = self._validate(extract_schema(self.payload))

        if raw.types is None:
            raise DecodeError("Introspection result has no types", expected="a list", found="null")
        if raw.query_type is None or not raw.query_type.name:
            raise DecodeError("Introspection result has no queryType", expected="queryType.name")

        for index, node in enumerate(raw.types):
            self._process_type(index, node)

        roots = RootTypes(
            query=raw.query_type.name,
            mutation=raw.mutation_type.name if raw.mutation_type else None,
            subscription=raw.subscription_type.name if raw.subscription_type else None,
        )
        self._check_roots(roots)

        directives = tuple(self._process_directive(d) for d in raw.directives or [])
        self._check_references()

        logger.debug(
            "Decoded %d types (%d introspection types skipped), %d directives; roots: %s",
            len(self._types), self._skipped, len(directives), roots,
        )
        return SchemaDocument(types=dict(self._types), roots=roots, directives=directives)

    @staticmethod
    def _validate(schema: Mapping[str, Any]) -> RawSchema:
        try:
            return RawSchema.model_validate(schema)
        except ValidationError as e:
            error = e.errors()[0]
            location = ".".join(str(part) for part in error["loc"])
            raise DecodeError(
                f"Malformed introspection result at '{location}'",
                expected=error["msg"],
                found=type(error.get("input")).__name__,
            ) from e

    def _process_type(self, index: int, node: RawType):
        if not node.name:
            raise DecodeError(
                f"Type node at types[{index}] has no name",
                expected="a non-empty name",
                found=repr(node.name),
            )
        name = node.name
        if name.startswith(INTROSPECTION_PREFIX):
            self._skipped += 1
            return
        if not node.kind:
            raise DecodeError("Type node has no kind", type_name=name, expected="a kind", found="null")
        try:
            kind = TypeKind(node.kind)
        except ValueError:
            raise DecodeError(
                "Unsupported type kind",
                type_name=name,
                expected=f"one of {', '.join(k.value for k in TypeKind)}",
                found=repr(node.kind),
            ) from None
        if name in self._types:
            raise DecodeError("Duplicate type name", type_name=name)

        if kind == TypeKind.OBJECT:
            definition = self._process_object(name, node)
        elif kind == TypeKind.INTERFACE:
            definition = self._process_interface(name, node)
        elif kind == TypeKind.INPUT_OBJECT:
            definition = self._process_input_object(name, node)
        elif kind == TypeKind.ENUM:
            definition = self._process_enum(name, node)
        elif kind == TypeKind.UNION:
            definition = self._process_union(name, node)
        else:
            definition = TypeDefinition(name=name, kind=kind, description=node.description)
        self._types[name] = definition

    def _process_object(self, name: str, node: RawType) -> TypeDefinition:
        return TypeDefinition(
            name=name,
            kind=TypeKind.OBJECT,
            description=node.description,
            fields=self._process_fields(name, node.fields or []),
            interfaces=self._named_refs(name, node.interfaces or [], "interfaces"),
        )

    def _process_interface(self, name: str, node: RawType) -> TypeDefinition:
        return TypeDefinition(
            name=name,
            kind=TypeKind.INTERFACE,
            description=node.description,
            fields=self._process_fields(name, node.fields or []),
            interfaces=self._named_refs(name, node.interfaces or [], "interfaces"),
            possible_types=self._named_refs(name, node.possible_types or [], "possibleTypes"),
        )

    def _process_input_object(self, name: str, node: RawType) -> TypeDefinition:
        return TypeDefinition(
            name=name,
            kind=TypeKind.INPUT_OBJECT,
            description=node.description,
            input_fields=self._process_arguments(name, None, node.input_fields or []),
        )

    def _process_enum(self, name: str, node: RawType) -> TypeDefinition:
        return TypeDefinition(
            name=name,
            kind=TypeKind.ENUM,
            description=node.description,
            enum_values=tuple(self._process_enum_value(name, v) for v in node.enum_values or []),
        )

    def _process_union(self, name: str, node: RawType) -> TypeDefinition:
        return TypeDefinition(
            name=name,
            kind=TypeKind.UNION,
            description=node.description,
            possible_types=self._named_refs(name, node.possible_types or [], "possibleTypes"),
        )

    def _process_fields(self, type_name: str, nodes: list[RawField]) -> tuple[FieldDefinition, ...]:
        """Process field nodes into FieldDefinitions, keeping their order."""
        fields = []
        for node in nodes:
            if not node.name:
                raise DecodeError("Field has no name", type_name=type_name, expected="a non-empty name")
            is_deprecated = bool(node.is_deprecated)
            fields.append(
                FieldDefinition(
                    name=node.name,
                    type_ref=self._type_ref(node.type_ref, type_name, node.name),
                    description=node.description,
                    arguments=self._process_arguments(type_name, node.name, node.args or []),
                    is_deprecated=is_deprecated,
                    deprecation_reason=node.deprecation_reason if is_deprecated else None,
                )
            )
        return tuple(fields)

    def _process_arguments(
        self, type_name: str, field_name: str | None, nodes: list[RawInputValue]
    ) -> tuple[Argument, ...]:
        """Process input values (arguments or input fields)."""
        arguments = []
        for node in nodes:
            if not node.name:
                raise DecodeError(
                    "Input value has no name",
                    type_name=type_name,
                    field_name=field_name,
                    expected="a non-empty name",
                )
            context = f"{field_name}.{node.name}" if field_name else node.name
            arguments.append(
                Argument(
                    name=node.name,
                    type_ref=self._type_ref(node.type_ref, type_name, context),
                    description=node.description,
                    default_value=node.default_value,
                )
            )
        return tuple(arguments)

    @staticmethod
    def _process_enum_value(type_name: str, node: RawEnumValue) -> EnumValueDefinition:
        if not node.name:
            raise DecodeError("Enum value has no name", type_name=type_name, expected="a non-empty name")
        is_deprecated = bool(node.is_deprecated)
        return EnumValueDefinition(
            name=node.name,
            description=node.description,
            is_deprecated=is_deprecated,
            deprecation_reason=node.deprecation_reason if is_deprecated else None,
        )

    def _process_directive(self, node: RawDirective) -> DirectiveDefinition:
        if not node.name:
            raise DecodeError("Directive has no name", expected="a non-empty name")
        owner = f"@{node.name}"
        return DirectiveDefinition(
            name=node.name,
            description=node.description,
            locations=tuple(node.locations or []),
            arguments=self._process_arguments(owner, None, node.args or []),
        )

    def _type_ref(self, node: RawTypeRef | None, type_name: str, field_name: str | None) -> TypeRef:
        ref = decode_type_ref(node, type_name=type_name, field_name=field_name)
        self._references.append((named_type(ref), type_name, field_name))
        return ref

    def _named_refs(self, type_name: str, nodes: list[RawTypeRef], field_name: str) -> tuple[str, ...]:
        """Decode `interfaces` / `possibleTypes` entries into plain names."""
        return tuple(named_type(self._type_ref(node, type_name, field_name)) for node in nodes)

    def _check_roots(self, roots: RootTypes):
        for operation, name in (
            ("query", roots.query),
            ("mutation", roots.mutation),
            ("subscription", roots.subscription),
        ):
            if name is None:
                continue
            definition = self._types.get(name)
            if definition is None:
                raise DecodeError(
                    f"Root {operation} type not found among types",
                    type_name=name,
                )
            if definition.kind != TypeKind.OBJECT:
                raise DecodeError(
                    f"Root {operation} type is not an object type",
                    type_name=name,
                    expected=TypeKind.OBJECT.value,
                    found=definition.kind.value,
                )

    def _check_references(self):
        for referenced, type_name, field_name in self._references:
            if referenced not in self._types:
                raise DecodeError(
                    "Reference to unknown type",
                    type_name=type_name,
                    field_name=field_name,
                    expected="a type listed in types",
                    found=repr(referenced),
                )


def decode_schema(payload: Any) -> SchemaDocument:
    """Decode an introspection result into a SchemaDocument."""
    return SchemaDecoder(payload).decode()
