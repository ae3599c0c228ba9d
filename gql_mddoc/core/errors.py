"""Exceptions raised while turning an introspection result into markdown."""

from typing import Any


class GqlMdDocError(Exception):
    """Base class for all gql-mddoc errors."""


class DecodeError(GqlMdDocError):
    """Raised when an introspection payload is malformed or incomplete.

    The optional context attributes point at the offending type and field
    so the message is actionable without a debugger.
    """

    def __init__(
        self,
        message: str,
        *,
        type_name: str | None = None,
        field_name: str | None = None,
        expected: str | None = None,
        found: str | None = None,
    ):
        self.message = message
        self.type_name = type_name
        self.field_name = field_name
        self.expected = expected
        self.found = found
        super().__init__(self._format())

    def _format(self) -> str:
        context = []
        if self.type_name:
            context.append(f"type '{self.type_name}'")
        if self.field_name:
            context.append(f"field '{self.field_name}'")
        if self.expected is not None:
            context.append(f"expected {self.expected}")
        if self.found is not None:
            context.append(f"found {self.found}")
        if not context:
            return self.message
        return f"{self.message} ({', '.join(context)})"


class RenderError(GqlMdDocError):
    """Raised when a type cannot be assigned a category or a template."""

    def __init__(self, message: str, *, type_name: str | None = None):
        self.message = message
        self.type_name = type_name
        if type_name:
            message = f"{message} (type '{type_name}')"
        super().__init__(message)


class IntrospectionError(GqlMdDocError):
    """Raised when the introspection endpoint answers with GraphQL errors."""

    def __init__(self, message: str, errors: list[Any]):
        self.message = message
        self.errors = errors
        super().__init__(message)
