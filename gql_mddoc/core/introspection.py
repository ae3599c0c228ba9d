"""Pydantic models mirroring the JSON shape of an introspection result.

Everything is optional here. Presence checks live in the decoder so that
missing data turns into a DecodeError with type and field context instead
of a generic validation message.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RawModel(BaseModel):
    """Base model accepting both alias (camelCase) and Python field names."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class RawTypeRef(RawModel):
    """A type occurrence: kind, name and an optional wrapped type."""

    kind: str | None = None
    name: str | None = None
    of_type: Optional["RawTypeRef"] = Field(default=None, alias="ofType")


class RawNamedRef(RawModel):
    """Reference to a root operation type (`queryType`, ...)."""

    name: str | None = None


class RawInputValue(RawModel):
    name: str | None = None
    description: str | None = None
    type_ref: RawTypeRef | None = Field(default=None, alias="type")
    default_value: str | None = Field(default=None, alias="defaultValue")


class RawField(RawModel):
    name: str | None = None
    description: str | None = None
    args: list[RawInputValue] | None = None
    type_ref: RawTypeRef | None = Field(default=None, alias="type")
    is_deprecated: bool | None = Field(default=None, alias="isDeprecated")
    deprecation_reason: str | None = Field(default=None, alias="deprecationReason")


class RawEnumValue(RawModel):
    name: str | None = None
    description: str | None = None
    is_deprecated: bool | None = Field(default=None, alias="isDeprecated")
    deprecation_reason: str | None = Field(default=None, alias="deprecationReason")


class RawType(RawModel):
    """A full type node from the `types` collection."""

    kind: str | None = None
    name: str | None = None
    description: str | None = None
    fields: list[RawField] | None = None
    input_fields: list[RawInputValue] | None = Field(default=None, alias="inputFields")
    interfaces: list[RawTypeRef] | None = None
    enum_values: list[RawEnumValue] | None = Field(default=None, alias="enumValues")
    possible_types: list[RawTypeRef] | None = Field(default=None, alias="possibleTypes")


class RawDirective(RawModel):
    name: str | None = None
    description: str | None = None
    locations: list[str] | None = None
    args: list[RawInputValue] | None = None


class RawSchema(RawModel):
    """The `__schema` object."""

    query_type: RawNamedRef | None = Field(default=None, alias="queryType")
    mutation_type: RawNamedRef | None = Field(default=None, alias="mutationType")
    subscription_type: RawNamedRef | None = Field(default=None, alias="subscriptionType")
    types: list[RawType] | None = None
    directives: list[RawDirective] | None = None


RawTypeRef.model_rebuild()
