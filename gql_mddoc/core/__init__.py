"""Core modules for GraphQL markdown documentation."""

from .aggregator import RenderedSchema, aggregate
from .auth import Auth, BearerAuth, CombinedAuth, HeaderAuth, NoAuth, parse_header
from .classifier import BUILTIN_SCALARS, Category, classify, group_by_category
from .config import OutputConfig, RenderConfig
from .decoder import SchemaDecoder, decode_schema, extract_schema
from .errors import DecodeError, GqlMdDocError, IntrospectionError, RenderError
from .fetch import INTROSPECTION_QUERY, IntrospectionClient, fetch_introspection
from .generator import DocGenerator, generate_docs
from .hooks import (
    FilterTypesHook,
    FrontMatterHook,
    HookRunner,
    PostRenderHook,
    PreRenderHook,
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
from .loader import load_introspection_file, load_schema, load_sdl
from .renderer import MarkdownRenderer
from .typeref import ListType, NamedType, NonNullType, TypeRef, decode_type_ref, named_type, print_type_ref
from .writer import DocWriter

__all__ = [
    # Errors
    "GqlMdDocError",
    "DecodeError",
    "RenderError",
    "IntrospectionError",
    # Type references
    "TypeRef",
    "NamedType",
    "ListType",
    "NonNullType",
    "decode_type_ref",
    "print_type_ref",
    "named_type",
    # IR types
    "Argument",
    "DirectiveDefinition",
    "EnumValueDefinition",
    "FieldDefinition",
    "RootTypes",
    "SchemaDocument",
    "TypeDefinition",
    "TypeKind",
    # Decoder
    "SchemaDecoder",
    "decode_schema",
    "extract_schema",
    # Classifier
    "BUILTIN_SCALARS",
    "Category",
    "classify",
    "group_by_category",
    # Rendering
    "MarkdownRenderer",
    "RenderedSchema",
    "aggregate",
    "DocGenerator",
    "generate_docs",
    # Config
    "RenderConfig",
    "OutputConfig",
    # Hooks
    "PreRenderHook",
    "PostRenderHook",
    "FilterTypesHook",
    "FrontMatterHook",
    "HookRunner",
    # Loading and fetching
    "load_introspection_file",
    "load_schema",
    "load_sdl",
    "INTROSPECTION_QUERY",
    "IntrospectionClient",
    "fetch_introspection",
    # Auth
    "Auth",
    "BearerAuth",
    "CombinedAuth",
    "HeaderAuth",
    "NoAuth",
    "parse_header",
    # Writer
    "DocWriter",
]
