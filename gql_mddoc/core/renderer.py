"""Markdown renderer for decoded GraphQL schemas.

Renders one Jinja2 template per type kind. Custom templates can be supplied
through RenderConfig.template_dir:

    renderer = MarkdownRenderer(RenderConfig(template_dir="./my_templates"))

Template lookup order:
1. User's template directory (if provided)
2. Package default templates
"""

import logging
import re
from collections.abc import Iterable
from pathlib import Path

from jinja2 import (
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    TemplateError,
    select_autoescape,
)

from .classifier import Category
from .config import RenderConfig
from .errors import RenderError
from .ir import Argument, DirectiveDefinition, EnumValueDefinition, FieldDefinition, TypeDefinition, TypeKind
from .typeref import TypeRef, print_type_ref

logger = logging.getLogger(__name__)

DEPRECATED = "**Deprecated**"


def inline(text: str | None) -> str:
    """Collapse text onto a single line for use inside a list entry."""
    if not text:
        return ""
    return re.sub(r"\s+", " ", text).strip()


def code(text: str) -> str:
    """Wrap text in an inline code span.

    The fence is one backtick longer than the longest backtick run in text.
    """
    runs = re.findall(r"`+", text)
    if not runs:
        return f"`{text}`"
    fence = "`" * (max(len(run) for run in runs) + 1)
    return f"{fence} {text} {fence}"


def description(text: str | None) -> str:
    """Block description, verbatim apart from surrounding blank lines."""
    if not text:
        return ""
    return re.sub(r"\A(?:[ \t]*\n)+", "", text).rstrip()


def signature(ref: TypeRef) -> str:
    """SDL signature of a type reference, e.g. [String!]!."""
    return print_type_ref(ref)


def deprecation(item: FieldDefinition | EnumValueDefinition) -> str:
    """Deprecation marker for a field or enum value, empty if not deprecated."""
    if not item.is_deprecated:
        return ""
    reason = inline(item.deprecation_reason)
    if reason:
        return f" **Deprecated:** {reason}"
    return f" {DEPRECATED}"


def input_value_entry(argument: Argument) -> str:
    """List entry for an argument or input field."""
    entry = f"- {code(argument.name)}: {code(signature(argument.type_ref))}"
    if argument.default_value is not None:
        entry += f" = {code(argument.default_value)}"
    if argument.description:
        entry += f" - {inline(argument.description)}"
    return entry


def field_entry(field: FieldDefinition) -> str:
    """List entry for an object or interface field, with nested arguments."""
    lines = [f"- {code(field.name)}: {code(signature(field.type_ref))}"]
    if field.description:
        lines[0] += f" - {inline(field.description)}"
    lines[0] += deprecation(field)
    for argument in field.arguments:
        lines.append("  " + input_value_entry(argument))
    return "\n".join(lines)


def enum_value_entry(value: EnumValueDefinition) -> str:
    """List entry for an enum value."""
    entry = f"- {code(value.name)}"
    if value.description:
        entry += f" - {inline(value.description)}"
    return entry + deprecation(value)


class MarkdownRenderer:
    """Renders categories of TypeDefinitions into markdown fragments.

    Available templates to override:
        - object.md.j2 - object types, including root operation types
        - input_object.md.j2 - input object types
        - interface.md.j2 - interfaces
        - enum.md.j2 - enums
        - union.md.j2 - unions
        - scalar.md.j2 - scalars
        - directives.md.j2 - the directives section
        - _header.md.j2 - heading and description shared by all types
    """

    TEMPLATES = {
        TypeKind.OBJECT: "object.md.j2",
        TypeKind.INPUT_OBJECT: "input_object.md.j2",
        TypeKind.INTERFACE: "interface.md.j2",
        TypeKind.ENUM: "enum.md.j2",
        TypeKind.UNION: "union.md.j2",
        TypeKind.SCALAR: "scalar.md.j2",
    }

    def __init__(self, config: RenderConfig | None = None):
        self.config = config or RenderConfig()

        # Build template loader - custom templates take precedence
        loaders = []
        if self.config.template_dir:
            template_path = Path(self.config.template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
            else:
                logger.warning("Template directory %s does not exist, using defaults", template_path)
        loaders.append(PackageLoader("gql_mddoc", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(default_for_string=False),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["inline"] = inline
        self.env.filters["code"] = code
        self.env.filters["description"] = description
        self.env.filters["signature"] = signature
        self.env.filters["deprecation"] = deprecation
        self.env.filters["input_value_entry"] = input_value_entry
        self.env.filters["field_entry"] = field_entry
        self.env.filters["enum_value_entry"] = enum_value_entry

    def render_type(self, definition: TypeDefinition, category: Category | None = None) -> str:
        """Render a single type into a markdown block."""
        template_name = self.TEMPLATES.get(definition.kind)
        if template_name is None:
            raise RenderError(f"No template for kind {definition.kind!r}", type_name=definition.name)
        return self._render(template_name, definition=definition, category=category)

    def render_category(self, category: Category, definitions: Iterable[TypeDefinition]) -> str:
        """Render all types of a category, in the given order.

        Returns an empty string when the category has no types.
        """
        blocks = [self.render_type(d, category).rstrip("\n") + "\n" for d in definitions]
        logger.debug("Rendered %d types for %s", len(blocks), category.value)
        return "\n".join(blocks)

    def render_directives(self, directives: Iterable[DirectiveDefinition]) -> str:
        """Render the directives section. Empty if there are none."""
        directives = list(directives)
        if not directives:
            return ""
        return self._render("directives.md.j2", directives=directives).rstrip("\n") + "\n"

    def _render(self, template_name: str, **context) -> str:
        try:
            return self.env.get_template(template_name).render(**context)
        except TemplateError as e:
            raise RenderError(f"Failed to render template {template_name}: {e}") from e
