"""Documentation generator: decode, classify, render and aggregate.

Example:
    document = decode_schema(payload)
    rendered = DocGenerator(document).generate()
    rendered.sections[Category.QUERIES]
"""

import logging

from .aggregator import RenderedSchema, aggregate
from .classifier import group_by_category
from .config import RenderConfig
from .hooks import HookRunner
from .ir import SchemaDocument
from .renderer import MarkdownRenderer

logger = logging.getLogger(__name__)


class DocGenerator:
    """Generates markdown documentation from a SchemaDocument."""

    def __init__(
        self,
        document: SchemaDocument,
        config: RenderConfig | None = None,
        hooks: HookRunner | None = None,
    ):
        """Initialize the generator.

        Args:
            document: The decoded schema
            config: Rendering options (defaults to RenderConfig())
            hooks: Optional hooks; pre-render hooks run before classification
        """
        self.document = document
        self.config = config or RenderConfig()
        self.hooks = hooks or HookRunner()
        self.renderer = MarkdownRenderer(self.config)

    def generate(self) -> RenderedSchema:
        """Render every category and aggregate the result."""
        document = self.hooks.run_pre_hooks(self.document)

        groups = group_by_category(
            document, include_builtin_scalars=self.config.include_builtin_scalars
        )
        fragments = {
            category: self.renderer.render_category(category, definitions)
            for category, definitions in groups.items()
        }

        directives = None
        if self.config.include_directives:
            directives = self.renderer.render_directives(document.directives)

        rendered = aggregate(fragments, directives)
        logger.debug("Generated sections: %s", ", ".join(c.value for c in rendered.categories))
        return rendered


def generate_docs(
    document: SchemaDocument,
    config: RenderConfig | None = None,
    hooks: HookRunner | None = None,
) -> RenderedSchema:
    """Shortcut for DocGenerator(document, config, hooks).generate()."""
    return DocGenerator(document, config, hooks).generate()
