"""Render hooks for customizing documentation output.

Pre-render hooks receive the decoded schema before it is classified and may
return a different document. Post-render hooks receive each file's markdown
before it is written.

Example usage:
    from gql_mddoc.core.hooks import HookRunner, FilterTypesHook, FrontMatterHook

    runner = HookRunner()
    runner.add_pre_hook(FilterTypesHook(exclude_prefix="Internal"))
    runner.add_post_hook(FrontMatterHook("---\\ntitle: {{ title }}\\n---"))
"""

import dataclasses
from typing import Protocol, runtime_checkable

from jinja2 import Environment, StrictUndefined, TemplateError

from .errors import RenderError
from .ir import SchemaDocument


@runtime_checkable
class PreRenderHook(Protocol):
    """Protocol for pre-render hooks.

    SchemaDocument is immutable, so a hook that changes it returns a new
    document (e.g. via dataclasses.replace).
    """

    def pre_render(self, document: SchemaDocument) -> SchemaDocument:
        """Called before classification.

        Args:
            document: The decoded schema

        Returns:
            The document to render
        """
        ...


@runtime_checkable
class PostRenderHook(Protocol):
    """Protocol for post-render hooks.

    Post-render hooks receive the markdown for each file and can transform
    it before it's written to disk.
    """

    def post_render(self, filename: str, content: str) -> str:
        """Called for each file before it is written.

        Args:
            filename: The name of the file (e.g., "queries.md")
            content: The rendered markdown

        Returns:
            The (possibly transformed) markdown to write
        """
        ...


class FrontMatterHook:
    """Built-in hook to prepend front matter to every written file.

    The front matter is a Jinja2 template. Available variables are `title`,
    `category` and `filename`, plus any user-supplied variables.

    Example:
        hook = FrontMatterHook("---\\ntitle: {{ title }}\\nweight: {{ weight }}\\n---", {"weight": "10"})
    """

    def __init__(self, template: str, variables: dict[str, str] | None = None):
        self.variables = dict(variables or {})
        env = Environment(undefined=StrictUndefined, keep_trailing_newline=True)
        try:
            self.template = env.from_string(template)
        except TemplateError as e:
            raise RenderError(f"Invalid front matter template: {e}") from e

    def post_render(self, filename: str, content: str) -> str:
        """Render the front matter for this file and prepend it."""
        category = filename.rsplit(".", 1)[0]
        context = {"title": category.capitalize(), "category": category, "filename": filename}
        context.update(self.variables)
        try:
            header = self.template.render(context)
        except TemplateError as e:
            raise RenderError(f"Failed to render front matter for {filename}: {e}") from e
        if not header.endswith("\n"):
            header += "\n\n"
        else:
            header += "\n"
        return header + content


class FilterTypesHook:
    """Built-in hook to filter types by name prefix/suffix.

    Root operation types are always kept.

    Example:
        # Remove all types starting with "Internal"
        hook = FilterTypesHook(exclude_prefix="Internal")
    """

    def __init__(
        self,
        exclude_prefix: str | None = None,
        exclude_suffix: str | None = None,
        include_prefix: str | None = None,
        include_suffix: str | None = None,
    ):
        self.exclude_prefix = exclude_prefix
        self.exclude_suffix = exclude_suffix
        self.include_prefix = include_prefix
        self.include_suffix = include_suffix

    def _should_include(self, name: str) -> bool:
        """Check if a type should be included."""
        if self.exclude_prefix and name.startswith(self.exclude_prefix):
            return False
        if self.exclude_suffix and name.endswith(self.exclude_suffix):
            return False
        if self.include_prefix and not name.startswith(self.include_prefix):
            return False
        if self.include_suffix and not name.endswith(self.include_suffix):
            return False
        return True

    def pre_render(self, document: SchemaDocument) -> SchemaDocument:
        """Return a copy of the document without the filtered types."""
        roots = {document.roots.query, document.roots.mutation, document.roots.subscription}
        types = {
            name: definition
            for name, definition in document.types.items()
            if name in roots or self._should_include(name)
        }
        return dataclasses.replace(document, types=types)


class HookRunner:
    """Runs a collection of hooks in order."""

    def __init__(self):
        self.pre_hooks: list[PreRenderHook] = []
        self.post_hooks: list[PostRenderHook] = []

    def add_pre_hook(self, hook: PreRenderHook):
        """Add a pre-render hook."""
        self.pre_hooks.append(hook)

    def add_post_hook(self, hook: PostRenderHook):
        """Add a post-render hook."""
        self.post_hooks.append(hook)

    def run_pre_hooks(self, document: SchemaDocument) -> SchemaDocument:
        """Run all pre-render hooks in order."""
        for hook in self.pre_hooks:
            document = hook.pre_render(document)
        return document

    def run_post_hooks(self, filename: str, content: str) -> str:
        """Run all post-render hooks in order."""
        for hook in self.post_hooks:
            content = hook.post_render(filename, content)
        return content
