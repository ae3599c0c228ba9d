"""Tests for render hooks."""

import pytest

from gql_mddoc.core.decoder import decode_schema
from gql_mddoc.core.errors import RenderError
from gql_mddoc.core.hooks import (
    FilterTypesHook,
    FrontMatterHook,
    HookRunner,
    PostRenderHook,
    PreRenderHook,
)

from schema_payloads import sample_schema, wrap


@pytest.fixture
def document():
    return decode_schema(wrap(sample_schema()))


class TestFrontMatterHook:
    """Tests for FrontMatterHook."""

    def test_prepends_rendered_template(self):
        hook = FrontMatterHook("---\ntitle: {{ title }}\n---")
        result = hook.post_render("queries.md", "## Query\n")
        assert result == "---\ntitle: Queries\n---\n\n## Query\n"

    def test_template_with_trailing_newline(self):
        hook = FrontMatterHook("---\ncategory: {{ category }}\n---\n")
        result = hook.post_render("enums.md", "body")
        assert result == "---\ncategory: enums\n---\n\nbody"

    def test_user_variables(self):
        hook = FrontMatterHook("weight: {{ weight }} file: {{ filename }}", {"weight": "10"})
        assert hook.post_render("schema.md", "x").startswith("weight: 10 file: schema.md\n")

    def test_user_variables_override_defaults(self):
        hook = FrontMatterHook("{{ title }}", {"title": "API"})
        assert hook.post_render("scalars.md", "x") == "API\n\nx"

    def test_undefined_variable(self):
        hook = FrontMatterHook("{{ missing }}")
        with pytest.raises(RenderError, match="schema.md"):
            hook.post_render("schema.md", "x")

    def test_invalid_template(self):
        with pytest.raises(RenderError, match="Invalid front matter"):
            FrontMatterHook("{% if %}")


class TestFilterTypesHook:
    """Tests for FilterTypesHook."""

    def test_exclude_prefix(self, document):
        result = FilterTypesHook(exclude_prefix="Create").pre_render(document)
        assert "CreateUserInput" not in result
        assert "User" in result

    def test_exclude_suffix(self, document):
        result = FilterTypesHook(exclude_suffix="Input").pre_render(document)
        assert "CreateUserInput" not in result

    def test_include_prefix_keeps_roots(self, document):
        result = FilterTypesHook(include_prefix="Us").pre_render(document)
        assert list(result.types) == ["Query", "Mutation", "Subscription", "User"]

    def test_does_not_mutate(self, document):
        FilterTypesHook(exclude_prefix="User").pre_render(document)
        assert "User" in document

    def test_keeps_roots_and_directives(self, document):
        result = FilterTypesHook(exclude_prefix="Q").pre_render(document)
        assert "Query" in result
        assert result.roots == document.roots
        assert result.directives == document.directives


class TestHookRunner:
    """Tests for HookRunner."""

    def test_runs_pre_hooks_in_order(self, document):
        runner = HookRunner()
        runner.add_pre_hook(FilterTypesHook(exclude_prefix="Role"))
        runner.add_pre_hook(FilterTypesHook(exclude_prefix="Node"))
        result = runner.run_pre_hooks(document)
        assert "Role" not in result
        assert "Node" not in result

    def test_runs_post_hooks_in_order(self):
        runner = HookRunner()
        runner.add_post_hook(FrontMatterHook("second"))
        runner.add_post_hook(FrontMatterHook("first"))
        assert runner.run_post_hooks("a.md", "body") == "first\n\nsecond\n\nbody"

    def test_no_hooks(self, document):
        runner = HookRunner()
        assert runner.run_pre_hooks(document) is document
        assert runner.run_post_hooks("a.md", "body") == "body"


class TestProtocols:
    """Tests for protocol compliance."""

    def test_front_matter_is_post_hook(self):
        assert isinstance(FrontMatterHook("x"), PostRenderHook)

    def test_filter_is_pre_hook(self):
        assert isinstance(FilterTypesHook(), PreRenderHook)
