"""Tests for aggregating category fragments."""

from gql_mddoc.core.aggregator import RenderedSchema, aggregate
from gql_mddoc.core.classifier import Category


class TestAggregate:
    """Tests for aggregate."""

    def test_fixed_order_regardless_of_input_order(self):
        rendered = aggregate({Category.SCALARS: "## S\n", Category.QUERIES: "## Q\n"})
        assert rendered.categories == [Category.QUERIES, Category.SCALARS]

    def test_document(self):
        rendered = aggregate({Category.SCALARS: "## S\n", Category.QUERIES: "## Q\n"})
        assert rendered.document == "# Queries\n\n## Q\n\n# Scalars\n\n## S\n"

    def test_empty_categories_omitted(self):
        rendered = aggregate({c: "" for c in Category} | {Category.ENUMS: "## E\n"})
        assert list(rendered.sections) == [Category.ENUMS]
        assert "# Queries" not in rendered.document

    def test_sections_keep_fragments_unchanged(self):
        rendered = aggregate({Category.OBJECTS: "## User\n"})
        assert rendered.sections[Category.OBJECTS] == "## User\n"

    def test_directives_appended(self):
        rendered = aggregate({Category.QUERIES: "## Q\n"}, directives="## @live\n")
        assert rendered.directives == "## @live\n"
        assert rendered.document.endswith("# Directives\n\n## @live\n")

    def test_blank_directives_dropped(self):
        rendered = aggregate({Category.QUERIES: "## Q\n"}, directives="")
        assert rendered.directives is None
        assert "Directives" not in rendered.document

    def test_nothing_rendered(self):
        assert aggregate({}) == RenderedSchema()

    def test_iteration(self):
        rendered = aggregate({Category.QUERIES: "## Q\n"})
        assert list(rendered) == [(Category.QUERIES, "## Q\n")]
