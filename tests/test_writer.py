"""Tests for writing rendered documentation."""

import pytest

from gql_mddoc.core.aggregator import aggregate
from gql_mddoc.core.classifier import Category
from gql_mddoc.core.hooks import FrontMatterHook, HookRunner
from gql_mddoc.core.writer import DocWriter


@pytest.fixture
def rendered():
    return aggregate({Category.QUERIES: "## Query\n", Category.ENUMS: "## Role\n"})


class TestSingleFile:
    """Tests for single-file output."""

    def test_writes_document(self, tmp_path, rendered):
        target = tmp_path / "docs" / "api.md"
        written = DocWriter(target).write(rendered)
        assert written == [target]
        assert target.read_text(encoding="utf-8") == rendered.document

    def test_directory_target(self, tmp_path, rendered):
        written = DocWriter(tmp_path).write(rendered)
        assert written == [tmp_path / "schema.md"]

    def test_front_matter(self, tmp_path, rendered):
        hooks = HookRunner()
        hooks.add_post_hook(FrontMatterHook("---\ntitle: {{ title }}\n---"))
        target = tmp_path / "schema.md"
        DocWriter(target, hooks=hooks).write(rendered)
        assert target.read_text(encoding="utf-8").startswith("---\ntitle: Schema\n---\n\n# Queries\n")


class TestMultipleFiles:
    """Tests for one file per category."""

    def test_one_file_per_section(self, tmp_path, rendered):
        written = DocWriter(tmp_path / "out", multiple_files=True).write(rendered)
        assert [p.name for p in written] == ["queries.md", "enums.md"]
        assert (tmp_path / "out" / "queries.md").read_text(encoding="utf-8") == "## Query\n"

    def test_no_empty_category_files(self, tmp_path, rendered):
        DocWriter(tmp_path, multiple_files=True).write(rendered)
        assert not (tmp_path / "objects.md").exists()

    def test_directives_file(self, tmp_path):
        rendered = aggregate({Category.QUERIES: "## Query\n"}, directives="## @live\n")
        DocWriter(tmp_path, multiple_files=True).write(rendered)
        assert (tmp_path / "directives.md").read_text(encoding="utf-8") == "## @live\n"

    def test_front_matter_per_file(self, tmp_path, rendered):
        hooks = HookRunner()
        hooks.add_post_hook(FrontMatterHook("# {{ title }}"))
        DocWriter(tmp_path, multiple_files=True, hooks=hooks).write(rendered)
        assert (tmp_path / "enums.md").read_text(encoding="utf-8") == "# Enums\n\n## Role\n"

    def test_planned_files_does_not_write(self, tmp_path, rendered):
        files = DocWriter(tmp_path / "out", multiple_files=True).planned_files(rendered)
        assert set(files) == {tmp_path / "out" / "queries.md", tmp_path / "out" / "enums.md"}
        assert not (tmp_path / "out").exists()
