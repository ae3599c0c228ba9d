"""Tests for loading schemas from disk."""

import json

import pytest

from gql_mddoc.core.decoder import decode_schema
from gql_mddoc.core.errors import DecodeError
from gql_mddoc.core.loader import collect_sdl_files, load_introspection_file, load_schema, load_sdl

from schema_payloads import minimal_schema, wrap

SDL = "type Query { hello: String! }\n"


class TestLoadIntrospectionFile:
    """Tests for JSON introspection files."""

    def test_reads_json(self, tmp_path):
        path = tmp_path / "introspection.json"
        path.write_text(json.dumps(wrap(minimal_schema())))
        assert load_introspection_file(path) == wrap(minimal_schema())

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(DecodeError, match="not valid JSON"):
            load_introspection_file(path)


class TestLoadSdl:
    """Tests for SDL files."""

    def test_single_file(self, tmp_path):
        path = tmp_path / "schema.graphql"
        path.write_text(SDL)
        document = decode_schema(load_sdl(path))
        assert document.roots.query == "Query"
        assert "String" in document

    def test_directory_of_files(self, tmp_path):
        (tmp_path / "a.graphqls").write_text(SDL)
        (tmp_path / "nested").mkdir()
        (tmp_path / "nested" / "b.graphqls").write_text("type Book { title: String }\n")
        (tmp_path / "notes.txt").write_text("ignored")
        document = decode_schema(load_sdl(tmp_path))
        assert "Book" in document

    def test_collect_is_sorted(self, tmp_path):
        (tmp_path / "b.graphql").write_text(SDL)
        (tmp_path / "a.gql").write_text(SDL)
        assert [p.rsplit("/", 1)[-1] for p in collect_sdl_files(tmp_path)] == ["a.gql", "b.graphql"]

    def test_no_files(self, tmp_path):
        with pytest.raises(DecodeError, match="No GraphQL schema files"):
            load_sdl(tmp_path)

    def test_syntax_error(self, tmp_path):
        path = tmp_path / "schema.graphql"
        path.write_text("type Query {")
        with pytest.raises(DecodeError, match="Invalid GraphQL SDL"):
            load_sdl(path)

    def test_unknown_type(self, tmp_path):
        path = tmp_path / "schema.graphql"
        path.write_text("type Query { a: Missing }")
        with pytest.raises(DecodeError, match="Invalid GraphQL SDL"):
            load_sdl(path)


class TestLoadSchema:
    """Tests for picking the loader by path."""

    def test_json(self, tmp_path):
        path = tmp_path / "introspection.json"
        path.write_text(json.dumps(wrap(minimal_schema())))
        assert decode_schema(load_schema(path)).roots.query == "Query"

    def test_sdl(self, tmp_path):
        path = tmp_path / "schema.graphql"
        path.write_text(SDL)
        assert decode_schema(load_schema(path)).roots.query == "Query"
