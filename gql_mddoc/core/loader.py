"""Loads introspection results from disk.

Supports JSON introspection results and GraphQL SDL files. SDL is built
with graphql-core and converted into the same introspection shape an
endpoint would return.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any

from graphql import GraphQLError, build_schema, introspection_from_schema

from .errors import DecodeError

logger = logging.getLogger(__name__)

SDL_SUFFIXES = (".graphql", ".graphqls", ".gql")


def load_introspection_file(path: str | os.PathLike) -> Any:
    """Read a JSON introspection result."""
    with open(path, encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise DecodeError(f"{path} is not valid JSON: {e}") from e


def collect_sdl_files(path: str | os.PathLike) -> list[str]:
    """Collect all SDL files from a file or directory path."""
    path = str(path)
    files = []
    if os.path.isfile(path):
        if path.endswith(SDL_SUFFIXES):
            files.append(path)
    else:
        for root, _, filenames in os.walk(path):
            for filename in filenames:
                if filename.endswith(SDL_SUFFIXES):
                    files.append(os.path.join(root, filename))
    return sorted(files)


def load_sdl(path: str | os.PathLike) -> dict[str, Any]:
    """Build SDL from a file or directory and return its introspection result."""
    files = collect_sdl_files(path)
    if not files:
        raise DecodeError(f"No GraphQL schema files found in {path}", expected=", ".join(SDL_SUFFIXES))

    sources = []
    for file_path in files:
        with open(file_path, encoding="utf-8") as f:
            sources.append(f.read())
    logger.debug("Building schema from %d SDL file(s)", len(files))

    try:
        schema = build_schema("\n".join(sources))
    except GraphQLError as e:
        raise DecodeError(f"Invalid GraphQL SDL: {e.message}") from e
    except TypeError as e:
        # graphql-core reports SDL validation failures as TypeError
        raise DecodeError(f"Invalid GraphQL SDL: {e}") from e
    return dict(introspection_from_schema(schema))


def load_schema(path: str | os.PathLike) -> Any:
    """Load an introspection result from JSON, an SDL file, or a directory of SDL files."""
    if Path(path).is_file() and str(path).endswith(".json"):
        return load_introspection_file(path)
    return load_sdl(path)
