"""Configuration for rendering and writing documentation."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class RenderConfig:
    """Options that change what the renderer emits."""
    include_builtin_scalars: bool = True  # String, Int, Float, Boolean, ID
    include_directives: bool = False
    template_dir: str | None = None


@dataclass
class OutputConfig:
    """Options for the file writer."""
    output: Path = Path("schema.md")
    multiple_files: bool = False
    front_matter: str | None = None  # Jinja2 template text
    variables: dict[str, str] = field(default_factory=dict)
