"""Merges rendered category fragments into the writer's input."""

from collections.abc import Mapping
from dataclasses import dataclass, field

from .classifier import Category

DIRECTIVES_HEADING = "Directives"


@dataclass(frozen=True)
class RenderedSchema:
    """Rendered documentation, ready to be written.

    Attributes:
        sections: Markdown per non-empty category, in document order
        document: All sections concatenated, each under a category heading
        directives: The directives section, if it was rendered
    """
    sections: dict[Category, str] = field(default_factory=dict)
    document: str = ""
    directives: str | None = None

    def __iter__(self):
        return iter(self.sections.items())

    @property
    def categories(self) -> list[Category]:
        return list(self.sections)


def aggregate(fragments: Mapping[Category, str], directives: str | None = None) -> RenderedSchema:
    """Build a RenderedSchema from per-category fragments.

    Categories are emitted in their fixed order regardless of the order of
    `fragments`; empty categories are left out entirely.
    """
    sections = {
        category: fragments[category]
        for category in Category
        if fragments.get(category, "").strip()
    }

    parts = [f"# {category.heading}\n\n{text}" for category, text in sections.items()]
    if directives and directives.strip():
        parts.append(f"# {DIRECTIVES_HEADING}\n\n{directives}")
    else:
        directives = None

    return RenderedSchema(sections=sections, document="\n".join(parts), directives=directives)
