"""Writes rendered documentation to disk as one file or one file per category."""

import logging
from pathlib import Path

from .aggregator import RenderedSchema
from .hooks import HookRunner

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "schema.md"
DIRECTIVES_FILENAME = "directives.md"


class DocWriter:
    """Writes a RenderedSchema.

    In single-file mode `output` is the target file; an existing directory
    gets schema.md inside it. In multiple-file mode `output` is a directory
    that receives one `<category>.md` per section.
    """

    def __init__(
        self,
        output: str | Path,
        multiple_files: bool = False,
        hooks: HookRunner | None = None,
    ):
        self.output = Path(output)
        self.multiple_files = multiple_files
        self.hooks = hooks or HookRunner()

    def planned_files(self, rendered: RenderedSchema) -> dict[Path, str]:
        """Return the files that would be written, with hooks applied."""
        if not self.multiple_files:
            target = self.output
            if target.is_dir():
                target = target / DEFAULT_FILENAME
            return {target: self.hooks.run_post_hooks(target.name, rendered.document)}

        files = {}
        for category, text in rendered.sections.items():
            filename = f"{category.value}.md"
            files[self.output / filename] = self.hooks.run_post_hooks(filename, text)
        if rendered.directives:
            files[self.output / DIRECTIVES_FILENAME] = self.hooks.run_post_hooks(
                DIRECTIVES_FILENAME, rendered.directives
            )
        return files

    def write(self, rendered: RenderedSchema) -> list[Path]:
        """Write all files and return their paths.

        Content is rendered for every file before anything touches the disk.
        """
        files = self.planned_files(rendered)
        for path, content in files.items():
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
            logger.debug("Wrote %s (%d bytes)", path, len(content))
        return list(files)
