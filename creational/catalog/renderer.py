"""
Markdown rendering of the catalog.

The rendered document is the project's documentation artifact: prose,
snippet source, captured output and further reading for every pattern.
"""

import inspect
import os
from typing import List

import structlog

from creational.catalog.registry import PatternCatalog
from creational.catalog.runner import ExampleRunner
from creational.core.config import DocsSettings
from creational.core.data_models import PatternEntry
from creational.core.exceptions import ExampleExecutionError

logger = structlog.get_logger(__name__)

INTRO = (
    "Creational patterns deal with how objects get created. Each section below "
    "explains one pattern, shows a short self-contained example and the output "
    "of running it, and links to further reading."
)


class MarkdownRenderer:
    """Renders every catalog entry into a single markdown document."""

    def __init__(
        self, catalog: PatternCatalog, runner: ExampleRunner, settings: DocsSettings
    ):
        self.catalog = catalog
        self.runner = runner
        self.settings = settings

    def render(self) -> str:
        entries = self.catalog.entries()
        lines: List[str] = [f"# {self.settings.title}", "", INTRO, "", "## Contents", ""]
        lines.extend(f"- [{e.name}](#{e.slug})" for e in entries)

        for entry in entries:
            lines.append("")
            lines.extend(self.render_entry(entry))

        return "\n".join(lines) + "\n"

    def render_entry(self, entry: PatternEntry) -> List[str]:
        lines = [f"## {entry.name}", "", entry.summary, "", entry.intent, ""]

        if entry.participants:
            lines += ["**Participants**", ""]
            lines += [f"- {p}" for p in entry.participants]
            lines.append("")

        if self.settings.include_source:
            lines += ["**Example**", ""]
            try:
                source = inspect.getsource(self.catalog.load_module(entry)).rstrip()
            except ExampleExecutionError as e:
                logger.warning(f"Source of '{entry.slug}' unavailable: {e}")
                lines += [f"> Source unavailable: {e}", ""]
            else:
                lines += ["```python", source, "```", ""]

        if self.settings.include_output:
            result = self.runner.run(entry.slug)
            lines += ["**Output**", ""]
            if result.succeeded:
                lines += ["```text", result.output.rstrip(), "```", ""]
            else:
                lines += [f"> Example failed: {result.error}", ""]

        if entry.references:
            lines += ["**Further reading**", ""]
            lines += [f"- [{ref.title}: {entry.name}]({ref.url})" for ref in entry.references]
        else:
            lines.pop()

        return lines

    def write(self, path: str | None = None) -> str:
        """Renders the document and writes it to disk, returning the path."""
        path = path or self.settings.output_file
        document = self.render()

        directory = os.path.dirname(os.path.abspath(path))
        os.makedirs(directory, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(document)

        logger.info(f"Documentation written to {path}", patterns=len(self.catalog))
        return path
