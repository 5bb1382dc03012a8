"""
Executes example snippets and captures what they print.
"""

import contextlib
import io
from typing import List

import structlog

from creational.catalog.registry import PatternCatalog
from creational.core.data_models import ExampleResult, PatternEntry
from creational.core.error_handler import safe_call
from creational.core.exceptions import ExampleExecutionError

logger = structlog.get_logger(__name__)


def _call_captured(main, buffer: io.StringIO) -> None:
    # stdout is restored before any failure reaches the logger
    with contextlib.redirect_stdout(buffer):
        main()


class ExampleRunner:
    """
    Runs the main() of catalog examples with stdout redirected to a buffer.
    """

    def __init__(self, catalog: PatternCatalog):
        self.catalog = catalog

    def run(self, name: str) -> ExampleResult:
        """
        Runs one example.

        Lookup errors propagate; a module that cannot be loaded or a failure
        inside the example is reported in the returned result instead.
        """
        entry = self.catalog.get(name)
        return self._run_entry(entry)

    def run_all(self) -> List[ExampleResult]:
        return [self._run_entry(entry) for entry in self.catalog.entries()]

    def _run_entry(self, entry: PatternEntry) -> ExampleResult:
        try:
            main = self._resolve_main(entry)
        except ExampleExecutionError as e:
            logger.warning(f"Example '{entry.slug}' could not be loaded: {e}")
            return ExampleResult(
                slug=entry.slug,
                succeeded=False,
                error=f"{type(e).__name__}: {e}",
            )

        buffer = io.StringIO()
        succeeded, outcome = safe_call(_call_captured, main, buffer)

        if succeeded:
            output = buffer.getvalue()
            logger.info(f"Example '{entry.slug}' finished", lines=len(output.splitlines()))
            return ExampleResult(slug=entry.slug, succeeded=True, output=output)

        logger.warning(f"Example '{entry.slug}' failed: {outcome}")
        return ExampleResult(
            slug=entry.slug,
            succeeded=False,
            output=buffer.getvalue(),
            error=f"{type(outcome).__name__}: {outcome}",
        )

    def _resolve_main(self, entry: PatternEntry):
        module = self.catalog.load_module(entry)
        main = getattr(module, "main", None)
        if not callable(main):
            raise ExampleExecutionError(
                f"Example module '{entry.module}' does not define main()"
            )
        return main
