import argparse
import dataclasses
import inspect
import sys

import structlog
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from creational import __version__
from creational.catalog.registry import PatternCatalog
from creational.catalog.renderer import MarkdownRenderer
from creational.catalog.runner import ExampleRunner
from creational.core.app import initialize_app
from creational.core.exceptions import CatalogError, PatternNotFoundError

logger = structlog.get_logger(__name__)

console = Console()


def list_patterns(container, args) -> int:
    """Displays the catalog in a rich table."""
    catalog = container.resolve(PatternCatalog)

    table = Table(
        title="Creational Design Patterns",
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column("Slug", style="bold green", no_wrap=True)
    table.add_column("Pattern", style="cyan", no_wrap=True)
    table.add_column("Summary", no_wrap=False)

    for entry in catalog.entries():
        table.add_row(entry.slug, entry.name, entry.summary)

    console.print(table)
    return 0


def show_pattern(container, args) -> int:
    """Shows the prose and the source of one example."""
    catalog = container.resolve(PatternCatalog)
    entry = catalog.get(args.pattern)

    participants = "\n".join(f"- {p}" for p in entry.participants)
    body = "\n\n".join([entry.summary, entry.intent, participants])
    console.print(Panel(Markdown(body), title=entry.name, expand=False))
    for ref in entry.references:
        console.print(f"{ref.title}: {ref.url}", soft_wrap=True)

    source = inspect.getsource(catalog.load_module(entry))
    console.print(Syntax(source, "python", line_numbers=True))
    return 0


def run_examples(container, args) -> int:
    """Runs one example, or all of them, echoing what they print."""
    runner = container.resolve(ExampleRunner)
    if args.all:
        results = runner.run_all()
    elif args.pattern:
        results = [runner.run(args.pattern)]
    else:
        console.print("[red]Name a pattern or pass --all.[/]")
        return 2

    exit_code = 0
    for result in results:
        if len(results) > 1:
            console.rule(result.slug)
        sys.stdout.write(result.output)
        if not result.succeeded:
            console.print(f"[bold red]Example '{result.slug}' failed:[/] {result.error}")
            exit_code = 1
    return exit_code


def render_docs(container, args) -> int:
    """Renders the markdown documentation."""
    renderer = container.resolve(MarkdownRenderer)
    renderer.settings = dataclasses.replace(
        renderer.settings,
        include_source=renderer.settings.include_source and not args.no_source,
        include_output=renderer.settings.include_output and not args.no_output,
    )

    path = renderer.write(args.output)
    console.print(f"Documentation written to [bold cyan]{path}[/]")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="creational",
        description="Browse, run and document the creational design pattern examples.",
    )
    parser.add_argument(
        "--version", action="version", version=f"creational {__version__}"
    )
    subparsers = parser.add_subparsers(
        dest="command", required=True, help="sub-command help"
    )

    # --- List Command ---
    parser_list = subparsers.add_parser("list", help="List the documented patterns.")
    parser_list.set_defaults(func=list_patterns)

    # --- Show Command ---
    parser_show = subparsers.add_parser(
        "show", help="Show the explanation and source of one pattern."
    )
    parser_show.add_argument("pattern", help="Slug, name or alias of the pattern.")
    parser_show.set_defaults(func=show_pattern)

    # --- Run Command ---
    parser_run = subparsers.add_parser("run", help="Run pattern examples.")
    parser_run.add_argument(
        "pattern", nargs="?", help="Slug, name or alias of the pattern."
    )
    parser_run.add_argument("--all", action="store_true", help="Run every example.")
    parser_run.set_defaults(func=run_examples)

    # --- Docs Command ---
    parser_docs = subparsers.add_parser(
        "docs", help="Render the catalog as a markdown document."
    )
    parser_docs.add_argument(
        "--output", metavar="PATH", help="Target file (defaults to DOCS_OUTPUT_FILE)."
    )
    parser_docs.add_argument(
        "--no-source", action="store_true", help="Leave the example source out."
    )
    parser_docs.add_argument(
        "--no-output", action="store_true", help="Leave the captured output out."
    )
    parser_docs.set_defaults(func=render_docs)

    return parser


def run_cli(argv: list[str]) -> int:
    """
    Parses command-line arguments and executes the corresponding command.
    This function is separate from main() to be easily testable.
    """
    args = build_parser().parse_args(argv)

    app_context = initialize_app()

    logger.info(f"Executing command: {args.command}")
    try:
        exit_code = args.func(app_context.container, args)
    except PatternNotFoundError as e:
        logger.error(str(e))
        console.print(f"[bold red]{e}[/]. Try 'creational list'.")
        return 1
    except CatalogError as e:
        logger.error(str(e), exc_info=True)
        console.print(f"[bold red]{e}[/]")
        return 1
    logger.info(f"Command '{args.command}' finished.", exit_code=exit_code)
    return exit_code


def main():
    """
    Main entry point for the application's command-line interface.
    """
    sys.exit(run_cli(sys.argv[1:]))


if __name__ == "__main__":
    main()
