import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel

from topicmap._builder import BuildResult, build_registry
from topicmap._errors import TopicGraphError, TopicNotFoundError
from topicmap._io import export_render_graph, load_document
from topicmap._slug import normalize

from .config import ConfigError, TopicmapConfig, get_config
from .render import level_summary_table, render_level_table, render_mismatches, render_topic_detail

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Topicmap CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


DocumentArgument = Annotated[
    Path | None,
    typer.Argument(help="Path to the topic document (TOML or JSON). Defaults to tool.topicmap.input in pyproject.toml"),
]
StrictOption = Annotated[
    bool | None,
    typer.Option("--strict/--no-strict", help="Treat reorder level mismatches as errors"),
]


def _load_config() -> TopicmapConfig:
    try:
        config = get_config()
    except ConfigError as e:
        err_console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e
    logger.debug(f"Configuration: {config}")
    return config


def _resolve_document(document: Path | None, config: TopicmapConfig) -> Path:
    """Pick the document argument, falling back to [tool.topicmap].input."""
    if document is not None:
        return document
    if config.input is not None:
        return config.input
    err_console.print("[red]✗ No document given and no \\[tool.topicmap].input configured[/red]")
    raise typer.Exit(code=1)


def _build(document_path: Path, *, strict: bool) -> BuildResult:
    """Load and build a document, reporting failures on stderr."""
    err_console.print(f"[cyan]Loading topics from:[/cyan] {escape(str(document_path))}")
    try:
        document = load_document(document_path)
        result = build_registry(document, strict=strict)
    except TopicGraphError as e:
        err_console.print()
        err_console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    if result.mismatches:
        err_console.print()
        err_console.print("[yellow]⚠ Reorder groups with topics on different levels:[/yellow]")
        render_mismatches(result.mismatches, err_console)
    return result


@app.command()
def check(
    document: DocumentArgument = None,
    *,
    strict: StrictOption = None,
) -> None:
    """Check that a topic document builds into a valid graph."""
    config = _load_config()
    document_path = _resolve_document(document, config)
    err_console.print()

    registry = _build(document_path, strict=config.strict if strict is None else strict).registry
    err_console.print()

    err_console.print(
        Panel(
            level_summary_table(registry),
            title=f"[bold]{escape(document_path.name)}[/bold]",
            subtitle=f"[dim]{len(registry)} topics, {len(registry.levels())} levels[/dim]",
            border_style="cyan",
        ),
    )

    err_console.print()
    err_console.print("[green]✓ Topic graph is valid[/green]")
    err_console.print()


@app.command()
def levels(
    document: DocumentArgument = None,
) -> None:
    """List topics ordered by level and horizontal hint."""
    config = _load_config()
    document_path = _resolve_document(document, config)
    err_console.print()

    registry = _build(document_path, strict=False).registry
    err_console.print()

    render_level_table(registry, out_console)


@app.command()
def show(
    document: Annotated[
        Path,
        typer.Argument(help="Path to the topic document (TOML or JSON)"),
    ],
    topic: Annotated[
        str,
        typer.Argument(help="Topic name or id"),
    ],
) -> None:
    """Show a topic with its prerequisites and dependents."""
    err_console.print()
    registry = _build(document, strict=False).registry
    err_console.print()

    try:
        found = registry.get(normalize(topic))
    except TopicNotFoundError as e:
        err_console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    render_topic_detail(found, registry, out_console)


@app.command()
def export(
    document: DocumentArgument = None,
    *,
    output: Annotated[
        Path | None,
        typer.Option("-o", "--output", help="Path to output file (.json or .toml). Defaults to tool.topicmap.output in pyproject.toml"),
    ] = None,
    indent: Annotated[
        int,
        typer.Option("--indent", help="JSON indentation spaces"),
    ] = 2,
    strict: StrictOption = None,
) -> None:
    """Export the graph in the shape expected by hierarchical graph renderers."""
    config = _load_config()
    document_path = _resolve_document(document, config)
    output_path = output if output is not None else config.output
    if output_path is None:
        err_console.print("[red]✗ No output given and no \\[tool.topicmap].output configured[/red]")
        raise typer.Exit(code=1)
    err_console.print()

    registry = _build(document_path, strict=config.strict if strict is None else strict).registry

    err_console.print(f"[cyan]Exporting graph to:[/cyan] {escape(str(output_path))}")
    try:
        export_render_graph(registry, output_path, indent=indent)
    except TopicGraphError as e:
        err_console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    err_console.print()
    err_console.print("[green]✓ Export complete[/green]")
    err_console.print()


if __name__ == "__main__":
    app()
