"""Rich rendering utilities for topic graph commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from topicmap._models import Category

if TYPE_CHECKING:
    from rich.console import Console

    from topicmap._errors import LevelMismatch
    from topicmap._models import Topic
    from topicmap._registry import TopicRegistry


def level_summary_table(registry: TopicRegistry) -> Table:
    """Build a table of the number of topics per level and their categories."""
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Level", justify="right", style="bold")
    table.add_column("Topics", justify="right")
    table.add_column("Categories")

    for level, topics in registry.levels().items():
        categories = sorted({topic.group for topic in topics})
        table.add_row(str(level), str(len(topics)), escape(", ".join(categories)))

    return table


def render_level_table(registry: TopicRegistry, console: Console) -> None:
    """Render every topic, ordered by level then horizontal hint."""
    if not len(registry):
        console.print("[dim]No topics defined[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Level", justify="right")
    table.add_column("Hint", justify="right")
    table.add_column("Id", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Category")

    for level, topics in registry.levels().items():
        for topic in topics:
            style = _get_category_style(topic.category)
            table.add_row(
                str(level),
                str(topic.horizontal_hint),
                topic.id,
                escape(topic.name),
                f"[{style}]{escape(topic.group)}[/{style}]",
            )

    console.print(table)
    console.print(f"\n[dim]Total: {len(registry)} topics[/dim]")


def render_topic_detail(topic: Topic, registry: TopicRegistry, console: Console) -> None:
    """Render a topic with its prerequisites, dependents and prerequisite tree."""
    graph = registry.dependency_graph()

    console.print(f"[bold]Topic:[/bold] {escape(topic.name)} [dim]({topic.id})[/dim]")
    console.print()
    style = _get_category_style(topic.category)
    console.print(f"[cyan]Category:[/cyan]     [{style}]{escape(topic.group)}[/{style}]")
    console.print(f"[cyan]Level:[/cyan]        {topic.level}")
    console.print(f"[cyan]Hint:[/cyan]         {topic.horizontal_hint}")
    if not topic.has_description:
        console.print("[cyan]Description:[/cyan]  [dim]not written yet[/dim]")
    console.print()

    for title, ids in (("Prerequisites", graph.prerequisites(topic.id)), ("Dependents", graph.dependents(topic.id))):
        if ids:
            console.print(f"[cyan]{title} ({len(ids)} direct):[/cyan]")
            for topic_id in ids:
                console.print(f"  {topic_id}")
        else:
            console.print(f"[cyan]{title}:[/cyan] [dim]None[/dim]")
        console.print()

    if topic.sources:
        console.print("[cyan]Sources:[/cyan]")
        for source in topic.sources:
            console.print(f"  {escape(source.title)} [dim]{escape(source.href)}[/dim]")
        console.print()

    rich_tree = Tree(f"[bold]{topic.id}[/bold] [dim](level {topic.level})[/dim]")
    _add_prerequisites(rich_tree, topic, registry)
    console.print(rich_tree)


def render_mismatches(mismatches: list[LevelMismatch], console: Console) -> None:
    """Render level mismatches reported by reorder groups."""
    table = Table(show_header=True, header_style="bold yellow", box=None)
    table.add_column("Anchor", style="dim")
    table.add_column("Follower", style="dim")
    for mismatch in mismatches:
        table.add_row(
            f"{mismatch.anchor_id} (level {mismatch.anchor_level})",
            f"{mismatch.follower_id} (level {mismatch.follower_level})",
        )
    console.print(table)


def _add_prerequisites(parent: Tree, topic: Topic, registry: TopicRegistry) -> None:
    """Recursively add the prerequisites of a topic to a Rich Tree."""
    for required_id in topic.requires:
        required = registry.get(required_id)
        child = parent.add(f"{required.id} [dim](level {required.level})[/dim]")
        _add_prerequisites(child, required, registry)


def _get_category_style(category: Category | str) -> str:
    """Get Rich style string for a category."""
    match category:
        case Category.LANGUAGE:
            return "blue"
        case Category.FP:
            return "green"
        case Category.AKKA:
            return "magenta"
        case Category.PATTERNS:
            return "yellow"
        case _:
            return "white"
