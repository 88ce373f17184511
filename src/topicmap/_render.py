"""Renderer-facing snapshot of a topic graph.

The shape follows what hierarchical graph renderers such as vis-network
expect: nodes with ``id``, ``label``, ``group``, ``level`` and a horizontal
sort hint, and edges with ``from`` and ``to``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from ._models import DESCRIPTION_PLACEHOLDER, Source

if TYPE_CHECKING:
    from ._models import Topic
    from ._registry import TopicRegistry


class RenderNode(BaseModel):
    """A topic as handed to the renderer."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    group: str
    level: int
    hsort: int
    description: str
    sources: list[Source] = Field(default_factory=list)
    requires: list[str] = Field(default_factory=list)


class RenderEdge(BaseModel):
    """A directed edge from a prerequisite to the topic requiring it."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source: str = Field(alias="from")
    target: str = Field(alias="to")


class RenderGraph(BaseModel):
    """Nodes and edges of a whole topic graph."""

    nodes: list[RenderNode] = Field(default_factory=list)
    edges: list[RenderEdge] = Field(default_factory=list)

    def to_data(self) -> dict[str, list[dict[str, object]]]:
        """Plain data with renderer field names (``from``/``to`` on edges)."""
        return self.model_dump(mode="json", by_alias=True)


def _to_node(topic: Topic) -> RenderNode:
    return RenderNode(
        id=topic.id,
        label=topic.label,
        group=topic.group,
        level=topic.level,
        hsort=topic.horizontal_hint,
        description=topic.description or DESCRIPTION_PLACEHOLDER,
        sources=list(topic.sources),
        requires=list(topic.requires),
    )


def to_render_graph(registry: TopicRegistry) -> RenderGraph:
    """Snapshot a registry for the renderer.

    Nodes keep registration order. Topics without a description get the
    placeholder text.

    """
    topics = registry.all()
    return RenderGraph(
        nodes=[_to_node(topic) for topic in topics],
        edges=[RenderEdge(source=required, target=topic.id) for topic in topics for required in topic.requires],
    )
