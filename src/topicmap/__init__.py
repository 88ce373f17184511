"""Layered prerequisite graphs of learning topics."""

__all__ = [
    "DESCRIPTION_PLACEHOLDER",
    "BuildResult",
    "Category",
    "CycleError",
    "DependencyGraph",
    "DocumentError",
    "DuplicateTopicError",
    "InvalidTopicNameError",
    "LevelMismatch",
    "LevelMismatchError",
    "RegistryFrozenError",
    "RenderEdge",
    "RenderGraph",
    "RenderNode",
    "ReorderGroup",
    "Source",
    "Topic",
    "TopicDefinition",
    "TopicDocument",
    "TopicGraphError",
    "TopicNotFoundError",
    "TopicRegistry",
    "build_registry",
    "coerce_category",
    "compute_level",
    "create_topic",
    "export_render_graph",
    "load_document",
    "normalize",
    "reorder",
    "to_render_graph",
]

from ._builder import BuildResult, build_registry
from ._document import ReorderGroup, TopicDefinition, TopicDocument
from ._errors import (
    CycleError,
    DocumentError,
    DuplicateTopicError,
    InvalidTopicNameError,
    LevelMismatch,
    LevelMismatchError,
    RegistryFrozenError,
    TopicGraphError,
    TopicNotFoundError,
)
from ._factory import compute_level, create_topic
from ._graph import DependencyGraph
from ._io import export_render_graph, load_document
from ._models import DESCRIPTION_PLACEHOLDER, Category, Source, Topic, coerce_category
from ._registry import TopicRegistry
from ._reorder import reorder
from ._render import RenderEdge, RenderGraph, RenderNode, to_render_graph
from ._slug import normalize
