"""Registry of topics keyed by id."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from ._errors import DuplicateTopicError, RegistryFrozenError, TopicNotFoundError
from ._graph import DependencyGraph

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ._models import Topic

logger = logging.getLogger(__name__)


class TopicRegistry:
    """Single source of truth for the topics of one graph.

    The registry is filled by sequential ``put`` calls, then frozen and
    handed to the renderer. Registration order is kept, and because every
    topic may only require already registered ones, it is a valid
    topological order of the graph.

    Args:
        allow_overwrite: Replace a topic when another one with the same id is
            put, instead of raising DuplicateTopicError.

    """

    def __init__(self, *, allow_overwrite: bool = False) -> None:
        self._topics: dict[str, Topic] = {}
        self._frozen = False
        self.allow_overwrite = allow_overwrite

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Make the registry read-only."""
        self._frozen = True
        logger.debug(f"Registry frozen with {len(self._topics)} topics")

    def ensure_mutable(self) -> None:
        """Raise RegistryFrozenError if the registry has been frozen."""
        if self._frozen:
            msg = "Topic registry is frozen and can no longer be modified"
            raise RegistryFrozenError(msg)

    def get(self, topic_id: str) -> Topic:
        """Get a topic by id.

        Raises:
            TopicNotFoundError: If no topic is registered under ``topic_id``.

        """
        try:
            return self._topics[topic_id]
        except KeyError:
            raise TopicNotFoundError(topic_id) from None

    def put(self, topic: Topic) -> None:
        """Register a topic under its id.

        Raises:
            RegistryFrozenError: If the registry is frozen.
            DuplicateTopicError: If the id is taken and overwriting is not allowed,
                or if registered topics already require the topic being replaced.

        """
        self.ensure_mutable()
        existing = self._topics.get(topic.id)
        if existing is not None:
            if not self.allow_overwrite:
                raise DuplicateTopicError(topic.id, existing.name, topic.name)
            # Dependents were placed against the old topic.
            dependents = tuple(t.id for t in self._topics.values() if topic.id in t.requires)
            if dependents:
                raise DuplicateTopicError(topic.id, existing.name, topic.name, required_by=dependents)
            logger.warning(f"Topic '{existing.name}' is replaced by '{topic.name}' (id '{topic.id}')")
        self._topics[topic.id] = topic

    def set_horizontal_hint(self, topic_id: str, hint: int) -> Topic:
        """Store a copy of a topic with a new horizontal hint.

        Raises:
            RegistryFrozenError: If the registry is frozen.
            TopicNotFoundError: If no topic is registered under ``topic_id``.

        """
        self.ensure_mutable()
        topic = replace(self.get(topic_id), horizontal_hint=hint)
        self._topics[topic_id] = topic
        return topic

    def all(self) -> list[Topic]:
        """Snapshot of all topics in registration order."""
        return list(self._topics.values())

    def ids(self) -> list[str]:
        return list(self._topics)

    def levels(self) -> dict[int, list[Topic]]:
        """Topics grouped by level, each group ordered by horizontal hint."""
        grouped: dict[int, list[Topic]] = {}
        for topic in self._topics.values():
            grouped.setdefault(topic.level, []).append(topic)
        return {
            level: sorted(grouped[level], key=lambda t: t.horizontal_hint)
            for level in sorted(grouped)
        }

    def dependency_graph(self) -> DependencyGraph[str]:
        """Build the prerequisite graph of the registered topics."""
        return DependencyGraph.from_requirements((t.id, t.requires) for t in self._topics.values())

    def __len__(self) -> int:
        return len(self._topics)

    def __contains__(self, topic_id: object) -> bool:
        return topic_id in self._topics

    def __iter__(self) -> Iterator[Topic]:
        return iter(self.all())
