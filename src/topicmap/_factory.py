"""Construction of topics and their levels."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ._errors import CycleError, InvalidTopicNameError, TopicNotFoundError
from ._models import Topic, coerce_category
from ._slug import normalize

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ._models import Category, Source
    from ._registry import TopicRegistry

logger = logging.getLogger(__name__)


def compute_level(registry: TopicRegistry, requires: Iterable[str], *, topic_id: str | None = None) -> int:
    """Compute the level of a topic from its prerequisites.

    A topic without prerequisites sits on level 1; any other topic sits one
    level below its deepest prerequisite.

    Args:
        registry: Registry holding the prerequisites.
        requires: Prerequisite ids.
        topic_id: Id of the topic being placed, used in error messages.

    Returns:
        The level, always >= 1.

    Raises:
        TopicNotFoundError: If a prerequisite is not registered.

    """
    levels = []
    for required_id in requires:
        try:
            levels.append(registry.get(required_id).level)
        except TopicNotFoundError as e:
            raise TopicNotFoundError(required_id, required_by=topic_id) from e
    return max(levels, default=0) + 1


def create_topic(  # noqa: PLR0913
    registry: TopicRegistry,
    name: str,
    description: str = "",
    sources: Iterable[Source] = (),
    category: Category | str | None = None,
    requires: Iterable[str] = (),
) -> str:
    """Create a topic and register it.

    Every id in ``requires`` must already be registered: the order of
    ``create_topic`` calls is what keeps the graph acyclic. The registry is
    left untouched when creation fails.

    Args:
        registry: Registry to add the topic to.
        name: Display name; the id is derived from it.
        description: Free-form text. Defaults to empty.
        sources: References to external material.
        category: Classification tag. Defaults to Category.LANGUAGE.
        requires: Ids of prerequisite topics.

    Returns:
        The id of the new topic.

    Raises:
        InvalidTopicNameError: If ``name`` yields an empty id.
        CycleError: If the topic requires itself.
        TopicNotFoundError: If a prerequisite is not registered.
        DuplicateTopicError: If the id is already taken.
        RegistryFrozenError: If the registry is frozen.

    Example:
        >>> registry = TopicRegistry()
        >>> function = create_topic(registry, "Function")
        >>> create_topic(registry, "Currying", requires=[function])
        'currying'

    """
    registry.ensure_mutable()
    topic_id = normalize(name)
    if not topic_id:
        raise InvalidTopicNameError(name)

    required = tuple(dict.fromkeys(requires))
    if topic_id in required:
        raise CycleError([topic_id])
    level = compute_level(registry, required, topic_id=topic_id)

    topic = Topic(
        id=topic_id,
        name=name,
        description=description or "",
        sources=tuple(sources),
        category=coerce_category(category),
        requires=required,
        level=level,
    )
    registry.put(topic)
    logger.debug(f"Registered topic '{topic_id}' on level {level}")
    return topic_id
