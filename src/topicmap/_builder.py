"""Build a registry from a declarative topic document."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ._errors import CycleError, DuplicateTopicError, InvalidTopicNameError, LevelMismatch, TopicNotFoundError
from ._factory import create_topic
from ._graph import CycleDetectedError, topological_sort
from ._registry import TopicRegistry
from ._reorder import reorder
from ._slug import normalize

if TYPE_CHECKING:
    from ._document import TopicDefinition, TopicDocument

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BuildResult:
    """Outcome of building a document.

    Attributes:
        registry: The populated registry.
        mismatches: Level mismatches reported by the reorder groups.

    """

    registry: TopicRegistry
    mismatches: list[LevelMismatch] = field(default_factory=list)


def _index_definitions(
    definitions: list[TopicDefinition],
    *,
    allow_overwrite: bool,
) -> dict[str, TopicDefinition]:
    """Map each definition to its id, rejecting unusable or colliding names."""
    by_id: dict[str, TopicDefinition] = {}
    for definition in definitions:
        topic_id = normalize(definition.name)
        if not topic_id:
            raise InvalidTopicNameError(definition.name)
        existing = by_id.get(topic_id)
        if existing is not None:
            if not allow_overwrite:
                raise DuplicateTopicError(topic_id, existing.name, definition.name)
            logger.warning(f"Topic '{existing.name}' is replaced by '{definition.name}' (id '{topic_id}')")
            # The later definition takes the place of the earlier one.
            del by_id[topic_id]
        by_id[topic_id] = definition
    return by_id


def build_registry(
    document: TopicDocument,
    *,
    strict: bool = False,
    allow_overwrite: bool = False,
    freeze: bool = True,
) -> BuildResult:
    """Build a registry from a document whose topics may come in any order.

    The function:
    1. Derives the id of every topic and rejects duplicates
    2. Resolves ``requires`` entries (names or ids) against the document
    3. Sorts topics so that prerequisites are created first
    4. Creates the topics with create_topic
    5. Applies the reorder groups
    6. Freezes the registry

    Args:
        document: The topic document.
        strict: Raise LevelMismatchError on reorder level mismatches.
        allow_overwrite: Let later topics replace earlier ones with the same id.
        freeze: Freeze the registry before returning it.

    Returns:
        The registry and the level mismatches found by the reorder groups.

    Raises:
        InvalidTopicNameError: If a topic name yields an empty id.
        DuplicateTopicError: If two topics share an id.
        TopicNotFoundError: If a topic requires one that is not defined.
        CycleError: If the prerequisites form a cycle.
        LevelMismatchError: If ``strict`` and a reorder group spans levels.

    """
    definitions = _index_definitions(document.topics, allow_overwrite=allow_overwrite)

    requires: dict[str, list[str]] = {}
    for topic_id, definition in definitions.items():
        resolved = [normalize(required) for required in definition.requires]
        for required_id in resolved:
            if required_id not in definitions:
                raise TopicNotFoundError(required_id, required_by=topic_id)
        requires[topic_id] = resolved

    dependents: dict[str, list[str]] = {topic_id: [] for topic_id in definitions}
    for topic_id, resolved in requires.items():
        for required_id in resolved:
            dependents[required_id].append(topic_id)

    try:
        order = topological_sort(dependents)
    except CycleDetectedError as e:
        raise CycleError(e.remaining) from e

    registry = TopicRegistry(allow_overwrite=allow_overwrite)
    for topic_id in order:
        definition = definitions[topic_id]
        create_topic(
            registry,
            definition.name,
            description=definition.description,
            sources=definition.sources,
            category=definition.category,
            requires=requires[topic_id],
        )

    mismatches: list[LevelMismatch] = []
    for group in document.reorder:
        mismatches.extend(
            reorder(
                registry,
                normalize(group.anchor),
                [normalize(follower) for follower in group.followers],
                strict=strict,
            ),
        )

    if freeze:
        registry.freeze()

    n_levels = len({topic.level for topic in registry.all()})
    logger.info(f"Built {len(registry)} topics on {n_levels} levels")
    return BuildResult(registry=registry, mismatches=mismatches)
