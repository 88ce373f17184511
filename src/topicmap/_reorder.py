"""Horizontal ordering of topics that share a level.

Levels only fix the vertical position of a topic. Unrelated topics on the
same level have no defined left-to-right order in a hierarchical layout and
tend to overlap, so groups of siblings are ordered explicitly here. This is
a layout pass and does not change the graph itself.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ._errors import LevelMismatch, LevelMismatchError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ._registry import TopicRegistry

logger = logging.getLogger(__name__)


def reorder(
    registry: TopicRegistry,
    anchor_id: str,
    follower_ids: Sequence[str],
    *,
    strict: bool = False,
) -> list[LevelMismatch]:
    """Place followers to the right of an anchor topic, in the given order.

    The follower at position ``i`` gets ``anchor.horizontal_hint + i + 1``.
    Followers on a different level than the anchor are left untouched and
    reported; the remaining followers keep their positions.

    Args:
        registry: Registry holding the topics.
        anchor_id: Id of the leftmost topic of the group.
        follower_ids: Ids of the topics to place after the anchor.
        strict: Raise instead of only reporting level mismatches.

    Returns:
        Level mismatches found, empty when every follower was placed.

    Raises:
        TopicNotFoundError: If any id is not registered. Nothing is changed.
        RegistryFrozenError: If the registry is frozen.
        LevelMismatchError: If ``strict`` and any mismatch was found.

    """
    registry.ensure_mutable()
    anchor = registry.get(anchor_id)
    followers = [registry.get(follower_id) for follower_id in follower_ids]
    # Offsets are taken from the hint the anchor had when the call started.
    base_hint = anchor.horizontal_hint

    mismatches: list[LevelMismatch] = []
    for index, follower in enumerate(followers):
        if follower.level == anchor.level:
            registry.set_horizontal_hint(follower.id, base_hint + index + 1)
            continue
        mismatch = LevelMismatch(
            anchor_id=anchor.id,
            anchor_level=anchor.level,
            follower_id=follower.id,
            follower_level=follower.level,
        )
        logger.warning(str(mismatch))
        mismatches.append(mismatch)

    if strict and mismatches:
        raise LevelMismatchError(mismatches)
    return mismatches
