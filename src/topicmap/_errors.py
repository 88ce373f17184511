"""Errors and diagnostics raised while building a topic graph."""

from collections.abc import Iterable
from dataclasses import dataclass


class TopicGraphError(Exception):
    """Base class for all topic graph errors."""


class TopicNotFoundError(TopicGraphError):
    """A referenced topic id is not registered."""

    def __init__(self, topic_id: str, *, required_by: str | None = None) -> None:
        self.topic_id = topic_id
        self.required_by = required_by
        if required_by is None:
            msg = f"Topic '{topic_id}' is not registered"
        else:
            msg = f"Topic '{required_by}' requires '{topic_id}', which is not registered"
        super().__init__(msg)


class DuplicateTopicError(TopicGraphError):
    """Two topics share the same id."""

    def __init__(
        self,
        topic_id: str,
        existing_name: str,
        new_name: str,
        *,
        required_by: Iterable[str] = (),
    ) -> None:
        self.topic_id = topic_id
        self.existing_name = existing_name
        self.new_name = new_name
        self.required_by = tuple(required_by)
        msg = f"Topic id '{topic_id}' of '{new_name}' is already taken by '{existing_name}'"
        if self.required_by:
            msg += f", which is required by {', '.join(self.required_by)}"
        super().__init__(msg)


class InvalidTopicNameError(TopicGraphError):
    """A topic name does not yield a usable id."""

    def __init__(self, name: str) -> None:
        self.name = name
        msg = f"Topic name {name!r} contains no letters to derive an id from"
        super().__init__(msg)


class CycleError(TopicGraphError):
    """Prerequisite relations form a cycle."""

    def __init__(self, members: Iterable[str]) -> None:
        self.members = tuple(members)
        msg = f"Cycle detected in prerequisites; topics that cannot be ordered: {', '.join(self.members)}"
        super().__init__(msg)


class RegistryFrozenError(TopicGraphError):
    """The registry was modified after being frozen."""


@dataclass(frozen=True, slots=True)
class LevelMismatch:
    """Diagnostic for a reorder pair whose topics sit on different levels.

    Attributes:
        anchor_id: Id of the topic the ordering is relative to.
        anchor_level: Level of the anchor topic.
        follower_id: Id of the topic that was not moved.
        follower_level: Level of the follower topic.

    """

    anchor_id: str
    anchor_level: int
    follower_id: str
    follower_level: int

    def __str__(self) -> str:
        return (
            f"Expected the same levels for {self.anchor_id}:{self.anchor_level} "
            f"and {self.follower_id}:{self.follower_level}"
        )


class LevelMismatchError(TopicGraphError):
    """Strict reordering found topics on different levels."""

    def __init__(self, mismatches: Iterable[LevelMismatch]) -> None:
        self.mismatches = tuple(mismatches)
        msg = "; ".join(str(m) for m in self.mismatches)
        super().__init__(msg)


class DocumentError(TopicGraphError):
    """A topic document could not be read or is invalid."""
