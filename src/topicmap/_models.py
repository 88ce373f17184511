"""Topic data model."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Self

from pydantic import BaseModel, ConfigDict

DESCRIPTION_PLACEHOLDER = "TODO"


class _StrEnumWithDoc(StrEnum):
    """String enum whose members carry their own docstring."""

    def __new__(cls, value: str, doc: str = "") -> Self:
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.__doc__ = doc
        return obj


class Category(_StrEnumWithDoc):
    """Classification tag of a topic, used for visual grouping."""

    LANGUAGE = "language", "Features of the language and its standard library."
    FP = "functional programming", "Functional programming concepts."
    AKKA = "akka", "Actor framework concepts."
    PATTERNS = "design patterns", "Design pattern concepts."


def coerce_category(value: Category | str | None) -> Category | str:
    """Map a raw category value to a Category member.

    Values outside the enumeration are kept as plain strings so that
    renderers can treat them as an additional group.

    """
    if value is None or value == "":
        return Category.LANGUAGE
    if isinstance(value, Category):
        return value
    try:
        return Category(value)
    except ValueError:
        return value


class Source(BaseModel):
    """Reference to external material about a topic."""

    model_config = ConfigDict(frozen=True)

    title: str
    href: str


@dataclass(frozen=True, slots=True)
class Topic:
    """A node of the topic graph.

    Topics are immutable. ``horizontal_hint`` is a layout nudge that only the
    reorder pass changes, by storing an updated copy in the registry.

    Attributes:
        id: Identifier derived from ``name``.
        name: Display name.
        description: Free-form text, possibly empty or the placeholder.
        sources: Ordered references to external material.
        category: Classification tag.
        requires: Ids of prerequisite topics.
        level: Layer index, one more than the deepest prerequisite.
        horizontal_hint: Left-to-right ordering hint among same-level topics.

    """

    id: str
    name: str
    description: str
    sources: tuple[Source, ...]
    category: Category | str
    requires: tuple[str, ...]
    level: int
    horizontal_hint: int = 0

    @property
    def is_root(self) -> bool:
        """Whether the topic has no prerequisites."""
        return not self.requires

    @property
    def has_description(self) -> bool:
        """Whether the description has actually been written."""
        text = self.description.strip()
        return bool(text) and text != DESCRIPTION_PLACEHOLDER

    @property
    def label(self) -> str:
        return self.name

    @property
    def group(self) -> str:
        return str(self.category)
