"""Declarative description of a topic graph."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ._models import Category, Source, coerce_category


class TopicDefinition(BaseModel):
    """One topic as written in a document.

    ``requires`` may list topic names or ids; both are normalized to ids.
    """

    model_config = ConfigDict(extra="forbid")

    name: Annotated[str, Field(min_length=1)]
    description: str = ""
    sources: list[Source] = Field(default_factory=list)
    category: Category | str = Category.LANGUAGE
    requires: list[str] = Field(default_factory=list)

    @field_validator("category")
    @classmethod
    def _coerce_category(cls, value: Category | str) -> Category | str:
        return coerce_category(value)


class ReorderGroup(BaseModel):
    """Same-level topics to lay out left to right, starting at ``anchor``."""

    model_config = ConfigDict(extra="forbid")

    anchor: str
    followers: Annotated[list[str], Field(min_length=1)]


class TopicDocument(BaseModel):
    """A full topic graph: topic definitions plus horizontal ordering groups.

    Topics may be listed in any order; the builder sorts them by their
    prerequisites.
    """

    model_config = ConfigDict(extra="forbid")

    topics: list[TopicDefinition] = Field(default_factory=list)
    reorder: list[ReorderGroup] = Field(default_factory=list)
