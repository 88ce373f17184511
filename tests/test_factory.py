"""Tests for topic creation and level computation."""

import pytest

from topicmap import (
    Category,
    CycleError,
    DuplicateTopicError,
    InvalidTopicNameError,
    RegistryFrozenError,
    Source,
    TopicNotFoundError,
    TopicRegistry,
    compute_level,
    create_topic,
)


class TestCreateTopic:
    def test_returns_derived_id(self, registry: TopicRegistry) -> None:
        assert create_topic(registry, "Standard Library") == "standard-library"
        assert "standard-library" in registry

    def test_defaults(self, registry: TopicRegistry) -> None:
        topic = registry.get(create_topic(registry, "Types"))
        assert topic.name == "Types"
        assert topic.description == ""
        assert topic.sources == ()
        assert topic.category is Category.LANGUAGE
        assert topic.requires == ()
        assert topic.level == 1
        assert topic.horizontal_hint == 0
        assert topic.is_root

    def test_keeps_given_fields(self, registry: TopicRegistry) -> None:
        source = Source(title="Generic Classes | Tour of Scala", href="https://docs.scala-lang.org/tour/generic-classes.html")
        topic = registry.get(
            create_topic(
                registry,
                "Parametric Types",
                description="Types parametrized with other types.",
                sources=[source],
                category=Category.FP,
            ),
        )
        assert topic.description == "Types parametrized with other types."
        assert topic.sources == (source,)
        assert topic.category is Category.FP
        assert topic.has_description

    def test_category_value_is_coerced(self, registry: TopicRegistry) -> None:
        topic = registry.get(create_topic(registry, "Actor", category="design patterns"))
        assert topic.category is Category.PATTERNS

    def test_unknown_category_is_kept(self, registry: TopicRegistry) -> None:
        topic = registry.get(create_topic(registry, "Builder", category="collections"))
        assert topic.category == "collections"
        assert topic.group == "collections"

    def test_duplicate_requires_are_collapsed(self, registry: TopicRegistry) -> None:
        a = create_topic(registry, "A")
        topic = registry.get(create_topic(registry, "B", requires=[a, a]))
        assert topic.requires == ("a",)

    def test_empty_id_is_rejected(self, registry: TopicRegistry) -> None:
        with pytest.raises(InvalidTopicNameError):
            create_topic(registry, "123")
        assert len(registry) == 0

    def test_duplicate_name_is_rejected(self, registry: TopicRegistry) -> None:
        create_topic(registry, "Free Monad", description="first")
        with pytest.raises(DuplicateTopicError):
            create_topic(registry, "free monad", description="second")
        assert registry.get("free-monad").description == "first"

    def test_self_requirement_is_rejected(self) -> None:
        registry = TopicRegistry(allow_overwrite=True)
        a = create_topic(registry, "A")

        with pytest.raises(CycleError):
            create_topic(registry, "A", requires=[a])

        assert registry.get("a").requires == ()

    def test_overwrite_cannot_require_own_dependent(self) -> None:
        registry = TopicRegistry(allow_overwrite=True)
        a = create_topic(registry, "A")
        b = create_topic(registry, "B", requires=[a])

        with pytest.raises(DuplicateTopicError) as exc_info:
            create_topic(registry, "A", requires=[b])

        assert exc_info.value.required_by == ("b",)
        assert registry.get("a").level == 1
        assert registry.get("a").requires == ()
        assert registry.get("b").level > registry.get("a").level

    def test_overwrite_of_unrequired_topic(self) -> None:
        registry = TopicRegistry(allow_overwrite=True)
        root = create_topic(registry, "Root")
        create_topic(registry, "Leaf")

        create_topic(registry, "Leaf", requires=[root])

        assert registry.get("leaf").level == 2

    def test_frozen_registry_is_rejected(self, registry: TopicRegistry) -> None:
        registry.freeze()
        with pytest.raises(RegistryFrozenError):
            create_topic(registry, "A")


class TestLevels:
    def test_diamond_scenario(self, diamond: TopicRegistry) -> None:
        assert diamond.get("a").level == 1
        assert diamond.get("b").level == 2
        assert diamond.get("c").level == 2
        assert diamond.get("d").level == 3

    def test_level_uses_deepest_prerequisite(self, registry: TopicRegistry) -> None:
        root = create_topic(registry, "Root")
        chain = root
        for name in ["One", "Two", "Three"]:
            chain = create_topic(registry, name, requires=[chain])
        other = create_topic(registry, "Other")
        topic = registry.get(create_topic(registry, "Top", requires=[other, chain]))
        assert topic.level == 5

    def test_every_edge_goes_down(self, diamond: TopicRegistry) -> None:
        for topic in diamond.all():
            if topic.is_root:
                assert topic.level == 1
                continue
            required_levels = [diamond.get(r).level for r in topic.requires]
            assert topic.level == 1 + max(required_levels)
            assert all(topic.level > level for level in required_levels)

    def test_compute_level_without_requires(self, registry: TopicRegistry) -> None:
        assert compute_level(registry, []) == 1


class TestMissingPrerequisite:
    def test_unregistered_prerequisite_fails_without_mutation(self, diamond: TopicRegistry) -> None:
        before = diamond.ids()
        with pytest.raises(TopicNotFoundError) as exc_info:
            create_topic(diamond, "E", requires=["missing-id"])
        assert exc_info.value.topic_id == "missing-id"
        assert exc_info.value.required_by == "e"
        assert "e" not in diamond
        assert diamond.ids() == before

    def test_forward_reference_fails(self, registry: TopicRegistry) -> None:
        with pytest.raises(TopicNotFoundError, match="'currying' requires 'function'"):
            create_topic(registry, "Currying", requires=["function"])
