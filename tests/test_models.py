import pytest
from pydantic import ValidationError

from topicmap import DESCRIPTION_PLACEHOLDER, Category, Source, Topic, coerce_category


def test_category_values() -> None:
    assert Category.LANGUAGE.value == "language"
    assert Category.FP.value == "functional programming"
    assert Category.AKKA.value == "akka"
    assert Category.PATTERNS.value == "design patterns"


def test_category_docstring() -> None:
    assert Category.AKKA.__doc__ == "Actor framework concepts."


def test_category_is_str() -> None:
    assert isinstance(Category.FP, str)
    assert f"{Category.FP}" == "functional programming"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("akka", Category.AKKA),
        (Category.FP, Category.FP),
        (None, Category.LANGUAGE),
        ("", Category.LANGUAGE),
    ],
)
def test_coerce_known_categories(value: str | None, expected: Category) -> None:
    assert coerce_category(value) is expected


def test_coerce_unknown_category_keeps_string() -> None:
    result = coerce_category("collections")
    assert result == "collections"
    assert not isinstance(result, Category)


def test_source_is_immutable_value() -> None:
    a = Source(title="Tour of Scala", href="https://docs.scala-lang.org/tour/")
    b = Source(title="Tour of Scala", href="https://docs.scala-lang.org/tour/")
    assert a == b
    assert hash(a) == hash(b)
    with pytest.raises(ValidationError):
        a.title = "changed"  # type: ignore[misc]


def make_topic(description: str) -> Topic:
    return Topic(
        id="monad",
        name="Monad",
        description=description,
        sources=(),
        category=Category.FP,
        requires=("applicative-functor",),
        level=5,
    )


@pytest.mark.parametrize(("description", "expected"), [("", False), (DESCRIPTION_PLACEHOLDER, False), ("  TODO ", False), ("Written.", True)])
def test_has_description(description: str, expected: bool) -> None:  # noqa: FBT001
    assert make_topic(description).has_description is expected


def test_renderer_fields() -> None:
    topic = make_topic("")
    assert topic.label == "Monad"
    assert topic.group == "functional programming"
    assert not topic.is_root
    assert topic.horizontal_hint == 0
