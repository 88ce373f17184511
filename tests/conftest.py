from pathlib import Path

import pytest

from topicmap import TopicRegistry, create_topic

EXAMPLES_DIR = Path(__file__).parent.parent / "examples"


@pytest.fixture
def registry() -> TopicRegistry:
    return TopicRegistry()


@pytest.fixture
def diamond(registry: TopicRegistry) -> TopicRegistry:
    """A <- B, A <- C, (B, C) <- D."""
    a = create_topic(registry, "A")
    b = create_topic(registry, "B", requires=[a])
    c = create_topic(registry, "C", requires=[a])
    create_topic(registry, "D", requires=[b, c])
    return registry


@pytest.fixture
def scala_document_path() -> Path:
    return EXAMPLES_DIR / "scala.toml"
