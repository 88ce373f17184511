"""Identifier derivation for topic names."""

import re

SEPARATOR = "-"

_NON_LETTER_RUN = re.compile(r"[^a-z]+")


def normalize(name: str) -> str:
    """Derive a topic identifier from a human-readable name.

    The name is lower-cased, every maximal run of characters outside ``[a-z]``
    is replaced by a single separator, and separators left at either end are
    stripped.

    Args:
        name: Display name of the topic.

    Returns:
        The identifier. May be empty when the name has no ASCII letters.

    Example:
        >>> normalize("Simple for \\"loop\\"")
        'simple-for-loop'
        >>> normalize("flatMap")
        'flatmap'

    """
    return _NON_LETTER_RUN.sub(SEPARATOR, name.lower()).strip(SEPARATOR)
