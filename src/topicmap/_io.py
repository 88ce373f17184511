"""Reading topic documents and writing render graphs."""

import json
import logging
import tomllib
from pathlib import Path
from typing import Any

import tomli_w
from pydantic import ValidationError

from ._document import TopicDocument
from ._errors import DocumentError
from ._registry import TopicRegistry
from ._render import to_render_graph

logger = logging.getLogger(__name__)

DOCUMENT_SUFFIXES = (".toml", ".json")


def _read_raw_document(path: Path) -> Any:
    """Parse a document file into plain data, based on its suffix."""
    suffix = path.suffix.lower()
    if suffix not in DOCUMENT_SUFFIXES:
        msg = f"Unsupported document format '{path.suffix}' for {path} (expected one of {', '.join(DOCUMENT_SUFFIXES)})"
        raise DocumentError(msg)

    try:
        if suffix == ".toml":
            with path.open("rb") as f:
                return tomllib.load(f)
        with path.open(encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        msg = f"Cannot read document {path}: {e}"
        raise DocumentError(msg) from e
    except (tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
        msg = f"Invalid {suffix[1:].upper()} in {path}: {e}"
        raise DocumentError(msg) from e


def load_document(path: Path) -> TopicDocument:
    """Load a topic document from a TOML or JSON file.

    A TOML document looks like::

        [[topics]]
        name = "Function"
        category = "functional programming"

        [[topics]]
        name = "Currying"
        requires = ["Function"]

        [[reorder]]
        anchor = "Function"
        followers = ["Types"]

    Args:
        path: Path to the document.

    Returns:
        The validated document.

    Raises:
        DocumentError: If the file cannot be read, parsed or validated.

    """
    data = _read_raw_document(path)
    try:
        document = TopicDocument.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid topic document {path}:\n{e}"
        raise DocumentError(msg) from e

    logger.debug(f"Loaded {len(document.topics)} topics from {path}")
    return document


def export_render_graph(registry: TopicRegistry, output_path: Path, *, indent: int = 2) -> None:
    """Write the render graph of a registry to a JSON or TOML file.

    Args:
        registry: The built registry.
        output_path: Destination; the suffix selects the format.
        indent: JSON indentation spaces (TOML output ignores it).

    Raises:
        DocumentError: If the suffix is neither ``.json`` nor ``.toml``.

    """
    suffix = output_path.suffix.lower()
    if suffix not in DOCUMENT_SUFFIXES:
        msg = f"Unsupported export format '{output_path.suffix}' (expected .json or .toml)"
        raise DocumentError(msg)

    graph = to_render_graph(registry)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    if suffix == ".json":
        output_path.write_text(graph.model_dump_json(by_alias=True, indent=indent) + "\n", encoding="utf-8")
    else:
        with output_path.open("wb") as f:
            tomli_w.dump(graph.to_data(), f)

    logger.debug(f"Exported {len(graph.nodes)} nodes and {len(graph.edges)} edges to {output_path}")
