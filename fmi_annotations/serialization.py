"""Plain-data (JSON and YAML) forms of annotation containers."""

from __future__ import annotations

try:
    import orjson  # type: ignore[import-not-found]
except ImportError:  # pragma: no cover - optional dependency
    orjson = None  # type: ignore[assignment]

import json
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from fmi_annotations.schema import Fmi3Annotations

FORMATS = ("json", "yaml")
EXTENSIONS = {"json": ".json", "yaml": ".yaml"}


def to_json(data: object) -> str:
    """Render plain data as compact JSON text, keeping non-ASCII as is."""

    if orjson is None:
        return json.dumps(data, ensure_ascii=False)
    return orjson.dumps(data).decode("utf-8")


def from_json(text: str | bytes) -> object:
    """Read JSON text or UTF-8 bytes back into plain data."""

    if orjson is None:
        if isinstance(text, (bytes, bytearray)):
            text = text.decode("utf-8")
        return json.loads(text)
    return orjson.loads(text)


def dump_annotations(container: Fmi3Annotations, fmt: str = "json") -> str:
    """Render ``container`` as JSON or YAML text.

    Args:
        container: Annotations to render.
        fmt: Either ``"json"`` or ``"yaml"``.

    Returns:
        The rendered text.
    """

    data = container.to_dict()
    if fmt == "json":
        return to_json(data)
    if fmt == "yaml":
        return yaml.safe_dump(data, allow_unicode=True, sort_keys=False)
    raise ValueError(f"Unsupported format {fmt!r}")


def load_annotations(text: str, fmt: str = "yaml") -> Fmi3Annotations:
    """Build a container from JSON or YAML text.

    YAML is a superset of JSON, so ``"yaml"`` accepts both.
    """

    data: Any
    if fmt == "json":
        data = from_json(text)
    elif fmt == "yaml":
        data = yaml.safe_load(text)
    else:
        raise ValueError(f"Unsupported format {fmt!r}")

    return Fmi3Annotations.from_dict(data)


def format_for_path(path: Path) -> str:
    """Return the plain-data format implied by the suffix of ``path``."""

    # Anything that is not explicitly JSON is read as YAML.
    return "json" if path.suffix.lower() == ".json" else "yaml"
