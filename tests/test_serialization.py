"""Tests for JSON and YAML forms of annotation containers."""

import json
from pathlib import Path

import pytest
import yaml  # type: ignore[import-untyped]
from pytest import MonkeyPatch

from fmi_annotations import serialization
from fmi_annotations.schema import (
    Annotation,
    Fmi3Annotations,
    MissingRequiredAttributeError,
)

SAMPLE = Fmi3Annotations(
    annotations=[Annotation(type="org.one"), Annotation(type="org.two")]
)


def test_to_json_without_orjson(monkeypatch: MonkeyPatch) -> None:
    """Serialize using standard json when orjson is absent."""

    monkeypatch.setattr(serialization, "orjson", None)
    data = {"a": "ä"}
    assert serialization.to_json(data) == json.dumps(
        data, ensure_ascii=False
    )


def test_to_json_with_orjson(monkeypatch: MonkeyPatch) -> None:
    """Serialize using orjson when available."""

    class Fake:
        def dumps(
            self, obj: object
        ) -> bytes:  # pragma: no cover - simple stub
            return b"{}"

    monkeypatch.setattr(serialization, "orjson", Fake())
    assert serialization.to_json({"x": 1}) == "{}"


def test_from_json_without_orjson(monkeypatch: MonkeyPatch) -> None:
    """Deserialize JSON from str and bytes when orjson is absent."""

    monkeypatch.setattr(serialization, "orjson", None)
    text = json.dumps({"a": 1})
    assert serialization.from_json(text) == {"a": 1}
    assert serialization.from_json(text.encode()) == {"a": 1}


def test_from_json_with_orjson(monkeypatch: MonkeyPatch) -> None:
    """Deserialize JSON using orjson when available."""

    class Fake:
        def loads(self, data: bytes) -> dict:  # pragma: no cover - simple stub
            return {"b": 2}

    monkeypatch.setattr(serialization, "orjson", Fake())
    assert serialization.from_json(b"{}") == {"b": 2}


def test_dump_json() -> None:
    """JSON output lists the entries under ``annotations``."""

    text = serialization.dump_annotations(SAMPLE, "json")
    assert json.loads(text) == {
        "annotations": [{"type": "org.one"}, {"type": "org.two"}]
    }


def test_dump_yaml_keeps_order() -> None:
    """YAML output keeps entry order."""

    text = serialization.dump_annotations(SAMPLE, "yaml")
    assert yaml.safe_load(text) == SAMPLE.to_dict()
    assert text.index("org.one") < text.index("org.two")


def test_load_both_formats() -> None:
    """Both formats load back into an equal container."""

    json_text = serialization.dump_annotations(SAMPLE, "json")
    yaml_text = serialization.dump_annotations(SAMPLE, "yaml")

    assert serialization.load_annotations(json_text, "json") == SAMPLE
    assert serialization.load_annotations(yaml_text, "yaml") == SAMPLE
    # YAML accepts JSON documents as well.
    assert serialization.load_annotations(json_text, "yaml") == SAMPLE


def test_load_missing_type() -> None:
    """Entries without a type are rejected."""

    with pytest.raises(MissingRequiredAttributeError):
        serialization.load_annotations("annotations:\n  - {}\n", "yaml")


def test_unsupported_format() -> None:
    """Formats other than JSON and YAML raise ``ValueError``."""

    with pytest.raises(ValueError):
        serialization.dump_annotations(SAMPLE, "xml")
    with pytest.raises(ValueError):
        serialization.load_annotations("", "xml")


def test_format_for_path() -> None:
    """Only a ``.json`` suffix selects JSON."""

    assert serialization.format_for_path(Path("a.json")) == "json"
    assert serialization.format_for_path(Path("a.JSON")) == "json"
    assert serialization.format_for_path(Path("a.yaml")) == "yaml"
    assert serialization.format_for_path(Path("a.yml")) == "yaml"
