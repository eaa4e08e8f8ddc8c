"""The ``Annotations`` container of an FMI 3.0 model description."""

from __future__ import annotations

import logging
from typing import Any

from attrs import define, field
from bs4 import Tag

from .annotation import TAG as ANNOTATION_TAG
from .annotation import Annotation
from .errors import DecodeError, UnexpectedRootError
from .types import AnnotationList
from .xml_utils import child_elements, parse_fragment

logger = logging.getLogger(__name__)

TAG = "Annotations"


@define(slots=True)
class Fmi3Annotations:
    """Ordered collection of vendor annotations.

    Attributes:
        annotations: Entries in document order. Duplicate types are kept.
    """

    annotations: AnnotationList = field(factory=list)

    @classmethod
    def decode(cls, xml_fragment: str | bytes) -> Fmi3Annotations:
        """Parse an ``<Annotations>`` XML fragment.

        Args:
            xml_fragment: XML text whose root element is ``Annotations``.

        Returns:
            The decoded container.
        """

        return cls.from_element(parse_fragment(xml_fragment))

    @classmethod
    def from_element(cls, element: Tag) -> Fmi3Annotations:
        """Build the container from an already parsed ``<Annotations>`` node.

        Args:
            element: Element located by the surrounding document parser.

        Returns:
            The decoded container.

        Throws:
            DecodeError: If the root or any entry is invalid. Failures of an
                entry carry the entry position in ``index``.
        """

        if element.name != TAG:
            raise UnexpectedRootError(
                f"Expected root <{TAG}>, found <{element.name}>"
            )

        annotations: AnnotationList = []
        index = 0
        for child in child_elements(element):
            # Only Annotation children belong to this block.
            if child.name != ANNOTATION_TAG:
                logger.debug("Ignoring unexpected <%s> child", child.name)
                continue

            try:
                annotations.append(Annotation.decode(child))
            except DecodeError as exc:
                exc.index = index
                raise
            index += 1

        logger.debug("Decoded %d annotation(s)", len(annotations))
        return cls(annotations=annotations)

    def encode(self) -> str:
        """Return the container as an ``<Annotations>`` XML fragment."""

        body = "".join(entry.encode() for entry in self.annotations)
        return f"<{TAG}>{body}</{TAG}>"

    @classmethod
    def from_dict(cls, data: Any) -> Fmi3Annotations:  # noqa: ANN401
        """Build the container from its plain-data form.

        Args:
            data: Mapping with an optional ``annotations`` list.

        Returns:
            The container described by ``data``.
        """

        if data is None:
            return cls()
        if not isinstance(data, dict):
            kind = type(data).__name__
            raise DecodeError(f"Annotations must be a mapping, not {kind}")

        entries = data.get("annotations")
        if entries is None:
            entries = []
        if not isinstance(entries, list):
            raise DecodeError("'annotations' must be a list")

        annotations: AnnotationList = []
        for index, entry in enumerate(entries):
            try:
                annotations.append(Annotation.from_dict(entry))
            except DecodeError as exc:
                exc.index = index
                raise

        return cls(annotations=annotations)

    def to_dict(self) -> dict[str, Any]:
        """Return the plain-data form of the container."""

        return {"annotations": [entry.to_dict() for entry in self.annotations]}
