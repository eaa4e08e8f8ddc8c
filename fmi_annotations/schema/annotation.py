"""Single vendor entry of an ``Annotations`` block."""

from __future__ import annotations

import logging
from typing import Any

from attrs import asdict, define
from bs4 import Tag

from .errors import (
    DecodeError,
    MissingRequiredAttributeError,
    UnexpectedTagError,
)
from .xml_utils import child_elements, escape_attribute, parse_fragment

logger = logging.getLogger(__name__)

TAG = "Annotation"


@define(slots=True)
class Annotation:
    """Vendor specific annotation attached to a model description.

    Nested vendor content is accepted on decode but not kept, so an entry
    read with such content is written back without it.

    Attributes:
        type: Identifier of the vendor or extension, usually a reverse
            domain name such as ``"com.mathworks.Simulink"``.
    """

    type: str

    @classmethod
    def decode(cls, element: Tag | str | bytes) -> Annotation:
        """Build an annotation from an ``<Annotation>`` element.

        Args:
            element: Parsed element, or the XML text of a lone element.

        Returns:
            The decoded annotation.
        """

        if not isinstance(element, Tag):
            element = parse_fragment(element)

        if element.name != TAG:
            raise UnexpectedTagError(
                f"Expected <{TAG}>, found <{element.name}>"
            )

        value = element.get("type")
        if value is None:
            raise MissingRequiredAttributeError("type", TAG)

        # Vendor payloads follow their own schemas and are never
        # interpreted here.
        nested = child_elements(element)
        if nested:
            logger.debug(
                "Skipping %d nested element(s) of annotation %r",
                len(nested),
                value,
            )

        return cls(type=str(value))

    def encode(self) -> str:
        """Return the entry as a self-closing ``<Annotation>`` element."""

        return f'<{TAG} type="{escape_attribute(self.type)}"/>'

    @classmethod
    def from_dict(cls, data: Any) -> Annotation:  # noqa: ANN401
        """Build an annotation from its plain-data form.

        Args:
            data: Mapping with a ``type`` key.

        Returns:
            The annotation described by ``data``.
        """

        if not isinstance(data, dict):
            kind = type(data).__name__
            raise DecodeError(f"Annotation data must be a mapping, not {kind}")
        value = data.get("type")
        if value is None:
            raise MissingRequiredAttributeError("type", TAG)
        if not isinstance(value, str):
            kind = type(value).__name__
            raise DecodeError(f"Annotation type must be a string, not {kind}")

        return cls(type=value)

    def to_dict(self) -> dict[str, Any]:
        """Return the plain-data form of the annotation."""

        return asdict(self)
