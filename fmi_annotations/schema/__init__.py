"""Annotation model for FMI 3.0 model descriptions."""

from .annotation import Annotation
from .annotations import Fmi3Annotations
from .errors import (
    DecodeError,
    MalformedXmlError,
    MissingRequiredAttributeError,
    UnexpectedRootError,
    UnexpectedTagError,
)

__all__ = [
    "Annotation",
    "DecodeError",
    "Fmi3Annotations",
    "MalformedXmlError",
    "MissingRequiredAttributeError",
    "UnexpectedRootError",
    "UnexpectedTagError",
]
