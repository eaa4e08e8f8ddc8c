"""Common type aliases for annotation structures."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .annotation import Annotation  # noqa: F401


AnnotationList = list["Annotation"]
