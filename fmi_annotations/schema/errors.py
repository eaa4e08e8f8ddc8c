"""Errors raised while decoding annotation fragments."""

from __future__ import annotations


class DecodeError(Exception):
    """Base class for all annotation decoding failures.

    Attributes:
        message: Human readable description of the failure.
        index: Position of the failing ``Annotation`` inside its container,
            or ``None`` when the failure is not tied to a child entry.
    """

    def __init__(self, message: str, index: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.index = index

    def __str__(self) -> str:
        if self.index is None:
            return self.message
        return f"Annotation #{self.index}: {self.message}"


class UnexpectedRootError(DecodeError):
    """The fragment root is not an ``Annotations`` element."""


class UnexpectedTagError(DecodeError):
    """An element handed to a decoder has the wrong tag name."""


class MissingRequiredAttributeError(DecodeError):
    """A required attribute is absent from an element."""

    def __init__(
        self, attribute: str, tag: str, index: int | None = None
    ) -> None:
        super().__init__(
            f"<{tag}> is missing required attribute {attribute!r}", index
        )
        self.attribute = attribute
        self.tag = tag


class MalformedXmlError(DecodeError):
    """The XML tokenizer could not parse the fragment."""
