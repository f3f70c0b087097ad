"""Exceptions raised by the diagram library."""

from __future__ import annotations


class SvgError(Exception):
    """Base class for diagram errors."""


class InvalidTransformMatrix(SvgError):  # noqa: N818
    """A matrix could not be decomposed into a Transform.

    Attributes:
        reason: Why the matrix was rejected.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(f'invalid transform matrix: {reason}')
        self.reason = reason
