"""Exceptions raised by the estimator core."""

from __future__ import annotations


class EstimatorError(Exception):
    """Base class for all estimator failures."""


class InvalidSpec(EstimatorError):
    """Raised when a dimensional spec cannot produce a building."""

    def __init__(self, problems: list[str]) -> None:
        self.problems = problems
        super().__init__(f"Invalid building spec: {'; '.join(problems)}")


class OpeningOutOfBounds(EstimatorError):
    """Raised in strict mode when an opening does not fit inside its wall."""

    def __init__(self, opening_id: str, wall: str, offset: float, width: float, span: float) -> None:
        self.opening_id = opening_id
        self.wall = wall
        self.offset = offset
        self.width = width
        self.span = span
        super().__init__(
            f"Opening {opening_id!r} on {wall} wall spans {offset:g}..{offset + width:g} "
            f"outside 0..{span:g}"
        )
