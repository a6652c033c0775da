"""Algorithm selection and kernel parameters."""

import math
from dataclasses import dataclass
from enum import Enum

from rasterlab.exceptions import DomainError, InputParseError


class Algorithm(str, Enum):
    """Rasterization kernel, keyed by its prompt token."""

    BASIC_INCREMENTAL_LINE = "BIA"
    DDA_LINE = "DDA"
    BRESENHAM_LINE = "BA"
    MIDPOINT_CIRCLE = "MPC"
    BRESENHAM_CIRCLE = "BCA"

    @property
    def label(self) -> str:
        """Human-readable algorithm name."""
        return _LABELS[self]

    @property
    def is_line(self) -> bool:
        """Whether the kernel takes line endpoints."""
        return self in (
            Algorithm.BASIC_INCREMENTAL_LINE,
            Algorithm.DDA_LINE,
            Algorithm.BRESENHAM_LINE,
        )

    @property
    def is_circle(self) -> bool:
        """Whether the kernel takes a center and radius."""
        return not self.is_line

    @classmethod
    def parse(cls, token: str) -> "Algorithm":
        """Parse a prompt token, ignoring case and surrounding whitespace.

        Raises:
            InputParseError: If the token names no known algorithm
        """
        code = token.strip().upper()
        try:
            return cls(code)
        except ValueError:
            valid = ", ".join(a.value for a in cls)
            raise InputParseError("algorithm", token, f"expected one of {valid}") from None


_LABELS = {
    Algorithm.BASIC_INCREMENTAL_LINE: "Basic incremental algorithm",
    Algorithm.DDA_LINE: "Digital Differential Analyzer",
    Algorithm.BRESENHAM_LINE: "Bresenham algorithm",
    Algorithm.MIDPOINT_CIRCLE: "Mid point circle algorithm",
    Algorithm.BRESENHAM_CIRCLE: "Bresenham circle algorithm",
}


@dataclass(frozen=True, slots=True)
class LineInput:
    """Endpoints of a line: (x1, y1) to (x2, y2)."""

    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def dx(self) -> float:
        return self.x2 - self.x1

    @property
    def dy(self) -> float:
        return self.y2 - self.y1

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.x1, self.y1, self.x2, self.y2)


@dataclass(frozen=True, slots=True)
class CircleInput:
    """Center and radius of a circle.

    The radius must be a non-negative integer; the center must lie on the
    integer lattice.

    Raises:
        DomainError: On a negative or fractional radius, or a fractional center
    """

    cx: float
    cy: float
    r: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.r) or self.r < 0:
            raise DomainError("radius", self.r, "must be a non-negative number")
        if self.r != math.floor(self.r):
            raise DomainError("radius", self.r, "must be an integer")
        for name, value in (("center x", self.cx), ("center y", self.cy)):
            if not math.isfinite(value) or value != math.floor(value):
                raise DomainError(name, value, "must be an integer")

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.cx, self.cy, self.r)


KernelInput = LineInput | CircleInput
