"""Interactive prompt for choosing an algorithm and its parameters.

Questions are asked in a fixed order: width, height, algorithm, then the
line endpoints or the circle center and radius. Any answer can be supplied
up front, in which case its question is skipped. Answers supplied up front
fail immediately with InputParseError or DomainError. Asked questions are
repeated after a bad answer when an error callback is given.
"""

import math
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from rasterlab.config import WindowConfig
from rasterlab.domain import Algorithm
from rasterlab.exceptions import DomainError, InputParseError, RasterLabError

_SEPARATORS = re.compile(r"[\s,]+")

T = TypeVar("T")

LINE_FIELDS = ("x1", "y1", "x2", "y2")
CIRCLE_FIELDS = ("cx", "cy", "r")

# Parameter names the kernels and the extent check report in DomainError.
KERNEL_PARAMETERS = frozenset(
    {*LINE_FIELDS, *CIRCLE_FIELDS, "radius", "center x", "center y", "line span"}
)

_QUESTIONS = {
    "x1": "X coordinate of the start point",
    "y1": "Y coordinate of the start point",
    "x2": "X coordinate of the end point",
    "y2": "Y coordinate of the end point",
    "cx": "X coordinate of the circle center",
    "cy": "Y coordinate of the circle center",
    "r": "Radius of the circle",
}


def parse_dimension(raw: str, field: str, default: int) -> int:
    """Parse a width or height answer; an empty answer means the default.

    Raises:
        InputParseError: If the answer is not an integer
        DomainError: If the integer is not positive
    """
    text = raw.strip()
    if not text:
        return default
    try:
        value = int(text)
    except ValueError:
        raise InputParseError(field, raw, "expected an integer") from None
    if value <= 0:
        raise DomainError(field, value, "must be positive")
    return value


def parse_number(raw: str, field: str) -> float:
    """Parse a single finite number.

    Raises:
        InputParseError: If the answer is not a finite number
    """
    try:
        value = float(raw.strip())
    except ValueError:
        raise InputParseError(field, raw, "expected a number") from None
    if not math.isfinite(value):
        raise InputParseError(field, raw, "expected a finite number")
    return value


def parse_numbers(raw: str, fields: tuple[str, ...]) -> tuple[float, ...]:
    """Parse whitespace- or comma-separated numbers, one per field.

    Examples:
        >>> parse_numbers("0, 0 5 2", ("x1", "y1", "x2", "y2"))
        (0.0, 0.0, 5.0, 2.0)

    Raises:
        InputParseError: On a wrong count or a non-numeric token
    """
    tokens = [t for t in _SEPARATORS.split(raw.strip()) if t]
    if len(tokens) != len(fields):
        raise InputParseError(
            " ".join(fields), raw, f"expected {len(fields)} numbers, got {len(tokens)}"
        )
    return tuple(parse_number(token, field) for token, field in zip(tokens, fields))


def fields_for(algorithm: Algorithm) -> tuple[str, ...]:
    """Names of the parameters an algorithm takes, in prompt order."""
    return LINE_FIELDS if algorithm.is_line else CIRCLE_FIELDS


@dataclass(frozen=True)
class PromptAnswers:
    """Everything the prompt collected."""

    width: int
    height: int
    algorithm: Algorithm
    params: tuple[float, ...]


class InteractivePrompt:
    """Asks the questions that are not already answered.

    Args:
        ask: Called with a question, returns the raw answer
        announce: Called with informational lines (e.g. the chosen algorithm)
        on_error: Called with the error after a bad answer to an asked
            question, which is then asked again. Without it the error
            propagates.
    """

    def __init__(
        self,
        ask: Callable[[str], str],
        announce: Callable[[str], None] | None = None,
        on_error: Callable[[RasterLabError], None] | None = None,
    ) -> None:
        self._ask = ask
        self._announce = announce
        self._on_error = on_error

    def _ask_until(self, question: str, parse: Callable[[str], T]) -> T:
        while True:
            raw = self._ask(question)
            try:
                return parse(raw)
            except (InputParseError, DomainError) as e:
                if self._on_error is None:
                    raise
                self._on_error(e)

    def ask_params(self, algorithm: Algorithm) -> tuple[float, ...]:
        """Ask for each parameter of the algorithm, one question per value."""
        return tuple(
            self._ask_until(
                f"{_QUESTIONS[field]}: ",
                lambda raw, field=field: parse_number(raw, field),
            )
            for field in fields_for(algorithm)
        )

    def collect(
        self,
        width: int | None = None,
        height: int | None = None,
        algorithm: str | None = None,
        params: str | None = None,
    ) -> PromptAnswers:
        """Collect width, height, algorithm and parameters in order.

        Raises:
            InputParseError: On an unparseable answer that is not retried
            DomainError: On a non-positive width or height that is not retried
        """
        defaults = WindowConfig()

        if width is None:
            width = self._ask_until(
                f"Width of the coordinate space [{defaults.width}]: ",
                lambda raw: parse_dimension(raw, "width", defaults.width),
            )
        if height is None:
            height = self._ask_until(
                f"Height of the coordinate space [{defaults.height}]: ",
                lambda raw: parse_dimension(raw, "height", defaults.height),
            )

        if algorithm is None:
            menu = ", ".join(f"{a.value} = {a.label}" for a in Algorithm)
            chosen = self._ask_until(f"Algorithm ({menu}): ", Algorithm.parse)
        else:
            chosen = Algorithm.parse(algorithm)
        if self._announce is not None:
            self._announce(f"Chosen algorithm: {chosen.value} ({chosen.label})")

        if params is not None:
            values = parse_numbers(params, fields_for(chosen))
        else:
            values = self.ask_params(chosen)

        return PromptAnswers(width=width, height=height, algorithm=chosen, params=values)
