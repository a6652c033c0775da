"""Exception hierarchy for RasterLab."""


class RasterLabError(Exception):
    """Base exception for all RasterLab errors."""

    pass


class DomainError(RasterLabError):
    """A parameter lies outside its allowed range."""

    def __init__(self, parameter: str, value: object, reason: str) -> None:
        self.parameter = parameter
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {parameter} ({value!r}): {reason}")


class MathError(RasterLabError):
    """Errors in vector arithmetic."""

    pass


class DivisionByZeroError(MathError):
    """Scalar division by zero."""

    def __init__(self, operand: object) -> None:
        self.operand = operand
        super().__init__(f"Cannot divide {operand!r} by zero")


class ZeroVectorError(MathError):
    """Operation undefined for a zero-length vector."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Cannot {operation} a zero-length vector")


class InputParseError(RasterLabError):
    """Prompt input could not be parsed."""

    def __init__(self, field: str, raw: str, reason: str) -> None:
        self.field = field
        self.raw = raw
        self.reason = reason
        super().__init__(f"Could not read {field} from '{raw}': {reason}")


class GraphicsInitError(RasterLabError):
    """The render host failed to set up or use its buffers."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Graphics initialization failed: {reason}")
