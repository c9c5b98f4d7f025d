"""Exception hierarchy for freehand."""


class FreehandError(Exception):
    """Base exception for all freehand errors."""

    pass


class InputError(FreehandError):
    """Errors related to caller-supplied points or option values."""

    pass


class InvalidPointError(InputError):
    """A raw point could not be interpreted as x, y and pressure."""

    def __init__(self, point: object, reason: str) -> None:
        self.point = point
        self.reason = reason
        super().__init__(f"Invalid point {point!r}: {reason}")


class UnknownEasingError(InputError):
    """Requested easing function is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown easing '{name}'")


class StrokeFileError(FreehandError):
    """Error loading a strokes file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load strokes '{path}': {reason}")


class OutputError(FreehandError):
    """Errors related to writing outlines."""

    pass


class OutlineSaveError(OutputError):
    """Error saving an outline file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save outline '{path}': {reason}")
