"""Error codes and exceptions for AutoSwitcher."""
from enum import Enum, auto


class ErrorCode(Enum):
    """Enumeration of all possible error codes in the application."""

    VALIDATION_FAILED = auto()
    BUILDER_CONSUMED = auto()
    SURFACE_GONE = auto()
    NO_VIEWS = auto()


class SwitcherError(Exception):
    """Base exception for AutoSwitcher errors."""

    def __init__(self, code: ErrorCode, message: str):
        self.code = code
        self.message = message
        super().__init__(f"[{code.name}] {message}")


class ValidationError(SwitcherError):
    """Raised when an argument fails validation (e.g., negative delay)."""

    def __init__(self, message: str):
        super().__init__(ErrorCode.VALIDATION_FAILED, message)


class BuilderConsumedError(SwitcherError):
    """Raised when a StrategyBuilder is reused after build()."""

    def __init__(self, message: str = "builder already produced a controller"):
        super().__init__(ErrorCode.BUILDER_CONSUMED, message)


class SurfaceError(SwitcherError):
    """Raised when a display surface cannot satisfy a request."""

    def __init__(self, code: ErrorCode, message: str):
        super().__init__(code, message)
