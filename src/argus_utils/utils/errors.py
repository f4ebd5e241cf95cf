"""Errors raised by the text, binary and path helpers."""

# ============================================================================
#                           General helper errors
# ============================================================================


class UtilsError(Exception):
    """Base class for helper errors."""


# ============================================================================
#                           Argument errors
# ============================================================================


class InvalidDelimiterError(UtilsError, ValueError):
    """Raised when a split delimiter is empty."""

    def __init__(self, delimiter: str) -> None:
        super().__init__(f"Delimiter must be a non-empty string, got {delimiter!r}.")
        self.delimiter = delimiter


class FormatTemplateError(UtilsError, ValueError):
    """Raised when a template and its arguments do not match."""

    def __init__(self, template: str, reason: str) -> None:
        super().__init__(f"Cannot render template {template!r}: {reason}")
        self.template = template
        self.reason = reason


# ============================================================================
#                           Path errors
# ============================================================================


class PathTooShortError(UtilsError, ValueError):
    """Raised when a path is shorter than the prefix a conversion strips."""

    def __init__(self, path: str, minimum: int) -> None:
        super().__init__(
            f"Path {path!r} is too short to convert "
            f"(expected at least {minimum} characters)."
        )
        self.path = path
        self.minimum = minimum
