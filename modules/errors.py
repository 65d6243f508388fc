"""
Blog error taxonomy.
"""


class ContentError(Exception):
    """Base class for content pipeline failures."""

    def __init__(self, message: str, path: str = None):
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self):
        if self.path:
            return f"{self.message} ({self.path})"
        return self.message


class NotFound(ContentError):
    """Article body or metadata is missing or unreadable."""

    def __init__(self, message: str = "Article not found", path: str = None):
        super().__init__(message, path)


class ParseError(ContentError):
    """Metadata record does not match the required field set."""


class TemplateError(ContentError):
    """Named template is missing or failed to render."""


class FatalStartupError(ContentError):
    """Template set could not be compiled; the app must not serve."""
