from __future__ import annotations


class ToolInputError(ValueError):
    """Invalid or missing user input; the message is shown to the user as-is."""


class ShareUnavailable(Exception):
    """A shared file or text cannot be served (missing, expired, or exhausted)."""

    def __init__(self, message: str, status_code: int = 404):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
