"""
Domain exceptions raised by services and translated to HTTP responses by routes.
"""
from typing import List


class InvalidRequestError(ValueError):
    """A request could not be accepted as sent (HTTP 400)."""


class MissingFieldsError(InvalidRequestError):
    """A request lacked one or more required fields."""

    def __init__(self, missing_fields: List[str]):
        self.missing_fields = list(missing_fields)
        super().__init__(f"Missing required fields: {', '.join(self.missing_fields)}")


class RecordNotFoundError(LookupError):
    """The record a request refers to does not exist."""


class AutomationError(RuntimeError):
    """The automation webhook could not be used or returned an unusable reply."""
