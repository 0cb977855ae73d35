"""Errors raised by portal services."""


class ApiError(Exception):
    """The API answered with ``success: false``."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotAuthenticatedError(Exception):
    """An operation needs a signed-in session."""


class InvalidGenerationRequest(ValueError):
    """A generation request is missing text or a voice."""


class GenerationInProgressError(RuntimeError):
    """A generation run is already active for this workflow."""
