"""Helpers for reading API response bodies."""

from tts_portal.domain.errors import ApiError


def raise_for_failure(payload: dict[str, object], fallback: str) -> None:
    """Raise ApiError with the server message for ``success: false`` bodies."""
    if payload.get("success"):
        return
    error = payload.get("error")
    raise ApiError(str(error) if error else fallback)
