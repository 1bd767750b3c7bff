from __future__ import annotations


class LyricSnapError(Exception):
    """Base class for errors reported back to the caller as ``{"error": ...}``."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(LyricSnapError):
    """The request is missing a required parameter; nothing was fetched."""

    status_code = 400


class UpstreamFetchError(LyricSnapError):
    """Genius could not be reached or answered with a non-success status."""

    def __init__(self, message: str, upstream_status: int | None = None, status_code: int | None = None) -> None:
        super().__init__(message)
        self.upstream_status = upstream_status
        # Relay the upstream status unless the caller pins one (502 for page fetches).
        self.status_code = status_code or upstream_status or 500


class ExtractionError(LyricSnapError):
    """The page was fetched but no selector produced any lyrics."""

    status_code = 500


class SelectionError(LyricSnapError):
    status_code = 400
