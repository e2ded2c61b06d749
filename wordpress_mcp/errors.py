"""Exceptions raised by the WordPress API client."""

from __future__ import annotations


class WordPressAPIError(Exception):
    """A REST call failed, either at the transport level or with a non-2xx status.

    Attributes:
        message: Human-readable error description (the REST `message` when present).
        status_code: HTTP status, or None when no response was received.
        code: WordPress error code (e.g. `rest_post_invalid_id`), if any.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        code: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code

    def __str__(self) -> str:
        details = []
        if self.status_code is not None:
            details.append(f"HTTP {self.status_code}")
        if self.code:
            details.append(self.code)
        if not details:
            return self.message
        return f"{self.message} ({', '.join(details)})"
