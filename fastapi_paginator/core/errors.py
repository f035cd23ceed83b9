"""Paginator exceptions and JSON error documents."""

from typing import Any


class PaginatorError(Exception):
    """Base class for paginator errors."""


class InvalidConfiguration(PaginatorError, ValueError):
    """Raised when a paginator setting is rejected.

    ``parameter`` names the rejected setting, e.g. ``"max_pages_to_show"``.
    """

    def __init__(self, message: str, *, parameter: str | None = None) -> None:
        super().__init__(message)
        self.parameter = parameter


class ErrorDocumentBuilder:
    """Build JSON error objects and error documents for paginator failures."""

    def error_object(
        self,
        *,
        status: int,
        title: str,
        detail: str | None = None,
        parameter: str | None = None,
    ) -> dict[str, Any]:
        """Return an error object; ``parameter`` becomes ``source.parameter``."""
        error: dict[str, Any] = {"status": str(status), "title": title}
        if detail:
            error["detail"] = detail
        if parameter is not None:
            error["source"] = {"parameter": parameter}
        return error

    def error_from_exception(self, exc: Exception) -> dict[str, Any]:
        """Map an exception to an error object.

        ``InvalidConfiguration`` is a client error (400) pointing at the
        rejected setting; anything else is a 500.
        """
        if isinstance(exc, InvalidConfiguration):
            return self.error_object(
                status=400,
                title="Invalid Pagination Configuration",
                detail=str(exc),
                parameter=exc.parameter,
            )
        return self.error_object(
            status=500, title="Internal Server Error", detail=str(exc)
        )

    def error_document(self, errors: list[dict[str, Any]]) -> dict[str, Any]:
        """Return a document with an errors array."""
        return {"errors": errors}
