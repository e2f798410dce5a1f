from __future__ import annotations

from typing import Any, Mapping, Sequence


class AppError(Exception):
    code = "app_error"
    status_code = 400

    def __init__(self, message: str, *, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class NotFound(AppError):
    code = "not_found"
    status_code = 404


class ValidationError(AppError):
    code = "validation_error"
    status_code = 422


class InfrastructureError(AppError):
    code = "infrastructure_error"
    status_code = 500


class CatalogBuildError(InfrastructureError):
    """Fatal failure of a breed catalog generation run."""

    code = "catalog_build_error"


class SourceFetchError(CatalogBuildError):
    code = "source_fetch_error"

    def __init__(self, url: str, *, status: int | None = None, reason: str | None = None) -> None:
        if status is not None:
            message = f"Fetch failed {status} for {url}"
        else:
            message = f"Fetch failed for {url}: {reason or 'network error'}"
        super().__init__(message, details={"url": url, "status": status})
        self.url = url
        self.status = status


class EmptyDocumentError(CatalogBuildError):
    code = "empty_document"

    def __init__(self, source: str) -> None:
        super().__init__(f"{source} CSV empty/invalid.", details={"source": source})
        self.source = source


class MalformedDocumentError(CatalogBuildError):
    code = "malformed_document"

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"{source} CSV unreadable: {reason}", details={"source": source})
        self.source = source


class HeaderResolutionError(CatalogBuildError):
    code = "header_resolution_error"

    def __init__(self, source: str, column: str, header: Sequence[str]) -> None:
        super().__init__(
            f"{source} CSV: could not find {column} column. Header: {', '.join(header)}",
            details={"source": source, "column": column, "header": list(header)},
        )
        self.source = source
        self.column = column
        self.header = list(header)
