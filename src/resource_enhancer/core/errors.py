"""Failure taxonomy of the enhancement pipeline.

None of these escape ``ResourceEnhancementService.process_resources``; each
is turned into fallback records whose guidance carries ``str(error)``.
"""


class EnhancementError(Exception):
    """Base class for recoverable pipeline failures."""


class BackendUnavailableError(EnhancementError):
    """The request to the backend never completed."""


class BackendStatusError(EnhancementError):
    """The backend answered with a non-2xx status."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"Backend error: {status_code}")


class PayloadParseError(EnhancementError):
    """The response body is not valid JSON."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("JSON parse error")


class PayloadShapeError(EnhancementError):
    """The response parsed but does not match the envelope contract."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Unexpected response structure: {detail}")


class RecordMappingError(EnhancementError):
    """A single backend record could not be mapped."""
