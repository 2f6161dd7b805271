from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    INVALID_ENTITY = "INVALID_ENTITY"
    INVALID_OPTIONS = "INVALID_OPTIONS"


class SitemapIndexError(Exception):
    """Raised for caller faults the index cannot recover from on its own.

    Absent data (no URL, no image, no dates) is not a fault and never raises;
    only input that cannot be keyed or validated ends up here.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        suggestion: str,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "suggestion": self.suggestion,
            }
        }
