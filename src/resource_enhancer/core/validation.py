"""Classification of raw backend replies."""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from resource_enhancer.core.entities import BackendReply
from resource_enhancer.core.errors import (
    BackendStatusError,
    EnhancementError,
    PayloadParseError,
    PayloadShapeError,
)

RESOURCE_LIST_FIELD = "enhanced_resources"


class ResponseShape(str, Enum):
    """How a backend reply relates to the envelope contract."""

    WELL_FORMED = "well_formed"
    MISSING_RESOURCE_LIST = "missing_resource_list"
    NOT_AN_ARRAY = "not_an_array"
    PARSE_FAILURE = "parse_failure"
    HTTP_ERROR = "http_error"


@dataclass(frozen=True)
class ValidationResult:
    shape: ResponseShape
    status_code: int
    payload: Optional[dict[str, Any]] = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.shape is ResponseShape.WELL_FORMED

    @property
    def resources(self) -> list[Any]:
        if not self.ok or self.payload is None:
            return []
        return self.payload[RESOURCE_LIST_FIELD]

    def to_error(self) -> Optional[EnhancementError]:
        """The batch-level failure this result represents, if any."""
        if self.shape is ResponseShape.HTTP_ERROR:
            return BackendStatusError(self.status_code)
        if self.shape is ResponseShape.PARSE_FAILURE:
            return PayloadParseError(self.detail)
        if self.shape in (ResponseShape.MISSING_RESOURCE_LIST, ResponseShape.NOT_AN_ARRAY):
            return PayloadShapeError(self.detail)
        return None

    @property
    def cause(self) -> Optional[str]:
        error = self.to_error()
        return str(error) if error else None


class ResponseValidator:
    """Check a backend reply against the ``{success?, enhanced_resources: [...]}`` envelope.

    Only the envelope is validated; element-level defects are left to the
    record mapper.
    """

    def validate(self, reply: BackendReply) -> ValidationResult:
        if not reply.ok:
            return ValidationResult(ResponseShape.HTTP_ERROR, reply.status_code)

        try:
            payload = json.loads(reply.body)
        except (ValueError, TypeError, RecursionError) as e:
            return ValidationResult(
                ResponseShape.PARSE_FAILURE, reply.status_code, detail=str(e)
            )

        return self.classify(payload, reply.status_code)

    def classify(self, payload: Any, status_code: int = 200) -> ValidationResult:
        if not isinstance(payload, dict) or RESOURCE_LIST_FIELD not in payload:
            return ValidationResult(
                ResponseShape.MISSING_RESOURCE_LIST,
                status_code,
                detail=f"missing '{RESOURCE_LIST_FIELD}'",
            )

        resources = payload[RESOURCE_LIST_FIELD]
        if not isinstance(resources, list):
            return ValidationResult(
                ResponseShape.NOT_AN_ARRAY,
                status_code,
                detail=f"'{RESOURCE_LIST_FIELD}' is {type(resources).__name__}, not a list",
            )

        return ValidationResult(ResponseShape.WELL_FORMED, status_code, payload=payload)
