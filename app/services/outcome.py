"""
Service outcomes: a success payload or a tagged error, mapped to HTTP by pure functions.
"""
import enum
from dataclasses import dataclass
from typing import Any, Optional


class ErrorKind(str, enum.Enum):
    VALIDATION = "validation"
    UPSTREAM = "upstream"
    FORMAT = "format"
    UNEXPECTED = "unexpected"


ERROR_STATUS_CODES = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.UPSTREAM: 500,
    ErrorKind.FORMAT: 500,
    ErrorKind.UNEXPECTED: 500,
}


@dataclass(frozen=True)
class ServiceResult:
    payload: Any = None
    error_kind: Optional[ErrorKind] = None
    error_message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    @classmethod
    def success(cls, payload: Any) -> "ServiceResult":
        return cls(payload=payload)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "ServiceResult":
        return cls(error_kind=kind, error_message=message)


def status_code_for(result: ServiceResult) -> int:
    if result.ok:
        return 200
    return ERROR_STATUS_CODES[result.error_kind]


def response_body_for(result: ServiceResult) -> Any:
    if result.ok:
        return result.payload
    return {"error": result.error_message}
