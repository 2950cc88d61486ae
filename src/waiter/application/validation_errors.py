"""Field violations and the error envelope returned for invalid requests.

A request can fail binding in two ways, each with its own variant:

- TypeMismatchViolation: raw text could not be converted to the field's
  type (e.g. a malformed price). Reported with ``bindingFailure: true``.
- ConstraintViolation: the value converted but broke a declared rule
  such as NotEmpty or NotNull. Reported with ``bindingFailure: false``.

ValidationErrorResponder only renders violations; deciding what is
invalid happens earlier, in the codec and the request schemas.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Any, Sequence, Union

TYPE_MISMATCH = "typeMismatch"


@dataclass(frozen=True)
class TypeMismatchViolation:
    object_name: str
    field: str
    rejected_value: Any
    target_type: str = "Money"
    source_type: str = "String"

    code = TYPE_MISMATCH
    binding_failure = True

    @property
    def codes(self) -> list[str]:
        return [
            f"{self.code}.{self.object_name}.{self.field}",
            f"{self.code}.{self.field}",
            f"{self.code}.{self.target_type}",
            self.code,
        ]

    @property
    def default_message(self) -> str:
        return (
            f"Failed to convert property value of type '{self.source_type}' "
            f"to required type '{self.target_type}' for property '{self.field}'; "
            f"rejected value {self.rejected_value!r}"
        )

    def to_dict(self) -> dict[str, Any]:
        return _violation_dict(self)


@dataclass(frozen=True)
class ConstraintViolation:
    object_name: str
    field: str
    rejected_value: Any
    code: str
    message: str

    binding_failure = False

    @property
    def codes(self) -> list[str]:
        return [
            f"{self.code}.{self.object_name}.{self.field}",
            f"{self.code}.{self.field}",
            self.code,
        ]

    @property
    def default_message(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        return _violation_dict(self)


FieldViolation = Union[TypeMismatchViolation, ConstraintViolation]


def _violation_dict(violation: FieldViolation) -> dict[str, Any]:
    return {
        "objectName": violation.object_name,
        "field": violation.field,
        "rejectedValue": violation.rejected_value,
        "codes": violation.codes,
        "defaultMessage": violation.default_message,
        "bindingFailure": violation.binding_failure,
        "code": violation.code,
    }


@dataclass(frozen=True)
class ErrorResponseEnvelope:
    """The single JSON body describing every violation of one request."""

    timestamp: datetime
    status: int
    error: str
    message: str
    errors: tuple[FieldViolation, ...]
    path: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp.isoformat(),
            "status": self.status,
            "error": self.error,
            "message": self.message,
            "errors": [v.to_dict() for v in self.errors],
            "path": self.path,
        }


class ValidationErrorResponder:
    """Assembles the 400 error envelope for a failed request.

    Type-conversion and constraint failures share one status code; they
    differ only in each violation's ``code`` and ``bindingFailure``.
    """

    status = HTTPStatus.BAD_REQUEST

    def build(
        self,
        object_name: str,
        violations: Sequence[FieldViolation],
        request_path: str,
    ) -> ErrorResponseEnvelope:
        errors = tuple(violations)
        return ErrorResponseEnvelope(
            timestamp=datetime.now(timezone.utc),
            status=self.status.value,
            error=self.status.phrase,
            message=(
                f"Validation failed for object='{object_name}'. "
                f"Error count: {len(errors)}"
            ),
            errors=errors,
            path=request_path,
        )
