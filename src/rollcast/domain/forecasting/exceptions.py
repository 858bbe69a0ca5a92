"""Forecasting domain exceptions."""

from pydantic import ValidationError as ModelValidationError

from rollcast.domain.shared.exceptions import (
    BusinessRuleViolation,
    EntityNotFoundError,
    ErrorCode,
)


class EstimateNotFoundError(EntityNotFoundError):
    """Raised when an estimate id is unknown."""

    def __init__(self, estimate_id: str) -> None:
        super().__init__(
            message=f"Estimate {estimate_id} not found",
            code=ErrorCode.ESTIMATE_NOT_FOUND,
            details={"estimate_id": estimate_id},
        )
        self.estimate_id = estimate_id


class InvalidEstimateError(BusinessRuleViolation):
    """Raised when estimate fields violate the estimate rules."""

    def __init__(self, reason: str, estimate_id: str | None = None) -> None:
        details = {"reason": reason}
        if estimate_id is not None:
            details["estimate_id"] = estimate_id
        super().__init__(message=f"Invalid estimate: {reason}", details=details)
        self.reason = reason

    @classmethod
    def from_validation(
        cls,
        error: ModelValidationError,
        estimate_id: str | None = None,
    ) -> "InvalidEstimateError":
        first = error.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        reason = f"{location}: {first['msg']}" if location else first["msg"]
        return cls(reason, estimate_id)
