"""Banking domain exceptions.

Row-level malformation errors are reported per row by the import flow and
never abort a batch. A missing required column is structural and aborts
the whole batch before any row is processed.
"""

from rollcast.domain.shared.exceptions import ErrorCode, ValidationError


class MalformedDateError(ValidationError):
    """Raised when a posting date matches none of the accepted formats."""

    def __init__(self, value: str) -> None:
        super().__init__(
            message=f"Unrecognized date format: {value!r}",
            code=ErrorCode.INVALID_DATE,
            details={"value": value},
        )
        self.value = value


class MalformedAmountError(ValidationError):
    """Raised when an amount or balance field is not numeric."""

    def __init__(self, value: str, field: str = "Amount") -> None:
        super().__init__(
            message=f"Invalid {field.lower()}: {value!r}",
            code=ErrorCode.INVALID_AMOUNT,
            details={"value": value, "field": field},
        )
        self.value = value
        self.field = field


class MissingFieldError(ValidationError):
    """Raised when a row lacks a value the normalizer cannot do without."""

    def __init__(self, field: str) -> None:
        super().__init__(
            message=f"Missing required field: {field}",
            code=ErrorCode.INVALID_FORMAT,
            details={"field": field},
        )
        self.field = field


class MissingColumnsError(ValidationError):
    """Raised when a statement file lacks required header columns."""

    def __init__(self, missing_columns: list[str]) -> None:
        super().__init__(
            message=f"Missing required columns: {', '.join(missing_columns)}",
            code=ErrorCode.MISSING_COLUMNS,
            details={"missing_columns": missing_columns},
        )
        self.missing_columns = missing_columns
