"""Bank statement file readers."""

from rollcast.infrastructure.statements.csv_statement_reader import (
    OPTIONAL_COLUMNS,
    REQUIRED_COLUMNS,
    CsvStatementReader,
)

__all__ = [
    "OPTIONAL_COLUMNS",
    "REQUIRED_COLUMNS",
    "CsvStatementReader",
]
