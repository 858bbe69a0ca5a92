"""Reader for bank statement CSV exports.

Expected header (column order does not matter, extra columns are ignored):

    Details,Posting Date,Description,Amount,Type,Balance,Check or Slip #

``Check or Slip #`` is optional. Values are kept as text; parsing is the
normalizer's job.
"""

import csv
import io
import logging

from rollcast.domain.banking.exceptions import MissingColumnsError
from rollcast.domain.banking.value_objects import StatementRow

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS: tuple[str, ...] = (
    "Details",
    "Posting Date",
    "Description",
    "Amount",
    "Type",
    "Balance",
)
OPTIONAL_COLUMNS: tuple[str, ...] = ("Check or Slip #",)

_FIELD_FOR_COLUMN = {
    "Details": "details",
    "Posting Date": "posting_date",
    "Description": "description",
    "Amount": "amount",
    "Type": "type",
    "Balance": "balance",
    "Check or Slip #": "check_number",
}


class CsvStatementReader:
    """Split a comma-delimited statement export into ``StatementRow`` objects."""

    def __init__(self, delimiter: str = ","):
        self._delimiter = delimiter

    def read(self, content: str) -> list[StatementRow]:
        """
        Parse a statement export.

        Parameters
        ----------
        content
            Full file content including the header row

        Returns
        -------
        One row per non-blank data line, numbered from 1

        Raises
        ------
        MissingColumnsError
            If a required column is absent from the header
        """
        reader = csv.DictReader(
            io.StringIO(content.lstrip("\ufeff")),
            delimiter=self._delimiter,
        )
        header = [name.strip() for name in reader.fieldnames or []]
        missing = [column for column in REQUIRED_COLUMNS if column not in header]
        if missing:
            raise MissingColumnsError(missing)

        rows: list[StatementRow] = []
        for record in reader:
            values = {
                (key or "").strip(): value
                for key, value in record.items()
                if isinstance(value, str)
            }
            if not any(value.strip() for value in values.values()):
                continue
            rows.append(self._to_row(len(rows) + 1, values))

        logger.debug("Read %d statement rows", len(rows))
        return rows

    @staticmethod
    def _to_row(row_number: int, values: dict[str, str]) -> StatementRow:
        fields: dict[str, str | None] = {}
        for column, field in _FIELD_FOR_COLUMN.items():
            value = values.get(column)
            fields[field] = value if value and value.strip() else None
        return StatementRow(row_number=row_number, **fields)
