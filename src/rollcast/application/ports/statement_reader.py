"""Statement reader port."""

from typing import Protocol

from rollcast.domain.banking.value_objects import StatementRow


class StatementReader(Protocol):
    """Splits an uploaded statement file into raw rows."""

    def read(self, content: str) -> list[StatementRow]:
        """Parse ``content``.

        Raises ``MissingColumnsError`` before reading any row when a
        required header column is absent.
        """
        ...
