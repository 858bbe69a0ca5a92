"""SessionContext - the scope all stored data belongs to."""

from dataclasses import dataclass

DEFAULT_SESSION_ID = "default"


@dataclass(frozen=True)
class SessionContext:
    """Identifies the working session whose transactions and estimates are used."""

    session_id: str = DEFAULT_SESSION_ID

    def __str__(self) -> str:
        return f"SessionContext({self.session_id})"
