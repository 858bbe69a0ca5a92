"""Write-side commands of the application layer."""

from rollcast.application.commands.create_estimate_command import (
    CreateEstimateCommand,
)
from rollcast.application.commands.delete_estimate_command import (
    DeleteEstimateCommand,
)
from rollcast.application.commands.reset_session_command import ResetSessionCommand
from rollcast.application.commands.update_estimate_command import (
    UpdateEstimateCommand,
)

__all__ = [
    "CreateEstimateCommand",
    "DeleteEstimateCommand",
    "ResetSessionCommand",
    "UpdateEstimateCommand",
]
