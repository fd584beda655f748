"""Data transfer objects crossing the command boundary."""

from clipbridge.application.dto.command_result import CommandResult

__all__ = ["CommandResult"]
