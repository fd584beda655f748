"""CommandResult — the value returned across the command boundary."""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

from clipbridge.domain.errors import ClipbridgeError

T = TypeVar("T")


class CommandResult(BaseModel, Generic[T]):
    """Either the command's value or one human-readable error string."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    value: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "CommandResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "CommandResult[T]":
        return cls(ok=False, error=error)

    def unwrap(self) -> Optional[T]:
        """Return the value, raising ``ClipbridgeError`` with the message on failure."""
        if not self.ok:
            raise ClipbridgeError(self.error)
        return self.value
