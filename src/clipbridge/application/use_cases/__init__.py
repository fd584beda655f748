"""Application use cases."""

from clipbridge.application.use_cases.copy_text import CopyTextUseCase
from clipbridge.application.use_cases.read_text import ReadTextUseCase

__all__ = [
    "CopyTextUseCase",
    "ReadTextUseCase",
]
