"""
Custom exception classes for the Chat CRM seeder.
"""
from typing import Any, Dict, Optional


class ChatCrmException(Exception):
    """Base exception class for Chat CRM tooling."""

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)


class SeedingError(ChatCrmException):
    """Raised when any step of the seed procedure fails."""

    def __init__(
        self,
        message: str = "Seeding failed",
        code: str = "SEEDING_FAILED",
        details: Optional[Dict[str, Any]] = None,
        step: Optional[str] = None,
    ):
        details = details or {}
        if step is not None:
            details["step"] = step
        super().__init__(message=message, code=code, details=details)

    @property
    def step(self) -> Optional[str]:
        """Name of the step that failed, if known."""
        return self.details.get("step")
