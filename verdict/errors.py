"""
Exceptions raised by verdict.

Validators never raise these: failure is returned as Err(Failure).
They are only raised when a caller asks for a plain value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import Failure


class ValidationFailed(ValueError):
    """Raised when a failed validation result is unwrapped."""

    def __init__(self, failure: Failure):
        super().__init__(failure.reason)
        self.failure = failure

    @property
    def reason(self) -> str:
        return self.failure.reason
