"""Length Rule — rejects passwords shorter than the configured minimum."""

from typing import ClassVar

from pydantic import Field

from passguard.constants import MIN_PASSWORD_LENGTH
from passguard.validators.base import BaseRule
from passguard.validators.models import RuleCode


class MinLengthRule(BaseRule):
    """Fails when the password has fewer than ``min_length`` code points."""

    code: ClassVar[RuleCode] = RuleCode.MIN_LENGTH

    min_length: int = Field(default=MIN_PASSWORD_LENGTH, ge=1)

    @property
    def message(self) -> str:
        return f"Password must be at least {self.min_length} characters long"

    def is_satisfied(self, password: str) -> bool:
        return len(password) >= self.min_length
