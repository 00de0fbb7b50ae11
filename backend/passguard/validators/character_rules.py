"""Character class rules — presence and absence checks over code points.

Classification uses ``str`` methods on single characters, so non-ASCII
letters and digits count the same as their ASCII counterparts.
"""

from typing import ClassVar

from pydantic import Field, field_validator

from passguard.constants import SPECIAL_CHARACTERS
from passguard.validators.base import BaseRule
from passguard.validators.models import RuleCode


class UppercaseRule(BaseRule):
    """Requires at least one uppercase letter."""

    code: ClassVar[RuleCode] = RuleCode.MISSING_UPPERCASE

    @property
    def message(self) -> str:
        return "Password must contain at least one uppercase letter"

    def is_satisfied(self, password: str) -> bool:
        return any(ch.isupper() for ch in password)


class DigitRule(BaseRule):
    """Requires at least one digit."""

    code: ClassVar[RuleCode] = RuleCode.MISSING_DIGIT

    @property
    def message(self) -> str:
        return "Password must contain at least one digit"

    def is_satisfied(self, password: str) -> bool:
        return any(ch.isdecimal() for ch in password)


class SpecialCharacterRule(BaseRule):
    """Requires at least one character from a fixed special-character set."""

    code: ClassVar[RuleCode] = RuleCode.MISSING_SPECIAL

    special_characters: frozenset[str] = Field(default=frozenset(SPECIAL_CHARACTERS))

    @field_validator("special_characters", mode="before")
    @classmethod
    def _split_characters(cls, value):
        # Accept a plain string like "!@#" as well as any iterable of characters
        if isinstance(value, str):
            return frozenset(value)
        return value

    @field_validator("special_characters")
    @classmethod
    def _check_characters(cls, value: frozenset[str]) -> frozenset[str]:
        if not value:
            raise ValueError("special character set must not be empty")
        if any(len(ch) != 1 for ch in value):
            raise ValueError("special character set must contain single characters")
        return value

    @property
    def message(self) -> str:
        return "Password must contain at least one special character"

    def is_satisfied(self, password: str) -> bool:
        return any(ch in self.special_characters for ch in password)


class WhitespaceRule(BaseRule):
    """Rejects passwords containing spaces or any other whitespace."""

    code: ClassVar[RuleCode] = RuleCode.CONTAINS_WHITESPACE

    @property
    def message(self) -> str:
        return "Password must not contain spaces or other whitespace"

    def is_satisfied(self, password: str) -> bool:
        return not any(ch.isspace() for ch in password)
