"""Common Password Rule — rejects exact matches against a denylist of weak passwords."""

from typing import ClassVar

from pydantic import Field, field_validator

from passguard.validators.base import BaseRule
from passguard.validators.models import RuleCode
from passguard.validators.reference_data import COMMON_PASSWORDS


class CommonPasswordRule(BaseRule):
    """Fails when the whole password equals a denylist entry.

    Matching is exact and case-sensitive: "password" is rejected,
    "password123!" and "Password" are not.
    """

    code: ClassVar[RuleCode] = RuleCode.COMMON_PASSWORD

    denylist: frozenset[str] = Field(default=COMMON_PASSWORDS)

    @field_validator("denylist")
    @classmethod
    def _check_denylist(cls, value: frozenset[str]) -> frozenset[str]:
        if not value:
            raise ValueError("common password denylist must not be empty")
        return value

    @classmethod
    def with_additions(cls, extra: list[str]) -> "CommonPasswordRule":
        """Build a rule using the built-in denylist plus ``extra`` entries."""
        return cls(denylist=COMMON_PASSWORDS | frozenset(extra))

    @property
    def message(self) -> str:
        return "Password is too common"

    def is_satisfied(self, password: str) -> bool:
        return password not in self.denylist
