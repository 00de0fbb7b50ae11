"""Repeat Rule — rejects runs of the same character."""

from itertools import groupby
from typing import ClassVar

from pydantic import Field

from passguard.constants import MAX_REPEAT_RUN
from passguard.validators.base import BaseRule
from passguard.validators.models import RuleCode


class RepeatedCharacterRule(BaseRule):
    """Fails when any character appears ``max_run`` or more times in a row.

    "aaa" fails with the default run of 3; "aa" and "aabaa" pass. Strings
    shorter than ``max_run`` can never fail.
    """

    code: ClassVar[RuleCode] = RuleCode.REPEATED_CHARACTERS

    max_run: int = Field(default=MAX_REPEAT_RUN, ge=2)

    @property
    def message(self) -> str:
        return f"Password must not contain {self.max_run} or more repeated characters in a row"

    def is_satisfied(self, password: str) -> bool:
        return all(
            sum(1 for _ in run) < self.max_run
            for _, run in groupby(password)
        )
