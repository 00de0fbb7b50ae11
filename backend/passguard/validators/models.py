"""Validation models — rule codes, diagnostics, and the result structure.

All validation is deterministic: same input → same output.
"""

from enum import Enum

from pydantic import BaseModel, Field


class RuleCode(str, Enum):
    """Stable identifier for every password rule.

    Naming convention: SPECIFIC_ISSUE
    """

    MIN_LENGTH = "MIN_LENGTH"
    MISSING_UPPERCASE = "MISSING_UPPERCASE"
    MISSING_SPECIAL = "MISSING_SPECIAL"
    MISSING_DIGIT = "MISSING_DIGIT"
    CONTAINS_WHITESPACE = "CONTAINS_WHITESPACE"
    COMMON_PASSWORD = "COMMON_PASSWORD"
    REPEATED_CHARACTERS = "REPEATED_CHARACTERS"


class Diagnostic(BaseModel):
    """A single failed rule."""

    rule: str     # Name of the rule that produced it
    code: RuleCode
    message: str

    model_config = {"frozen": True, "use_enum_values": True}


class ValidationResult(BaseModel):
    """Every diagnostic produced for one password, in rule order."""

    diagnostics: list[Diagnostic] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def passed(self) -> bool:
        return not self.diagnostics

    @property
    def messages(self) -> list[str]:
        return [d.message for d in self.diagnostics]

    @property
    def codes(self) -> list[str]:
        return [d.code for d in self.diagnostics]

    @property
    def failure_count(self) -> int:
        return len(self.diagnostics)


class RuleSetSealedError(RuntimeError):
    """Raised when a rule is registered after the engine started validating."""
