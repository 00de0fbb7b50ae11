"""Password Validator — deterministic, exhaustive password policy checks.

Usage:
    from passguard.validators import get_validation_engine

    result = get_validation_engine().validate(password)
    if not result.passed:
        # Show every entry of result.messages
"""

from passguard.validators.base import BaseRule
from passguard.validators.engine import ValidationEngine, build_default_rules, get_validation_engine
from passguard.validators.models import Diagnostic, RuleCode, RuleSetSealedError, ValidationResult
from passguard.validators.length_rule import MinLengthRule
from passguard.validators.character_rules import (
    DigitRule,
    SpecialCharacterRule,
    UppercaseRule,
    WhitespaceRule,
)
from passguard.validators.common_password_rule import CommonPasswordRule
from passguard.validators.repeat_rule import RepeatedCharacterRule

__all__ = [
    "BaseRule",
    "ValidationEngine",
    "build_default_rules",
    "get_validation_engine",
    "Diagnostic",
    "RuleCode",
    "RuleSetSealedError",
    "ValidationResult",
    "MinLengthRule",
    "UppercaseRule",
    "SpecialCharacterRule",
    "DigitRule",
    "WhitespaceRule",
    "CommonPasswordRule",
    "RepeatedCharacterRule",
]
