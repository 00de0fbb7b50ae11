"""Validation Engine — runs every registered rule and collects all diagnostics.

This is the main entry point for password validation. It evaluates every
rule against the password, never stopping at the first failure, and returns
a ValidationResult listing each failed rule in registration order.

Usage:
    engine = get_validation_engine()
    result = engine.validate(password)
    if not result.passed:
        # Show result.messages to the user
"""

import threading
import time
from functools import lru_cache
from typing import Iterable, Optional

import structlog

from passguard.config import Settings, get_settings
from passguard.validators.base import BaseRule
from passguard.validators.models import Diagnostic, RuleSetSealedError, ValidationResult

# Import all rules
from passguard.validators.length_rule import MinLengthRule
from passguard.validators.character_rules import (
    DigitRule,
    SpecialCharacterRule,
    UppercaseRule,
    WhitespaceRule,
)
from passguard.validators.common_password_rule import CommonPasswordRule
from passguard.validators.repeat_rule import RepeatedCharacterRule

logger = structlog.get_logger()


def build_default_rules(settings: Optional[Settings] = None) -> list[BaseRule]:
    """Create the default rule chain in evaluation order.

    Raises pydantic's ValidationError if the settings describe an invalid
    policy (e.g. an empty special-character set).
    """
    settings = settings or get_settings()
    return [
        MinLengthRule(min_length=settings.PASSWORD_MIN_LENGTH),
        UppercaseRule(),
        SpecialCharacterRule(special_characters=settings.PASSWORD_SPECIAL_CHARACTERS),
        DigitRule(),
        WhitespaceRule(),
        CommonPasswordRule.with_additions(settings.extra_common_passwords),
        RepeatedCharacterRule(max_run=settings.PASSWORD_MAX_REPEAT_RUN),
    ]


class ValidationEngine:
    """Runs an ordered, sealed set of rules against passwords.

    Design principles:
        - Deterministic: same input → same output
        - Exhaustive: every rule runs, every failure is reported
        - Extensible: add rules without modifying the engine
        - Sealed: the rule set becomes read-only at the first validation,
          so concurrent validate() calls share an immutable tuple
    """

    def __init__(self, rules: Optional[Iterable[BaseRule]] = None):
        """Initialize with the default rules or a custom list.

        Args:
            rules: Optional rules in evaluation order. If None, uses the
                defaults built from settings. An empty list is kept as-is.
        """
        self._rules: tuple[BaseRule, ...] = ()
        self._sealed = False
        self._lock = threading.Lock()

        for rule in (build_default_rules() if rules is None else rules):
            self.register_rule(rule)

    @property
    def rules(self) -> tuple[BaseRule, ...]:
        return self._rules

    @property
    def sealed(self) -> bool:
        return self._sealed

    def register_rule(self, rule: BaseRule) -> None:
        """Append a rule to the end of the chain.

        Duplicates are accepted and will report twice.

        Raises:
            TypeError: rule is None or not a BaseRule
            RuleSetSealedError: the engine has already validated a password
        """
        if not isinstance(rule, BaseRule):
            raise TypeError(f"Expected a BaseRule, got {type(rule).__name__}")

        with self._lock:
            if self._sealed:
                raise RuleSetSealedError(
                    f"Cannot register '{rule.name}': rule set is sealed"
                )
            self._rules = self._rules + (rule,)
            position = len(self._rules)

        logger.debug("rule_registered", rule=rule.name, code=rule.code, position=position)

    def remove_rule(self, rule_name: str) -> None:
        """Remove every rule with the given name (setup only)."""
        with self._lock:
            if self._sealed:
                raise RuleSetSealedError(
                    f"Cannot remove '{rule_name}': rule set is sealed"
                )
            self._rules = tuple(r for r in self._rules if r.name != rule_name)

    def seal(self) -> None:
        """Make the rule set read-only. Idempotent."""
        with self._lock:
            self._sealed = True

    def validate(self, password: str) -> ValidationResult:
        """Run all rules against the password and collect every failure.

        Args:
            password: Candidate password

        Returns:
            ValidationResult with one Diagnostic per failed rule, in rule order
        """
        if not self._sealed:
            self.seal()

        start_time = time.perf_counter()

        diagnostics: list[Diagnostic] = []
        for rule in self._rules:
            diagnostic = rule.evaluate(password)
            if diagnostic is not None:
                diagnostics.append(diagnostic)

        result = ValidationResult(diagnostics=diagnostics)

        logger.info(
            "validation_complete",
            passed=result.passed,
            failure_count=result.failure_count,
            failed_rules=result.codes,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 3),
        )

        return result


@lru_cache
def get_validation_engine() -> ValidationEngine:
    """Return the shared engine configured from settings."""
    return ValidationEngine()
