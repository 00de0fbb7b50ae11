"""Base rule — abstract class implementing the Strategy Pattern.

Each rule is a standalone, independently testable unit.
New rules are added without modifying the engine.
"""

from abc import ABC, abstractmethod
from typing import ClassVar, Optional

from pydantic import BaseModel

from passguard.validators.models import Diagnostic, RuleCode


class BaseRule(BaseModel, ABC):
    """Abstract base for all password rules.

    Contract:
        - evaluate() is a pure function of the password: same input → same output
        - evaluate() never raises for any string, including the empty string
        - evaluate() returns one Diagnostic on failure, None otherwise
        - Configuration is checked when the rule is constructed; instances are frozen
    """

    model_config = {"frozen": True}

    code: ClassVar[RuleCode]

    @property
    def name(self) -> str:
        """Identifier used in diagnostics and logs."""
        return type(self).__name__

    @property
    @abstractmethod
    def message(self) -> str:
        """Fixed diagnostic text reported when the rule fails."""
        ...

    @abstractmethod
    def is_satisfied(self, password: str) -> bool:
        """Return True when the password passes this rule."""
        ...

    def evaluate(self, password: str) -> Optional[Diagnostic]:
        """Run the rule against one password.

        Args:
            password: Candidate password

        Returns:
            Diagnostic when the rule fails, None when it passes
        """
        if self.is_satisfied(password):
            return None
        return Diagnostic(rule=self.name, code=self.code, message=self.message)
