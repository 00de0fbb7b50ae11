"""API response models."""

from pydantic import BaseModel
from typing import Literal

from passguard import __version__
from passguard.validators import ValidationResult


class DiagnosticResponse(BaseModel):
    """One failed rule."""

    rule: str
    code: str
    message: str


class ValidatePasswordResponse(BaseModel):
    """Outcome of checking a password against every rule."""

    passed: bool
    failure_count: int
    diagnostics: list[DiagnosticResponse] = []
    messages: list[str] = []

    @classmethod
    def from_result(cls, result: ValidationResult) -> "ValidatePasswordResponse":
        return cls(
            passed=result.passed,
            failure_count=result.failure_count,
            diagnostics=[
                DiagnosticResponse(rule=d.rule, code=d.code, message=d.message)
                for d in result.diagnostics
            ],
            messages=result.messages,
        )


class RuleResponse(BaseModel):
    """A registered rule, in evaluation order."""

    name: str
    code: str
    description: str


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy", "unhealthy", "degraded"]
    version: str = __version__
    uptime_seconds: float
    rules: int
