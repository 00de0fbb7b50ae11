"""Passwords API — validate a candidate password, list active rules."""

from fastapi import APIRouter, Depends, Request

from passguard.models.requests import ValidatePasswordRequest
from passguard.models.responses import RuleResponse, ValidatePasswordResponse
from passguard.validators import ValidationEngine

router = APIRouter()


def get_engine(request: Request) -> ValidationEngine:
    """Return the engine created at startup."""
    return request.app.state.validation_engine


@router.post("/passwords/validate", response_model=ValidatePasswordResponse)
async def validate_password(
    payload: ValidatePasswordRequest,
    engine: ValidationEngine = Depends(get_engine),
):
    """Check a password against every rule.

    A rejected password is a normal response with ``passed=false``; every
    failed rule is listed.
    """
    result = engine.validate(payload.password)
    return ValidatePasswordResponse.from_result(result)


@router.get("/rules", response_model=list[RuleResponse])
async def list_rules(engine: ValidationEngine = Depends(get_engine)):
    """List active rules in evaluation order."""
    return [
        RuleResponse(name=rule.name, code=rule.code.value, description=rule.message)
        for rule in engine.rules
    ]
