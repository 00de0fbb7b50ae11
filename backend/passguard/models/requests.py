"""API request models."""

from pydantic import BaseModel, Field

from passguard.constants import MAX_PASSWORD_INPUT_LENGTH


class ValidatePasswordRequest(BaseModel):
    """Request to check one candidate password."""

    password: str = Field(
        ...,
        max_length=MAX_PASSWORD_INPUT_LENGTH,
        description="Candidate password; never stored or logged",
        examples=["Password123!"],
    )
