"""User Schemas — request/response models for the account endpoints.

Invariants:
    - UserAuthenticate accepts blank strings; the service rejects them with 400
      so blank input never reaches the repository
    - UserCreate rejects an empty or whitespace-only email or password, so every
      created account can pass the authentication blank check; names are stripped,
      the email and password are kept exactly as sent
"""

from pydantic import BaseModel, Field, field_validator


class UserAuthenticate(BaseModel):
    """Credentials for POST /user/authenticate."""
    email_address: str = ""
    password: str = ""


class UserCreate(BaseModel):
    """New account for POST /user."""
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    email_address: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1)

    @field_validator("first_name", "last_name")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()

    @field_validator("email_address", "password")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        """Same blank rule as authentication; the value itself is kept as sent."""
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class UserCreated(BaseModel):
    """Response for a created account."""
    user_id: int
    message: str
