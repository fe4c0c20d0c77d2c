"""
Authentication schemas
"""
from email_validator import EmailNotValidError, validate_email
from pydantic import Field, field_validator, model_validator
from typing import Optional
from ..models.user import UserRole
from .base import CamelModel
from .user import UserResponse

WORKER_REQUIRED_FIELDS = ("skills", "experience", "location")
EMPLOYER_REQUIRED_FIELDS = ("company_name", "industry")


class UserRegister(CamelModel):
    """Registration schema: account fields plus role-specific profile fields"""
    email: str
    password: str = Field(..., min_length=1)
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    role: UserRole
    phone: Optional[str] = None

    # Worker profile
    skills: Optional[str] = None
    experience: Optional[str] = None
    availability: str = "Available Now"
    description: Optional[str] = None
    hourly_rate: Optional[str] = None

    # Employer profile
    company_name: Optional[str] = None
    industry: Optional[str] = None
    job_needs: Optional[str] = None

    # Both roles
    location: Optional[str] = None

    @field_validator("email")
    @classmethod
    def check_email_format(cls, value: str) -> str:
        # Stored exactly as typed; lookups are exact matches
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(str(e))
        return value

    @model_validator(mode="after")
    def check_role_fields(self):
        required = WORKER_REQUIRED_FIELDS if self.role == UserRole.WORKER else EMPLOYER_REQUIRED_FIELDS
        missing = [name for name in required if not getattr(self, name)]
        if missing:
            raise ValueError(f"{self.role.value} registration requires: {', '.join(missing)}")
        return self


class UserLogin(CamelModel):
    """User login schema"""
    email: str
    password: str


class LoginResponse(UserResponse):
    """Logged-in user (password omitted) plus a token for binding chat identity"""
    access_token: str
    token_type: str = "bearer"
