from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from core.models import Enrollment, PaymentMethod, UserRole


# ==================== Auth ====================

class RegisterRequest(BaseModel):
    """Enrollment form, step 1 - create the student account"""
    name: str = Field(..., min_length=1, description="Full name")
    email: EmailStr = Field(..., description="Login email")
    phone: Optional[str] = Field(default=None, description="Phone number")
    password: str = Field(..., min_length=6, description="Password (min 6 chars)")
    role: Literal["student"] = "student"

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name is required.")
        return v

    @field_validator("phone")
    @classmethod
    def empty_phone_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v.strip()


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    user_id: str
    name: str
    email: str
    role: UserRole
    access_token: str
    token_type: str = "bearer"
    expires_in: int = 86400


# ==================== Enrollments ====================

class EnrollRequest(BaseModel):
    """Enrollment form, step 2 - enroll the new account in a course"""
    user_id: str = Field(..., min_length=1)
    course_id: str = Field(..., min_length=1, description="Selected course")
    payment_method: PaymentMethod = PaymentMethod.ecocash


class ProgressUpdateRequest(BaseModel):
    progress: int = Field(..., ge=0, le=100, description="Completion percentage")


class CourseSummary(BaseModel):
    id: str
    title: str
    category: str
    duration: str
    level: str
    thumbnail: Optional[str] = None
    price_usd: Decimal


class EnrollmentWithCourse(Enrollment):
    """Portal dashboard row"""
    course: Optional[CourseSummary] = None


# ==================== Contact ====================

class ContactRequest(BaseModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    phone: Optional[str] = None
    message: str = Field(..., min_length=1)
