from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import uuid4

from pydantic import field_validator
from sqlmodel import Field, SQLModel


def new_id() -> str:
    return str(uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserRole(str, Enum):
    student = "student"
    admin = "admin"


class PaymentMethod(str, Enum):
    ecocash = "Ecocash"
    paynow = "PayNow"
    bank_transfer = "Bank Transfer"
    installments = "Installments"


# ==================== Users ====================

class UserBase(SQLModel):
    name: str
    email: str = Field(index=True)
    phone: Optional[str] = None
    role: UserRole = Field(default=UserRole.student)


class UserCreate(UserBase):
    password: str = Field(description="bcrypt hash, never the plain password")


class User(UserCreate):
    id: str = Field(default_factory=new_id, primary_key=True)
    created_at: datetime = Field(default_factory=utcnow)


class UserPublic(UserBase):
    id: str
    created_at: datetime


# ==================== Instructors ====================

class InstructorCreate(SQLModel):
    name: str
    title: str
    bio: str
    photo: Optional[str] = None
    expertise: str = Field(description="comma separated areas of expertise")


class Instructor(InstructorCreate):
    id: str = Field(default_factory=new_id, primary_key=True)


# ==================== Courses ====================

class CourseCreate(SQLModel):
    title: str
    description: str
    category: str = Field(index=True)
    price_usd: Decimal = Field(max_digits=10, decimal_places=2)
    price_zwl: Decimal = Field(max_digits=12, decimal_places=2)
    duration: str
    level: str
    thumbnail: Optional[str] = None
    syllabus: str = Field(description="one line per week")
    learning_outcomes: str = Field(description="one outcome per line")
    instructor_id: str
    featured: bool = False


class Course(CourseCreate):
    id: str = Field(default_factory=new_id, primary_key=True)
    created_at: datetime = Field(default_factory=utcnow)


class CourseUpdate(SQLModel):
    """Partial course payload - only the fields that were sent are applied."""
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    price_usd: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    price_zwl: Optional[Decimal] = Field(default=None, max_digits=12, decimal_places=2)
    duration: Optional[str] = None
    level: Optional[str] = None
    thumbnail: Optional[str] = None
    syllabus: Optional[str] = None
    learning_outcomes: Optional[str] = None
    instructor_id: Optional[str] = None
    featured: Optional[bool] = None

    @field_validator(
        "title", "description", "category", "price_usd", "price_zwl", "duration",
        "level", "syllabus", "learning_outcomes", "instructor_id", "featured",
    )
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("may be omitted but not null")
        return v


# ==================== Enrollments ====================

class EnrollmentCreate(SQLModel):
    user_id: str = Field(index=True)
    course_id: str = Field(index=True)
    payment_method: str


class Enrollment(EnrollmentCreate):
    id: str = Field(default_factory=new_id, primary_key=True)
    progress: int = Field(default=0, ge=0, le=100, description="0-100%")
    completed: bool = False
    certificate_issued: bool = False
    enrolled_at: datetime = Field(default_factory=utcnow)


class EnrollmentUpdate(SQLModel):
    payment_method: Optional[str] = None
    progress: Optional[int] = Field(default=None, ge=0, le=100)
    completed: Optional[bool] = None
    certificate_issued: Optional[bool] = None

    @field_validator("payment_method", "progress", "completed", "certificate_issued")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("may be omitted but not null")
        return v


# ==================== Reviews ====================

class ReviewCreate(SQLModel):
    course_id: str = Field(index=True)
    user_id: str
    rating: int = Field(ge=1, le=5)
    comment: str


class Review(ReviewCreate):
    id: str = Field(default_factory=new_id, primary_key=True)
    created_at: datetime = Field(default_factory=utcnow)


# ==================== Blog ====================

class ArticleCreate(SQLModel):
    title: str
    slug: str = Field(index=True)
    content: str
    excerpt: str
    category: str
    thumbnail: Optional[str] = None
    author: str


class Article(ArticleCreate):
    id: str = Field(default_factory=new_id, primary_key=True)
    published_at: datetime = Field(default_factory=utcnow)


# ==================== Testimonials ====================

class TestimonialCreate(SQLModel):
    name: str
    photo: Optional[str] = None
    text: str
    rating: int = Field(ge=1, le=5)
    course_completed: str
    achievement: Optional[str] = None


class Testimonial(TestimonialCreate):
    id: str = Field(default_factory=new_id, primary_key=True)
    created_at: datetime = Field(default_factory=utcnow)


# ==================== Contact ====================

class ContactSubmissionCreate(SQLModel):
    name: str
    email: str
    phone: Optional[str] = None
    message: str


class ContactSubmission(ContactSubmissionCreate):
    id: str = Field(default_factory=new_id, primary_key=True)
    submitted_at: datetime = Field(default_factory=utcnow)
