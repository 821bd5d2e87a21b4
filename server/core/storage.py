"""
In-memory data store
- One keyed repository per entity (id -> record)
- Storage interface shared by every backend the API can be wired to
- "Not found" is always None / False, never an exception
"""
from abc import ABC, abstractmethod
from typing import Callable, Generic, Optional, TypeVar

from fastapi import Request
from sqlmodel import SQLModel

from core.models import (
    Article,
    ArticleCreate,
    ContactSubmission,
    ContactSubmissionCreate,
    Course,
    CourseCreate,
    CourseUpdate,
    Enrollment,
    EnrollmentCreate,
    EnrollmentUpdate,
    Instructor,
    InstructorCreate,
    Review,
    ReviewCreate,
    Testimonial,
    TestimonialCreate,
    User,
    UserCreate,
)

RecordT = TypeVar("RecordT", bound=SQLModel)


class Repository(Generic[RecordT]):
    """Keyed collection of one record type, in insertion order.

    Records are handed out as copies, so mutating a returned record never
    changes what is stored.
    """

    def __init__(self, record_type: type[RecordT]):
        self.record_type = record_type
        self._records: dict[str, RecordT] = {}

    def __len__(self) -> int:
        return len(self._records)

    def all(self) -> list[RecordT]:
        return [record.model_copy() for record in self._records.values()]

    def get(self, record_id: str) -> Optional[RecordT]:
        record = self._records.get(record_id)
        return record.model_copy() if record is not None else None

    def find(self, predicate: Callable[[RecordT], bool]) -> Optional[RecordT]:
        record = next((record for record in self._records.values() if predicate(record)), None)
        return record.model_copy() if record is not None else None

    def filter(self, predicate: Callable[[RecordT], bool]) -> list[RecordT]:
        return [record.model_copy() for record in self._records.values() if predicate(record)]

    def add(self, payload: SQLModel) -> RecordT:
        # id and timestamp come from the record type's default factories
        record = self.record_type.model_validate(payload.model_dump())
        while record.id in self._records:
            record = self.record_type.model_validate(payload.model_dump())
        self._records[record.id] = record
        return record.model_copy()

    def _nullable(self, field_name: str) -> bool:
        field = self.record_type.model_fields.get(field_name)
        return field is not None and not field.is_required() and field.default is None

    def update(self, record_id: str, patch: SQLModel) -> Optional[RecordT]:
        record = self._records.get(record_id)
        if record is None:
            return None
        # an explicit None only clears fields the record allows to be empty
        changes = {
            name: value
            for name, value in patch.model_dump(exclude_unset=True).items()
            if value is not None or self._nullable(name)
        }
        updated = self.record_type.model_validate({**record.model_dump(), **changes})
        self._records[record_id] = updated
        return updated.model_copy()

    def delete(self, record_id: str) -> bool:
        return self._records.pop(record_id, None) is not None


class UserRepository(Repository[User]):
    def __init__(self):
        super().__init__(User)

    def get_by_email(self, email: str) -> Optional[User]:
        return self.find(lambda user: user.email == email)


class CourseRepository(Repository[Course]):
    def __init__(self):
        super().__init__(Course)


class InstructorRepository(Repository[Instructor]):
    def __init__(self):
        super().__init__(Instructor)


class EnrollmentRepository(Repository[Enrollment]):
    def __init__(self):
        super().__init__(Enrollment)

    def list_by_user(self, user_id: str) -> list[Enrollment]:
        return self.filter(lambda enrollment: enrollment.user_id == user_id)


class ReviewRepository(Repository[Review]):
    def __init__(self):
        super().__init__(Review)

    def list_by_course(self, course_id: str) -> list[Review]:
        return self.filter(lambda review: review.course_id == course_id)


class ArticleRepository(Repository[Article]):
    def __init__(self):
        super().__init__(Article)

    def newest_first(self) -> list[Article]:
        # sorted() is stable, equal timestamps keep insertion order
        return sorted(self.all(), key=lambda article: article.published_at, reverse=True)

    def get_by_slug(self, slug: str) -> Optional[Article]:
        return self.find(lambda article: article.slug == slug)


class TestimonialRepository(Repository[Testimonial]):
    def __init__(self):
        super().__init__(Testimonial)


class ContactSubmissionRepository(Repository[ContactSubmission]):
    def __init__(self):
        super().__init__(ContactSubmission)


class Storage(ABC):
    """Data access interface used by the API routers."""

    # users
    @abstractmethod
    def get_user(self, user_id: str) -> Optional[User]: ...

    @abstractmethod
    def get_user_by_email(self, email: str) -> Optional[User]: ...

    @abstractmethod
    def create_user(self, data: UserCreate) -> User: ...

    # courses
    @abstractmethod
    def get_all_courses(self) -> list[Course]: ...

    @abstractmethod
    def get_course(self, course_id: str) -> Optional[Course]: ...

    @abstractmethod
    def create_course(self, data: CourseCreate) -> Course: ...

    @abstractmethod
    def update_course(self, course_id: str, data: CourseUpdate) -> Optional[Course]: ...

    @abstractmethod
    def delete_course(self, course_id: str) -> bool: ...

    # instructors
    @abstractmethod
    def get_all_instructors(self) -> list[Instructor]: ...

    @abstractmethod
    def get_instructor(self, instructor_id: str) -> Optional[Instructor]: ...

    @abstractmethod
    def create_instructor(self, data: InstructorCreate) -> Instructor: ...

    # enrollments
    @abstractmethod
    def get_all_enrollments(self) -> list[Enrollment]: ...

    @abstractmethod
    def get_enrollment(self, enrollment_id: str) -> Optional[Enrollment]: ...

    @abstractmethod
    def get_enrollments_by_user_id(self, user_id: str) -> list[Enrollment]: ...

    @abstractmethod
    def create_enrollment(self, data: EnrollmentCreate) -> Enrollment: ...

    @abstractmethod
    def update_enrollment(self, enrollment_id: str, data: EnrollmentUpdate) -> Optional[Enrollment]: ...

    # reviews
    @abstractmethod
    def get_all_reviews(self) -> list[Review]: ...

    @abstractmethod
    def get_reviews_by_course_id(self, course_id: str) -> list[Review]: ...

    @abstractmethod
    def create_review(self, data: ReviewCreate) -> Review: ...

    # articles
    @abstractmethod
    def get_all_articles(self) -> list[Article]: ...

    @abstractmethod
    def get_article(self, article_id: str) -> Optional[Article]: ...

    @abstractmethod
    def get_article_by_slug(self, slug: str) -> Optional[Article]: ...

    @abstractmethod
    def create_article(self, data: ArticleCreate) -> Article: ...

    # testimonials
    @abstractmethod
    def get_all_testimonials(self) -> list[Testimonial]: ...

    @abstractmethod
    def create_testimonial(self, data: TestimonialCreate) -> Testimonial: ...

    # contact
    @abstractmethod
    def get_all_contact_submissions(self) -> list[ContactSubmission]: ...

    @abstractmethod
    def create_contact_submission(self, data: ContactSubmissionCreate) -> ContactSubmission: ...

    @abstractmethod
    def counts(self) -> dict[str, int]:
        """Number of records held per collection."""


class MemStorage(Storage):
    """Volatile storage - everything is lost when the process exits."""

    def __init__(self):
        self.users = UserRepository()
        self.courses = CourseRepository()
        self.instructors = InstructorRepository()
        self.enrollments = EnrollmentRepository()
        self.reviews = ReviewRepository()
        self.articles = ArticleRepository()
        self.testimonials = TestimonialRepository()
        self.contact_submissions = ContactSubmissionRepository()

    def counts(self) -> dict[str, int]:
        repositories = (
            ("users", self.users),
            ("courses", self.courses),
            ("instructors", self.instructors),
            ("enrollments", self.enrollments),
            ("reviews", self.reviews),
            ("articles", self.articles),
            ("testimonials", self.testimonials),
            ("contact_submissions", self.contact_submissions),
        )
        return {name: len(repo) for name, repo in repositories}

    def get_user(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.users.get_by_email(email)

    def create_user(self, data: UserCreate) -> User:
        return self.users.add(data)

    def get_all_courses(self) -> list[Course]:
        return self.courses.all()

    def get_course(self, course_id: str) -> Optional[Course]:
        return self.courses.get(course_id)

    def create_course(self, data: CourseCreate) -> Course:
        return self.courses.add(data)

    def update_course(self, course_id: str, data: CourseUpdate) -> Optional[Course]:
        return self.courses.update(course_id, data)

    def delete_course(self, course_id: str) -> bool:
        return self.courses.delete(course_id)

    def get_all_instructors(self) -> list[Instructor]:
        return self.instructors.all()

    def get_instructor(self, instructor_id: str) -> Optional[Instructor]:
        return self.instructors.get(instructor_id)

    def create_instructor(self, data: InstructorCreate) -> Instructor:
        return self.instructors.add(data)

    def get_all_enrollments(self) -> list[Enrollment]:
        return self.enrollments.all()

    def get_enrollment(self, enrollment_id: str) -> Optional[Enrollment]:
        return self.enrollments.get(enrollment_id)

    def get_enrollments_by_user_id(self, user_id: str) -> list[Enrollment]:
        return self.enrollments.list_by_user(user_id)

    def create_enrollment(self, data: EnrollmentCreate) -> Enrollment:
        return self.enrollments.add(data)

    def update_enrollment(self, enrollment_id: str, data: EnrollmentUpdate) -> Optional[Enrollment]:
        return self.enrollments.update(enrollment_id, data)

    def get_all_reviews(self) -> list[Review]:
        return self.reviews.all()

    def get_reviews_by_course_id(self, course_id: str) -> list[Review]:
        return self.reviews.list_by_course(course_id)

    def create_review(self, data: ReviewCreate) -> Review:
        return self.reviews.add(data)

    def get_all_articles(self) -> list[Article]:
        return self.articles.newest_first()

    def get_article(self, article_id: str) -> Optional[Article]:
        return self.articles.get(article_id)

    def get_article_by_slug(self, slug: str) -> Optional[Article]:
        return self.articles.get_by_slug(slug)

    def create_article(self, data: ArticleCreate) -> Article:
        return self.articles.add(data)

    def get_all_testimonials(self) -> list[Testimonial]:
        return self.testimonials.all()

    def create_testimonial(self, data: TestimonialCreate) -> Testimonial:
        return self.testimonials.add(data)

    def get_all_contact_submissions(self) -> list[ContactSubmission]:
        return self.contact_submissions.all()

    def create_contact_submission(self, data: ContactSubmissionCreate) -> ContactSubmission:
        return self.contact_submissions.add(data)


def get_storage(request: Request) -> Storage:
    """FastAPI dependency - the store attached to the running app."""
    return request.app.state.storage