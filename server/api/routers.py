"""
Academy API endpoints
- public catalog (courses, instructors, reviews, blog, testimonials)
- enrollment form (register + enroll), contact form
- student portal (login, enrollments with progress)
- admin-only content management
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from api.schemas import (
    ContactRequest,
    CourseSummary,
    EnrollmentWithCourse,
    EnrollRequest,
    LoginRequest,
    LoginResponse,
    ProgressUpdateRequest,
    RegisterRequest,
)
from core.auth import (
    authenticate_user,
    create_access_token,
    get_current_user,
    get_password_hash,
    get_settings,
    require_admin,
)
from core.config import AppSettings
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
    UserPublic,
    UserRole,
)
from core.storage import Storage, get_storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["api"])


@router.get("/health")
def health_check() -> dict:
    return {"status": "ok", "service": "academy"}


# ==================== Courses ====================

@router.get("/courses", response_model=list[Course])
def list_courses(
    category: Optional[str] = None,
    featured: Optional[bool] = None,
    storage: Storage = Depends(get_storage),
) -> list[Course]:
    """Course catalog, optionally narrowed to one category or to featured courses."""
    courses = storage.get_all_courses()
    if category:
        courses = [course for course in courses if course.category == category]
    if featured is not None:
        courses = [course for course in courses if course.featured == featured]
    return courses


@router.get("/courses/{course_id}", response_model=Course)
def get_course(course_id: str, storage: Storage = Depends(get_storage)) -> Course:
    course = storage.get_course(course_id)
    if not course:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Course not found")
    return course


@router.post("/courses", response_model=Course, status_code=status.HTTP_201_CREATED)
def create_course(
    payload: CourseCreate,
    current_user: User = Depends(require_admin()),
    storage: Storage = Depends(get_storage),
) -> Course:
    course = storage.create_course(payload)
    logger.info(f"➕ Course created - id: {course.id}, title: {course.title}, by: {current_user.email}")
    return course


@router.patch("/courses/{course_id}", response_model=Course)
def update_course(
    course_id: str,
    payload: CourseUpdate,
    current_user: User = Depends(require_admin()),
    storage: Storage = Depends(get_storage),
) -> Course:
    course = storage.update_course(course_id, payload)
    if not course:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Course not found")
    logger.info(f"✏️ Course updated - id: {course_id}, fields: {sorted(payload.model_dump(exclude_unset=True))}")
    return course


@router.delete("/courses/{course_id}")
def delete_course(
    course_id: str,
    current_user: User = Depends(require_admin()),
    storage: Storage = Depends(get_storage),
) -> dict:
    if not storage.delete_course(course_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Course not found")
    logger.info(f"🗑️ Course deleted - id: {course_id}")
    return {"message": "Course deleted", "course_id": course_id}


# ==================== Instructors ====================

@router.get("/instructors", response_model=list[Instructor])
def list_instructors(storage: Storage = Depends(get_storage)) -> list[Instructor]:
    return storage.get_all_instructors()


@router.get("/instructors/{instructor_id}", response_model=Instructor)
def get_instructor(instructor_id: str, storage: Storage = Depends(get_storage)) -> Instructor:
    instructor = storage.get_instructor(instructor_id)
    if not instructor:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Instructor not found")
    return instructor


@router.post("/instructors", response_model=Instructor, status_code=status.HTTP_201_CREATED)
def create_instructor(
    payload: InstructorCreate,
    current_user: User = Depends(require_admin()),
    storage: Storage = Depends(get_storage),
) -> Instructor:
    return storage.create_instructor(payload)


# ==================== Reviews ====================

@router.get("/reviews", response_model=list[Review])
def list_reviews(
    course_id: Optional[str] = Query(default=None, alias="courseId"),
    storage: Storage = Depends(get_storage),
) -> list[Review]:
    if course_id:
        return storage.get_reviews_by_course_id(course_id)
    return storage.get_all_reviews()


@router.post("/reviews", response_model=Review, status_code=status.HTTP_201_CREATED)
def create_review(payload: ReviewCreate, storage: Storage = Depends(get_storage)) -> Review:
    if not storage.get_course(payload.course_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Course not found")
    return storage.create_review(payload)


# ==================== Blog ====================

@router.get("/articles", response_model=list[Article])
def list_articles(
    category: Optional[str] = None,
    storage: Storage = Depends(get_storage),
) -> list[Article]:
    """Newest first."""
    articles = storage.get_all_articles()
    if category:
        articles = [article for article in articles if article.category == category]
    return articles


@router.get("/articles/{slug}", response_model=Article)
def get_article(slug: str, storage: Storage = Depends(get_storage)) -> Article:
    article = storage.get_article_by_slug(slug)
    if not article:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Article not found")
    return article


@router.post("/articles", response_model=Article, status_code=status.HTTP_201_CREATED)
def create_article(
    payload: ArticleCreate,
    current_user: User = Depends(require_admin()),
    storage: Storage = Depends(get_storage),
) -> Article:
    if storage.get_article_by_slug(payload.slug):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Slug '{payload.slug}' is already used by another article",
        )
    return storage.create_article(payload)


# ==================== Testimonials ====================

@router.get("/testimonials", response_model=list[Testimonial])
def list_testimonials(storage: Storage = Depends(get_storage)) -> list[Testimonial]:
    return storage.get_all_testimonials()


@router.post("/testimonials", response_model=Testimonial, status_code=status.HTTP_201_CREATED)
def create_testimonial(
    payload: TestimonialCreate,
    current_user: User = Depends(require_admin()),
    storage: Storage = Depends(get_storage),
) -> Testimonial:
    return storage.create_testimonial(payload)


# ==================== Auth ====================

@router.post("/register", response_model=UserPublic, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, storage: Storage = Depends(get_storage)) -> User:
    """Student registration - the store does not enforce unique emails, so it is checked here"""
    if storage.get_user_by_email(payload.email):
        logger.warning(f"⚠️ Registration with existing email: {payload.email}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered",
        )

    user = storage.create_user(
        UserCreate(
            name=payload.name,
            email=payload.email,
            phone=payload.phone,
            password=get_password_hash(payload.password),
            role=UserRole.student,
        )
    )
    logger.info(f"👤 Student registered - id: {user.id}, email: {user.email}")
    return user


@router.post("/login", response_model=LoginResponse)
def login(
    payload: LoginRequest,
    storage: Storage = Depends(get_storage),
    settings: AppSettings = Depends(get_settings),
) -> LoginResponse:
    user = authenticate_user(storage, payload.email, payload.password)
    if not user:
        logger.warning(f"❌ Failed login for {payload.email}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )

    token = create_access_token(data={"sub": user.id, "role": user.role.value}, settings=settings)
    return LoginResponse(
        user_id=user.id,
        name=user.name,
        email=user.email,
        role=user.role,
        access_token=token,
        expires_in=settings.jwt_expiration_hours * 3600,
    )


@router.get("/me", response_model=UserPublic)
def read_current_user(current_user: User = Depends(get_current_user)) -> User:
    return current_user


# ==================== Enrollments ====================

@router.post("/enrollments", response_model=Enrollment, status_code=status.HTTP_201_CREATED)
def create_enrollment(payload: EnrollRequest, storage: Storage = Depends(get_storage)) -> Enrollment:
    if not storage.get_user(payload.user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    if not storage.get_course(payload.course_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Course not found")

    enrollment = storage.create_enrollment(
        EnrollmentCreate(
            user_id=payload.user_id,
            course_id=payload.course_id,
            payment_method=payload.payment_method.value,
        )
    )
    logger.info(
        f"📝 Enrollment created - user: {enrollment.user_id}, course: {enrollment.course_id}, "
        f"payment: {enrollment.payment_method}"
    )
    return enrollment


@router.get("/enrollments", response_model=list[Enrollment])
def list_enrollments(
    current_user: User = Depends(require_admin()),
    storage: Storage = Depends(get_storage),
) -> list[Enrollment]:
    return storage.get_all_enrollments()


@router.get("/enrollments/{user_id}", response_model=list[EnrollmentWithCourse])
def list_user_enrollments(user_id: str, storage: Storage = Depends(get_storage)) -> list[EnrollmentWithCourse]:
    """Portal dashboard - a student's enrollments with the course they point to"""
    rows = []
    for enrollment in storage.get_enrollments_by_user_id(user_id):
        course = storage.get_course(enrollment.course_id)
        rows.append(
            EnrollmentWithCourse(
                **enrollment.model_dump(),
                # course may have been deleted, foreign keys are not enforced
                course=CourseSummary.model_validate(course.model_dump()) if course else None,
            )
        )
    return rows


@router.patch("/enrollments/{enrollment_id}", response_model=Enrollment)
def update_enrollment_progress(
    enrollment_id: str,
    payload: ProgressUpdateRequest,
    current_user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
) -> Enrollment:
    enrollment = storage.get_enrollment(enrollment_id)
    if not enrollment:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Enrollment not found")

    if current_user.role != UserRole.admin and enrollment.user_id != current_user.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied. This enrollment belongs to another student.",
        )

    patch = EnrollmentUpdate(progress=payload.progress)
    if payload.progress == 100:
        patch = EnrollmentUpdate(progress=payload.progress, completed=True)

    updated = storage.update_enrollment(enrollment_id, patch)
    if not updated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Enrollment not found")
    logger.info(f"📈 Progress updated - enrollment: {enrollment_id}, progress: {updated.progress}%")
    return updated


# ==================== Contact ====================

@router.post("/contact", response_model=ContactSubmission, status_code=status.HTTP_201_CREATED)
def submit_contact(payload: ContactRequest, storage: Storage = Depends(get_storage)) -> ContactSubmission:
    submission = storage.create_contact_submission(ContactSubmissionCreate(**payload.model_dump()))
    logger.info(f"✉️ Contact submission received - id: {submission.id}, from: {submission.email}")
    return submission


@router.get("/contact", response_model=list[ContactSubmission])
def list_contact_submissions(
    current_user: User = Depends(require_admin()),
    storage: Storage = Depends(get_storage),
) -> list[ContactSubmission]:
    return storage.get_all_contact_submissions()
