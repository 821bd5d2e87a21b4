from core.seed import DEMO_USER_EMAIL, DEMO_USER_PASSWORD

NEW_COURSE = {
    "title": "Canva for Small Business",
    "description": "Design social media graphics that sell.",
    "category": "Design",
    "price_usd": "29.00",
    "price_zwl": "9500.00",
    "duration": "3 weeks",
    "level": "Beginner",
    "syllabus": "Week 1: Basics\nWeek 2: Brand kits\nWeek 3: Campaigns",
    "learning_outcomes": "Design posts\nBuild a brand kit",
    "instructor_id": "instructor-x",
}


def first_course(client) -> dict:
    return client.get("/api/courses").json()[0]


# ==================== Public catalog ====================

def test_root_and_health(client):
    assert client.get("/").json()["health"] == "/api/health"
    assert client.get("/api/health").json()["status"] == "ok"


def test_list_courses(client):
    response = client.get("/api/courses")

    assert response.status_code == 200
    courses = response.json()
    assert len(courses) == 10
    assert courses[0]["title"] == "Digital Marketing Basics"
    assert courses[0]["price_usd"] == "49.00"


def test_filter_courses(client):
    coding = client.get("/api/courses", params={"category": "Coding"}).json()
    featured = client.get("/api/courses", params={"featured": "true"}).json()

    assert {course["title"] for course in coding} == {"No-Code Development", "Web Development Essentials"}
    assert len(featured) == 6
    assert all(course["featured"] for course in featured)


def test_get_course(client):
    course = first_course(client)

    assert client.get(f"/api/courses/{course['id']}").json() == course
    assert client.get("/api/courses/unknown").status_code == 404


def test_get_instructor_of_course(client):
    course = first_course(client)

    response = client.get(f"/api/instructors/{course['instructor_id']}")

    assert response.status_code == 200
    assert response.json()["name"] == "Dr. Sarah Moyo"
    assert client.get("/api/instructors/unknown").status_code == 404
    assert len(client.get("/api/instructors").json()) == 2


def test_reviews_by_course(client):
    course = first_course(client)
    review = {"course_id": course["id"], "user_id": "someone", "rating": 5, "comment": "Worth it"}

    created = client.post("/api/reviews", json=review)
    assert created.status_code == 201

    listed = client.get("/api/reviews", params={"courseId": course["id"]}).json()
    assert [r["id"] for r in listed] == [created.json()["id"]]
    assert client.get("/api/reviews", params={"courseId": "other"}).json() == []
    assert len(client.get("/api/reviews").json()) == 1


def test_review_validation(client):
    course = first_course(client)

    bad_rating = {"course_id": course["id"], "user_id": "u", "rating": 6, "comment": "!"}
    unknown_course = {"course_id": "nope", "user_id": "u", "rating": 3, "comment": "ok"}

    assert client.post("/api/reviews", json=bad_rating).status_code == 422
    assert client.post("/api/reviews", json=unknown_course).status_code == 404


def test_articles(client):
    articles = client.get("/api/articles").json()

    assert len(articles) == 5
    published = [article["published_at"] for article in articles]
    assert published == sorted(published, reverse=True)

    seo = client.get("/api/articles", params={"category": "SEO"}).json()
    assert [article["slug"] for article in seo] == ["seo-strategies-zimbabwean-businesses"]

    article = client.get("/api/articles/remote-work-guide-zimbabweans").json()
    assert article["author"] == "Chipo Banda"
    assert client.get("/api/articles/missing").status_code == 404


def test_testimonials(client):
    testimonials = client.get("/api/testimonials").json()

    assert len(testimonials) == 10
    assert all(1 <= t["rating"] <= 5 for t in testimonials)


# ==================== Enrollment form ====================

def test_register_then_enroll(client):
    course = first_course(client)
    registration = {
        "name": "Farai Gumbo",
        "email": "farai@example.com",
        "phone": "+263772000000",
        "password": "secret-pass",
        "role": "student",
    }

    user = client.post("/api/register", json=registration)
    assert user.status_code == 201
    body = user.json()
    assert body["role"] == "student"
    assert "password" not in body

    enrollment = client.post(
        "/api/enrollments",
        json={"user_id": body["id"], "course_id": course["id"], "payment_method": "Bank Transfer"},
    )
    assert enrollment.status_code == 201
    assert enrollment.json()["progress"] == 0
    assert enrollment.json()["completed"] is False
    assert enrollment.json()["payment_method"] == "Bank Transfer"


def test_register_duplicate_email(client):
    response = client.post(
        "/api/register",
        json={"name": "Copy", "email": DEMO_USER_EMAIL, "password": "whatever1"},
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Email already registered"


def test_register_validation(client):
    short_password = {"name": "A", "email": "a@example.com", "password": "123"}
    bad_email = {"name": "A", "email": "not-an-email", "password": "123456"}
    admin_role = {"name": "A", "email": "a@example.com", "password": "123456", "role": "admin"}

    assert client.post("/api/register", json=short_password).status_code == 422
    assert client.post("/api/register", json=bad_email).status_code == 422
    assert client.post("/api/register", json=admin_role).status_code == 422


def test_enroll_unknown_user_or_course(client, storage):
    course = first_course(client)
    demo = storage.get_user_by_email(DEMO_USER_EMAIL)

    unknown_user = {"user_id": "ghost", "course_id": course["id"], "payment_method": "Ecocash"}
    unknown_course = {"user_id": demo.id, "course_id": "ghost", "payment_method": "Ecocash"}
    bad_method = {"user_id": demo.id, "course_id": course["id"], "payment_method": "Cash"}

    assert client.post("/api/enrollments", json=unknown_user).status_code == 404
    assert client.post("/api/enrollments", json=unknown_course).status_code == 404
    assert client.post("/api/enrollments", json=bad_method).status_code == 422


# ==================== Portal ====================

def test_login_and_dashboard(client, demo_login):
    assert demo_login["email"] == DEMO_USER_EMAIL
    assert demo_login["role"] == "student"
    assert demo_login["token_type"] == "bearer"

    rows = client.get(f"/api/enrollments/{demo_login['user_id']}").json()
    assert len(rows) == 1
    assert rows[0]["user_id"] == demo_login["user_id"]
    assert rows[0]["course"]["title"] == "Digital Marketing Basics"


def test_login_wrong_password(client):
    wrong = client.post("/api/login", json={"email": DEMO_USER_EMAIL, "password": "password124"})
    unknown = client.post("/api/login", json={"email": "nobody@example.com", "password": DEMO_USER_PASSWORD})

    assert wrong.status_code == 401
    assert unknown.status_code == 401
    assert wrong.json()["detail"] == unknown.json()["detail"]


def test_registered_user_can_log_in(client, login_as):
    client.post("/api/register", json={"name": "Tari", "email": "tari@example.com", "password": "tari-pass"})

    assert login_as("tari@example.com", "tari-pass")["name"] == "Tari"


def test_me(client, demo_headers):
    response = client.get("/api/me", headers=demo_headers)

    assert response.status_code == 200
    assert response.json()["email"] == DEMO_USER_EMAIL
    assert "password" not in response.json()
    assert client.get("/api/me").status_code == 401
    assert client.get("/api/me", headers={"Authorization": "Bearer garbage"}).status_code == 401


def test_dashboard_for_unknown_user_is_empty(client):
    assert client.get("/api/enrollments/nobody").json() == []


def test_dashboard_survives_deleted_course(client, storage, demo_login):
    [enrollment] = storage.get_enrollments_by_user_id(demo_login["user_id"])
    storage.delete_course(enrollment.course_id)

    rows = client.get(f"/api/enrollments/{demo_login['user_id']}").json()
    assert rows[0]["course"] is None


def test_update_own_progress(client, demo_login, demo_headers):
    [row] = client.get(f"/api/enrollments/{demo_login['user_id']}").json()

    halfway = client.patch(f"/api/enrollments/{row['id']}", json={"progress": 50}, headers=demo_headers)
    assert halfway.status_code == 200
    assert halfway.json()["progress"] == 50
    assert halfway.json()["completed"] is False

    done = client.patch(f"/api/enrollments/{row['id']}", json={"progress": 100}, headers=demo_headers)
    assert done.json()["completed"] is True
    assert done.json()["certificate_issued"] is False


def test_progress_update_rules(client, demo_login, demo_headers, login_as):
    [row] = client.get(f"/api/enrollments/{demo_login['user_id']}").json()
    url = f"/api/enrollments/{row['id']}"

    assert client.patch(url, json={"progress": 10}).status_code == 401
    assert client.patch(url, json={"progress": 101}, headers=demo_headers).status_code == 422
    assert client.patch("/api/enrollments/missing", json={"progress": 10}, headers=demo_headers).status_code == 404

    client.post("/api/register", json={"name": "Other", "email": "other@example.com", "password": "other-pass"})
    other = login_as("other@example.com", "other-pass")
    other_headers = {"Authorization": f"Bearer {other['access_token']}"}
    assert client.patch(url, json={"progress": 10}, headers=other_headers).status_code == 403


# ==================== Contact ====================

def test_contact_form(client, storage):
    response = client.post(
        "/api/contact",
        json={"name": "Nyasha", "email": "nyasha@example.com", "message": "Do you offer installments?"},
    )

    assert response.status_code == 201
    assert response.json()["submitted_at"]
    assert len(storage.get_all_contact_submissions()) == 1
    assert client.post("/api/contact", json={"name": "N", "email": "bad", "message": "x"}).status_code == 422


# ==================== Admin ====================

def test_admin_course_lifecycle(client, admin_headers):
    created = client.post("/api/courses", json=NEW_COURSE, headers=admin_headers)
    assert created.status_code == 201
    course_id = created.json()["id"]
    assert created.json()["featured"] is False

    updated = client.patch(f"/api/courses/{course_id}", json={"price_usd": "35.00"}, headers=admin_headers)
    assert updated.status_code == 200
    assert updated.json()["price_usd"] == "35.00"
    assert updated.json()["title"] == NEW_COURSE["title"]

    assert client.delete(f"/api/courses/{course_id}", headers=admin_headers).status_code == 200
    assert client.get(f"/api/courses/{course_id}").status_code == 404
    assert client.delete(f"/api/courses/{course_id}", headers=admin_headers).status_code == 404
    assert client.patch(f"/api/courses/{course_id}", json={"title": "x"}, headers=admin_headers).status_code == 404


def test_admin_endpoints_reject_students(client, demo_headers):
    course = first_course(client)

    assert client.post("/api/courses", json=NEW_COURSE, headers=demo_headers).status_code == 403
    assert client.delete(f"/api/courses/{course['id']}", headers=demo_headers).status_code == 403
    assert client.get("/api/enrollments", headers=demo_headers).status_code == 403
    assert client.get("/api/contact", headers=demo_headers).status_code == 403
    assert client.post("/api/courses", json=NEW_COURSE).status_code == 401


def test_admin_content(client, admin_headers):
    article = {
        "title": "Pricing your first freelance gig",
        "slug": "pricing-first-freelance-gig",
        "content": "...",
        "excerpt": "How to quote.",
        "category": "Career Advice",
        "author": "Chipo Banda",
    }
    assert client.post("/api/articles", json=article, headers=admin_headers).status_code == 201
    assert client.post("/api/articles", json=article, headers=admin_headers).status_code == 400
    assert client.get("/api/articles").json()[0]["slug"] == article["slug"]

    instructor = {"name": "Rumbi", "title": "Designer", "bio": "...", "expertise": "Design"}
    assert client.post("/api/instructors", json=instructor, headers=admin_headers).status_code == 201

    testimonial = {"name": "Rumbi", "text": "Great", "rating": 5, "course_completed": "SEO Mastery"}
    assert client.post("/api/testimonials", json=testimonial, headers=admin_headers).status_code == 201
    assert len(client.get("/api/testimonials").json()) == 11

    assert len(client.get("/api/enrollments", headers=admin_headers).json()) == 1
    assert client.get("/api/contact", headers=admin_headers).json() == []


def test_course_patch_with_empty_body_changes_nothing(client, admin_headers):
    course = first_course(client)

    response = client.patch(f"/api/courses/{course['id']}", json={}, headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == course


def test_course_patch_rejects_null_fields(client, admin_headers):
    course = first_course(client)
    url = f"/api/courses/{course['id']}"

    assert client.patch(url, json={"title": None}, headers=admin_headers).status_code == 422
    assert client.patch(url, json={"featured": None}, headers=admin_headers).status_code == 422
    assert client.get(url).json() == course

    cleared = client.patch(url, json={"thumbnail": None}, headers=admin_headers)
    assert cleared.status_code == 200
    assert cleared.json()["thumbnail"] is None
    assert cleared.json()["title"] == course["title"]
