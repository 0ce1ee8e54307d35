import logging

from app.core.security import create_access_token
from app.models import JobSeekerProfile, RecruiterProfile, User


def _register(client, email="new@example.com", password="pass1234", user_type_id=2):
    return client.post(
        "/api/v1/users/register",
        json={"email": email, "password": password, "user_type_id": user_type_id},
    )


def _login(client, email, password):
    resp = client.post(
        "/api/v1/users/login",
        data={"username": email, "password": password},
    )
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}


def test_health(test_app_client):
    client, _ = test_app_client
    assert client.get("/health").json() == {"status": "healthy"}


def test_list_user_types(test_app_client):
    client, _ = test_app_client

    resp = client.get("/api/v1/users/types")
    assert resp.status_code == 200
    assert resp.json() == [
        {"user_type_id": 1, "user_type_name": "Recruiter"},
        {"user_type_id": 2, "user_type_name": "Job Seeker"},
    ]


def test_register_creates_user_and_profile(test_app_client):
    client, session_factory = test_app_client

    resp = _register(client, email="Recruiter@Example.com", user_type_id=1)
    assert resp.status_code == 201
    data = resp.json()
    assert data["email"] == "recruiter@example.com"
    assert data["is_active"] is True
    assert "password" not in data

    session = session_factory()
    try:
        user = session.query(User).filter(User.email == "recruiter@example.com").one()
        assert user.password != "pass1234"
        assert session.get(RecruiterProfile, user.user_id) is not None
        assert session.get(JobSeekerProfile, user.user_id) is None
    finally:
        session.close()


def test_register_rejects_duplicate_email(test_app_client):
    client, _ = test_app_client

    assert _register(client).status_code == 201
    resp = _register(client)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Email already registered"


def test_register_rejects_unknown_user_type(test_app_client):
    client, _ = test_app_client

    resp = _register(client, user_type_id=99)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Unknown user type"


def test_register_rejects_bad_email(test_app_client):
    client, _ = test_app_client
    assert _register(client, email="not-an-email").status_code == 422


def test_login_rejects_wrong_password(test_app_client):
    client, _ = test_app_client
    _register(client, email="a@example.com", password="right-one")

    resp = client.post(
        "/api/v1/users/login",
        data={"username": "a@example.com", "password": "wrong-one"},
    )
    assert resp.status_code == 401


def test_me_requires_authentication(test_app_client):
    client, _ = test_app_client

    assert client.get("/api/v1/users/me").status_code == 401
    assert client.get("/api/v1/users/me/profile").status_code == 401


def test_me_rejects_invalid_token(test_app_client):
    client, _ = test_app_client

    resp = client.get("/api/v1/users/me", headers={"Authorization": "Bearer garbage"})
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Could not validate credentials"


def test_me_returns_current_user(test_app_client):
    client, _ = test_app_client
    _register(client, email="me@example.com", password="pw-me-123")
    headers = _login(client, "me@example.com", "pw-me-123")

    resp = client.get("/api/v1/users/me", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["email"] == "me@example.com"


def test_recruiter_profile_endpoint(test_app_client):
    client, _ = test_app_client
    _register(client, email="hr@example.com", password="pw-hr-123", user_type_id=1)
    headers = _login(client, "hr@example.com", "pw-hr-123")

    resp = client.get("/api/v1/users/me/profile", headers=headers)
    assert resp.status_code == 200
    data = resp.json()
    assert data["kind"] == "recruiter"
    assert "company" in data["profile"]


def test_job_seeker_profile_endpoint(test_app_client):
    client, _ = test_app_client
    _register(client, email="js@example.com", password="pw-js-123", user_type_id=2)
    headers = _login(client, "js@example.com", "pw-js-123")

    resp = client.get("/api/v1/users/me/profile", headers=headers)
    assert resp.status_code == 200
    data = resp.json()
    assert data["kind"] == "job_seeker"
    assert "work_authorization" in data["profile"]


def test_token_for_missing_user_is_not_found(test_app_client):
    client, _ = test_app_client
    token = create_access_token({"sub": "ghost@example.com", "roles": ["Recruiter"]})

    resp = client.get("/api/v1/users/me", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Could not find user ghost@example.com"


def test_registration_date_is_same_utc_value_on_register_and_me(test_app_client):
    client, _ = test_app_client

    registered = _register(client, email="tz@example.com", password="pw-tz-123").json()
    headers = _login(client, "tz@example.com", "pw-tz-123")
    me = client.get("/api/v1/users/me", headers=headers).json()

    assert me["registration_date"] == registered["registration_date"]
    assert me["registration_date"].endswith("Z")


def test_missing_user_is_logged_once(test_app_client, caplog):
    client, _ = test_app_client
    token = create_access_token({"sub": "ghost@example.com", "roles": []})

    with caplog.at_level(logging.WARNING):
        client.get("/api/v1/users/me", headers={"Authorization": f"Bearer {token}"})

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "Could not find user ghost@example.com" in warnings[0].getMessage()
