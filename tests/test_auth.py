"""
Tests for registration, login and bearer-token authentication.

This test suite covers:
- POST /auth/register (validation ranges, duplicate email, password hashing)
- POST /auth/login (valid, wrong password, unknown email, inactive account)
- GET /auth/me and token failures (missing, malformed, expired, deleted user)
"""

from datetime import timedelta
import uuid

import bcrypt

from test_fixtures import (
    API,
    DEFAULT_PASSWORD,
    assert_error,
    auth_headers,
    client,
    db_session,
    make_register_payload,
    register_user,
)
from app.security import create_access_token, hash_password, verify_password
from repositories import UserRepository


# =============================================================================
# REGISTRATION
# =============================================================================


def test_register_returns_token_and_user():
    """
    Verifies:
    - 201 with bearer token and user body
    - email lowercased, lists normalized, password hash never returned
    """
    payload = make_register_payload("sarah", email="Sarah.Test@Example.COM")
    r = client.post(f"{API}/auth/register", json=payload)

    assert r.status_code == 201, r.text
    body = r.json()
    assert body["token_type"] == "bearer"
    assert body["access_token"]
    user = body["user"]
    assert user["email"] == "sarah.test@example.com"
    assert user["allergies"] == ["peanuts", "shellfish"]
    assert user["is_active"] is True
    assert user["email_verified"] is False
    assert "password_hash" not in user
    assert "password" not in user


def test_register_stores_bcrypt_hash(db_session):
    _, body = register_user("omar")
    user = UserRepository(db_session).get_by_email(body["user"]["email"])

    assert user.password_hash != DEFAULT_PASSWORD
    assert user.password_hash.startswith("$2")
    assert bcrypt.checkpw(DEFAULT_PASSWORD.encode(), user.password_hash.encode())


def test_register_duplicate_email_conflict():
    _, body = register_user("sarah")
    email = body["user"]["email"]

    r = client.post(f"{API}/auth/register", json=make_register_payload("omar", email=email))
    assert_error(r, 409, "EMAIL_TAKEN")


def test_register_validation_ranges():
    """Out-of-range profile values are rejected with 400 VALIDATION_ERROR"""
    invalid_overrides = [
        {"password": "short"},
        {"password": "x" * 51},
        {"name": "A"},
        {"age": 12},
        {"age": 121},
        {"height": 99},
        {"height": 251},
        {"weight": 19},
        {"weight": 301},
        {"target_weight": 10},
        {"gender": "unknown"},
        {"activity_level": "couch"},
        {"goal": "bulk"},
        {"email": "not-an-email"},
    ]
    for override in invalid_overrides:
        r = client.post(f"{API}/auth/register", json=make_register_payload("sarah", **override))
        error = assert_error(r, 400, "VALIDATION_ERROR")
        assert error["details"], override


def test_register_name_length_checked_after_trimming():
    r = client.post(f"{API}/auth/register", json=make_register_payload("sarah", name="  a  "))
    assert_error(r, 400, "VALIDATION_ERROR")

    r = client.post(f"{API}/auth/register", json=make_register_payload("sarah", name="  Sarah Ali "))
    assert r.status_code == 201, r.text
    assert r.json()["user"]["name"] == "Sarah Ali"


def test_register_rejects_unknown_fields():
    payload = make_register_payload("sarah", is_admin=True)
    r = client.post(f"{API}/auth/register", json=payload)
    assert_error(r, 400, "VALIDATION_ERROR")


# =============================================================================
# LOGIN
# =============================================================================


def test_login_success():
    _, body = register_user("sarah")
    r = client.post(
        f"{API}/auth/login",
        json={"email": body["user"]["email"].upper(), "password": DEFAULT_PASSWORD},
    )
    assert r.status_code == 200, r.text
    assert r.json()["user"]["id"] == body["user"]["id"]
    assert r.json()["access_token"]


def test_login_wrong_password_and_unknown_email_look_the_same():
    _, body = register_user("sarah")

    r1 = client.post(
        f"{API}/auth/login",
        json={"email": body["user"]["email"], "password": "WrongPassword1"},
    )
    r2 = client.post(
        f"{API}/auth/login",
        json={"email": "nobody@example.com", "password": DEFAULT_PASSWORD},
    )
    e1 = assert_error(r1, 401, "INVALID_CREDENTIALS")
    e2 = assert_error(r2, 401, "INVALID_CREDENTIALS")
    assert e1["message"] == e2["message"] == "Invalid credentials"


def test_login_inactive_account(db_session):
    _, body = register_user("omar")
    repo = UserRepository(db_session)
    user = repo.get_by_email(body["user"]["email"])
    repo.update_user(user, is_active=False)

    r = client.post(
        f"{API}/auth/login",
        json={"email": body["user"]["email"], "password": DEFAULT_PASSWORD},
    )
    assert_error(r, 401, "ACCOUNT_INACTIVE")


# =============================================================================
# TOKENS
# =============================================================================


def test_me_returns_current_user():
    headers, body = register_user("sarah")
    r = client.get(f"{API}/auth/me", headers=headers)
    assert r.status_code == 200
    assert r.json()["email"] == body["user"]["email"]


def test_me_without_token():
    assert_error(client.get(f"{API}/auth/me"), 401, "MISSING_TOKEN")


def test_me_with_garbage_token():
    r = client.get(f"{API}/auth/me", headers=auth_headers("not.a.jwt"))
    assert_error(r, 401, "INVALID_TOKEN")


def test_me_with_expired_token():
    _, body = register_user("sarah")
    token = create_access_token(
        body["user"]["id"], body["user"]["email"], expires_delta=timedelta(minutes=-5)
    )
    r = client.get(f"{API}/auth/me", headers=auth_headers(token))
    assert_error(r, 401, "TOKEN_EXPIRED")


def test_token_for_unknown_user():
    token = create_access_token(uuid.uuid4(), "ghost@example.com")
    r = client.get(f"{API}/auth/me", headers=auth_headers(token))
    assert_error(r, 401, "USER_NOT_FOUND")


def test_token_signed_with_other_secret_is_rejected():
    import jwt

    forged = jwt.encode({"sub": str(uuid.uuid4()), "exp": 9999999999}, "other", algorithm="HS256")
    r = client.get(f"{API}/auth/me", headers=auth_headers(forged))
    assert_error(r, 401, "INVALID_TOKEN")


def test_password_helpers_roundtrip():
    hashed = hash_password("correct horse battery", rounds=4)
    assert verify_password("correct horse battery", hashed)
    assert not verify_password("wrong", hashed)
    assert not verify_password("anything", "not-a-bcrypt-hash")
    assert not verify_password("anything", "")
