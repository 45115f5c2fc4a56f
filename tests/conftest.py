"""
Shared pytest fixtures for the Workbook Management Service test suite.

Provides:
    - app: Flask application (session-scoped)
    - _setup_db: Database table creation/teardown (session-scoped)
    - session: Per-test DB cleanup w/ rollback + recreate (autouse)
    - client: Flask test client (function-scoped)
    - company / other_company: Pre-created Company rows
    - user / other_user / admin: Identity objects for service-level calls
    - user_headers / other_headers / admin_headers: gateway headers for API calls
"""

import pytest

from workbook_app import create_app
from workbook_app.middleware.identity_context import Identity
from workbook_app.models import db as _db
from workbook_app.models.company import Company


# ── App & DB fixtures ────────────────────────────────────────────────────


@pytest.fixture(scope="session")
def app():
    """Create the Flask application once per test session."""
    return create_app("testing")


@pytest.fixture(scope="session")
def _setup_db(app):
    """Create all tables at session start, drop at end."""
    with app.app_context():
        _db.create_all()
    yield
    with app.app_context():
        _db.drop_all()


@pytest.fixture(autouse=True)
def session(app, _setup_db):
    """Per-test: open app context, rollback after test, recreate tables."""
    with app.app_context():
        yield
        _db.session.rollback()
        _db.drop_all()
        _db.create_all()


@pytest.fixture()
def client(app):
    """Flask test client."""
    return app.test_client()


# ── Companies & identities ───────────────────────────────────────────────


def make_company(name):
    c = Company(name=name, contact_email=f"info@{name.split()[0].lower()}.example")
    _db.session.add(c)
    _db.session.commit()
    return c


@pytest.fixture()
def company():
    return make_company("Acme Training Academy")


@pytest.fixture()
def other_company():
    return make_company("Beta Skills College")


@pytest.fixture()
def user(company):
    return Identity(user_id="user-1", company_id=company.id)


@pytest.fixture()
def other_user(other_company):
    return Identity(user_id="user-2", company_id=other_company.id)


@pytest.fixture()
def admin():
    return Identity(user_id="admin-1", is_privileged=True)


@pytest.fixture()
def user_headers(company):
    return {"X-User-Id": "user-1", "X-Company-Id": company.id}


@pytest.fixture()
def other_headers(other_company):
    return {"X-User-Id": "user-2", "X-Company-Id": other_company.id}


@pytest.fixture()
def admin_headers():
    return {"X-User-Id": "admin-1", "X-User-Role": "SuperAdmin"}
