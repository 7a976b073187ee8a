import os

os.environ['DATABASE_URL'] = 'sqlite://'
os.environ.setdefault('JWT_SECRET_KEY', 'test-secret')

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from diagnocare.auth.jwt_handler import create_access_token  # noqa: E402
from diagnocare.database import Base, get_db, init_schema  # noqa: E402
from diagnocare.main import app  # noqa: E402
from diagnocare.models.user import ROLE_ADMIN, ROLE_USER, User  # noqa: E402

ADMIN_EMAIL = 'admin@diagnocare.test'
USER_EMAIL = 'patient@diagnocare.test'


def bearer(email: str) -> dict[str, str]:
    return {'Authorization': f'Bearer {create_access_token({"email": email})}'}


def add_user(db, email: str, role: str = ROLE_USER, **profile) -> User:
    user = User.from_document({'email': email, 'role': role, **profile})
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def db_engine():
    engine = create_engine(
        'sqlite://',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    init_schema(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def testing_session_local(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture
def db(testing_session_local):
    session = testing_session_local()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(testing_session_local):
    def override_get_db():
        session = testing_session_local()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def admin_user(db) -> User:
    return add_user(db, ADMIN_EMAIL, role=ROLE_ADMIN)


@pytest.fixture
def patient_user(db) -> User:
    return add_user(db, USER_EMAIL, name='Pat')


@pytest.fixture
def admin_headers(admin_user) -> dict[str, str]:
    return bearer(admin_user.email)


@pytest.fixture
def user_headers(patient_user) -> dict[str, str]:
    return bearer(patient_user.email)


@pytest.fixture
def make_headers():
    return bearer


@pytest.fixture
def make_user(db):
    def _make_user(email: str, role: str = ROLE_USER, **profile) -> User:
        return add_user(db, email, role=role, **profile)

    return _make_user
