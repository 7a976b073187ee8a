import pytest
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials

from diagnocare.auth import jwt_handler
from diagnocare.auth.dependencies import AuthContext, require_admin, require_authenticated
from diagnocare.models.user import ROLE_ADMIN
from diagnocare.repositories.users_repo import UserRepository


def _credentials(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme='Bearer', credentials=token)


def test_require_authenticated_rejects_missing_credentials() -> None:
    with pytest.raises(HTTPException) as exception_info:
        require_authenticated(credentials=None)

    assert exception_info.value.status_code == 401
    assert exception_info.value.detail == 'Unauthorized access'


def test_require_authenticated_rejects_invalid_token() -> None:
    with pytest.raises(HTTPException) as exception_info:
        require_authenticated(credentials=_credentials('invalid'))

    assert exception_info.value.status_code == 401


def test_require_authenticated_rejects_token_without_email() -> None:
    token = jwt_handler.create_access_token({'name': 'No Email'})

    with pytest.raises(HTTPException) as exception_info:
        require_authenticated(credentials=_credentials(token))

    assert exception_info.value.status_code == 401


def test_require_authenticated_returns_context_with_claims() -> None:
    token = jwt_handler.create_access_token({'email': ' Patient@Example.com ', 'name': 'Pat'})

    context = require_authenticated(credentials=_credentials(token))

    assert context.email == 'patient@example.com'
    assert context.claims['name'] == 'Pat'
    assert context.user is None


def test_require_admin_rejects_unknown_user(db) -> None:
    context = AuthContext(email='ghost@example.com', claims={})

    with pytest.raises(HTTPException) as exception_info:
        require_admin(context=context, users=UserRepository(db))

    assert exception_info.value.status_code == 401


def test_require_admin_rejects_non_admin(db, make_user) -> None:
    make_user('patient@example.com')
    context = AuthContext(email='patient@example.com', claims={})

    with pytest.raises(HTTPException) as exception_info:
        require_admin(context=context, users=UserRepository(db))

    assert exception_info.value.status_code == 401


def test_require_admin_accepts_admin_and_attaches_user(db, make_user) -> None:
    admin = make_user('boss@example.com', role=ROLE_ADMIN)
    context = AuthContext(email='boss@example.com', claims={'email': 'boss@example.com'})

    result = require_admin(context=context, users=UserRepository(db))

    assert result.user.id == admin.id
    assert result.user.is_admin


def test_admin_route_rejects_authenticated_non_admin(client, user_headers) -> None:
    response = client.get('/users', headers=user_headers)

    assert response.status_code == 401
    assert response.json() == {'detail': 'Unauthorized access'}


def test_protected_route_rejects_request_without_token(client) -> None:
    response = client.get('/recommend')

    assert response.status_code == 401


def test_protected_route_rejects_malformed_authorization_header(client) -> None:
    response = client.get('/recommend', headers={'Authorization': 'Token abc'})

    assert response.status_code == 401
