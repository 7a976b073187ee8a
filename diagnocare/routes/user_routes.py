import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from diagnocare.auth.dependencies import AuthContext, require_admin, require_authenticated
from diagnocare.repositories.providers import get_user_repository
from diagnocare.repositories.users_repo import UserRepository
from diagnocare.routes.common import ensure_document_id, ensure_matched
from diagnocare.schemas import CreateUserRequest, InsertResult, RoleUpdateRequest, UpdateResult

router = APIRouter(tags=['users'])

logger = logging.getLogger(__name__)

USER_NOT_FOUND = 'User not found'


@router.post('/users', response_model=InsertResult, status_code=status.HTTP_201_CREATED)
def register_user(data: CreateUserRequest, users: UserRepository = Depends(get_user_repository)):
    result = users.register(data.model_dump())
    if result is None:
        return JSONResponse(status_code=status.HTTP_200_OK, content={'message': 'User already exists'})

    logger.info('Registered user %s', data.email)
    return result


@router.get('/user/{email}')
def get_user(
    email: str,
    _: AuthContext = Depends(require_authenticated),
    users: UserRepository = Depends(get_user_repository),
) -> dict[str, Any]:
    user = users.find_one({'email': email.strip().lower()})
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return user


@router.get('/users')
def list_users(
    _: AuthContext = Depends(require_admin),
    users: UserRepository = Depends(get_user_repository),
) -> list[dict[str, Any]]:
    return users.list_all()


@router.patch('/roleUpdate/{user_id}', response_model=UpdateResult)
def update_role(
    user_id: str,
    data: RoleUpdateRequest,
    context: AuthContext = Depends(require_admin),
    users: UserRepository = Depends(get_user_repository),
):
    result = users.update_fields(ensure_document_id(user_id), {'role': data.role})
    ensure_matched(result, USER_NOT_FOUND)
    logger.info('%s set role of user %s to %s', context.email, user_id, data.role)
    return result


@router.patch('/statusUpdate/{user_id}', response_model=UpdateResult)
def update_status(
    user_id: str,
    payload: dict[str, Any],
    _: AuthContext = Depends(require_admin),
    users: UserRepository = Depends(get_user_repository),
):
    # Email is the account key and role has its own admin route.
    fields = {key: value for key, value in payload.items() if key not in ('email', 'role')}
    result = users.update_fields(ensure_document_id(user_id), fields)
    return ensure_matched(result, USER_NOT_FOUND)
