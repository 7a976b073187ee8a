from fastapi import APIRouter

from diagnocare.auth import jwt_handler
from diagnocare.schemas import TokenRequest, TokenResponse

router = APIRouter(tags=['auth'])


@router.post('/jwt', response_model=TokenResponse)
def issue_token(data: TokenRequest):
    token = jwt_handler.create_access_token(data.model_dump())
    return TokenResponse(token=token)
