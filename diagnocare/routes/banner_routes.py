from typing import Any

from fastapi import APIRouter, Depends, status

from diagnocare.auth.dependencies import AuthContext, require_admin
from diagnocare.repositories.content_repo import BannerRepository
from diagnocare.repositories.providers import get_banner_repository
from diagnocare.routes.common import ensure_document_id, ensure_matched
from diagnocare.schemas import InsertResult, UpdateResult

router = APIRouter(tags=['banners'])


@router.get('/banner')
def list_banners(banners: BannerRepository = Depends(get_banner_repository)) -> list[dict[str, Any]]:
    return banners.list_all()


@router.post('/banner', response_model=InsertResult, status_code=status.HTTP_201_CREATED)
def create_banner(
    payload: dict[str, Any],
    _: AuthContext = Depends(require_admin),
    banners: BannerRepository = Depends(get_banner_repository),
):
    return banners.insert(payload)


@router.patch('/bannerUpdate/{banner_id}', response_model=UpdateResult)
def update_banner(
    banner_id: str,
    payload: dict[str, Any],
    _: AuthContext = Depends(require_admin),
    banners: BannerRepository = Depends(get_banner_repository),
):
    result = banners.update_fields(ensure_document_id(banner_id), payload)
    return ensure_matched(result, 'Banner not found')
