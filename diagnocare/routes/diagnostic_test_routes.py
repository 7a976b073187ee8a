from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from diagnocare.auth.dependencies import AuthContext, require_admin, require_authenticated
from diagnocare.repositories.content_repo import RecommendationRepository
from diagnocare.repositories.diagnostic_tests_repo import DiagnosticTestRepository
from diagnocare.repositories.providers import get_recommendation_repository, get_test_repository
from diagnocare.routes.common import ensure_document_id, ensure_matched
from diagnocare.schemas import DeleteResult, InsertResult, SlotUpdateRequest, UpdateResult

router = APIRouter(tags=['tests'])


@router.get('/tests')
def list_tests(tests: DiagnosticTestRepository = Depends(get_test_repository)) -> list[dict[str, Any]]:
    return tests.list_all()


@router.post('/tests', response_model=InsertResult, status_code=status.HTTP_201_CREATED)
def create_test(
    payload: dict[str, Any],
    _: AuthContext = Depends(require_admin),
    tests: DiagnosticTestRepository = Depends(get_test_repository),
):
    return tests.insert(payload)


@router.delete('/test/{test_id}', response_model=DeleteResult)
def delete_test(
    test_id: str,
    _: AuthContext = Depends(require_admin),
    tests: DiagnosticTestRepository = Depends(get_test_repository),
):
    return tests.delete_one(ensure_document_id(test_id))


@router.patch('/update-test/{test_id}', response_model=UpdateResult)
def update_test(
    test_id: str,
    payload: dict[str, Any],
    _: AuthContext = Depends(require_admin),
    tests: DiagnosticTestRepository = Depends(get_test_repository),
):
    result = tests.update_fields(ensure_document_id(test_id), payload)
    return ensure_matched(result, 'Update not found')


@router.get('/featured-tests')
def list_featured_tests(
    tests: DiagnosticTestRepository = Depends(get_test_repository),
) -> list[dict[str, Any]]:
    return tests.featured()


@router.get('/recommend')
def list_recommendations(
    _: AuthContext = Depends(require_authenticated),
    recommendations: RecommendationRepository = Depends(get_recommendation_repository),
) -> list[dict[str, Any]]:
    return recommendations.list_all()


@router.get('/testDetails/{test_id}')
def get_test_details(
    test_id: str,
    _: AuthContext = Depends(require_authenticated),
    tests: DiagnosticTestRepository = Depends(get_test_repository),
) -> dict[str, Any]:
    test = tests.find_one({'_id': ensure_document_id(test_id)})
    if test is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Test not found')
    return test


@router.patch('/update-slots/{test_id}', response_model=UpdateResult)
def update_slots(
    test_id: str,
    data: SlotUpdateRequest,
    _: AuthContext = Depends(require_authenticated),
    tests: DiagnosticTestRepository = Depends(get_test_repository),
):
    """Set a test's remaining slots and count one booking.

    For bookings stored without ``testId``; ``POST /booking`` with ``testId``
    already counts the booking.
    """
    result = tests.apply_booking(ensure_document_id(test_id), data.slots)
    return ensure_matched(result, 'Booking not found')
