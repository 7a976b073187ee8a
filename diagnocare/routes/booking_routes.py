import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from diagnocare.auth.dependencies import AuthContext, require_admin, require_authenticated
from diagnocare.core.exceptions import NotFoundError, SlotsUnavailableError
from diagnocare.repositories.bookings_repo import BookingRepository
from diagnocare.repositories.providers import get_booking_repository, get_user_repository
from diagnocare.repositories.users_repo import UserRepository
from diagnocare.routes.common import ensure_document_id
from diagnocare.schemas import DeleteResult, InsertResult

router = APIRouter(tags=['bookings'])

logger = logging.getLogger(__name__)


@router.post('/booking', response_model=InsertResult, status_code=status.HTTP_201_CREATED)
def create_booking(
    payload: dict[str, Any],
    context: AuthContext = Depends(require_authenticated),
    bookings: BookingRepository = Depends(get_booking_repository),
):
    """Record a booking for the caller.

    With a ``testId`` the booking and the test's slot and ``bookings`` counter
    update commit together, so clients on this path must not also call
    ``PATCH /update-slots/{id}``; doing so counts the booking twice. Without
    ``testId`` only the booking is stored and the client updates slots itself.
    """
    document = dict(payload)
    document['email'] = str(document.get('email') or context.email).strip().lower()

    test_id = document.pop('testId', None)
    if test_id is None:
        return bookings.insert(document)

    slots = document.pop('slots', None)
    if slots is not None and (not isinstance(slots, int) or isinstance(slots, bool) or slots < 0):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail='Slots must be a non-negative integer.',
        )

    try:
        return bookings.create_with_slot_update(document, ensure_document_id(str(test_id)), slots)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Test not found') from exc
    except SlotsUnavailableError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail='No slots available for this test.',
        ) from exc


@router.get('/booking/{email}')
def list_bookings_for_email(
    email: str,
    _: AuthContext = Depends(require_authenticated),
    bookings: BookingRepository = Depends(get_booking_repository),
) -> list[dict[str, Any]]:
    return bookings.find_many({'email': email.strip().lower()})


@router.get('/reservation')
def list_reservations(
    _: AuthContext = Depends(require_admin),
    bookings: BookingRepository = Depends(get_booking_repository),
) -> list[dict[str, Any]]:
    return bookings.list_all()


@router.get('/bookings/test/{booking_id}')
def list_bookings_for_test(
    booking_id: str,
    _: AuthContext = Depends(require_admin),
    bookings: BookingRepository = Depends(get_booking_repository),
) -> list[dict[str, Any]]:
    return bookings.find_many({'bookingId': booking_id})


@router.delete('/booking-test/{booking_id}', response_model=DeleteResult)
def cancel_my_booking(
    booking_id: str,
    context: AuthContext = Depends(require_authenticated),
    bookings: BookingRepository = Depends(get_booking_repository),
    users: UserRepository = Depends(get_user_repository),
):
    booking_id = ensure_document_id(booking_id)
    booking = bookings.get(booking_id)

    if booking is not None and (booking.email or '').lower() != context.email:
        user = users.get_by_email(context.email)
        if user is None or not user.is_admin:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail='Only the user who booked this test can cancel it.',
            )

    result = bookings.delete_one(booking_id)
    logger.info('%s cancelled booking %s (deleted %s)', context.email, booking_id, result.deleted_count)
    return result


@router.delete('/booking-reservation/{booking_id}', response_model=DeleteResult)
def delete_reservation(
    booking_id: str,
    _: AuthContext = Depends(require_admin),
    bookings: BookingRepository = Depends(get_booking_repository),
):
    return bookings.delete_one(ensure_document_id(booking_id))
