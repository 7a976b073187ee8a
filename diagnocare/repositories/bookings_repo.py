import logging
from typing import Any

from sqlalchemy import update

from diagnocare.core.exceptions import NotFoundError, SlotsUnavailableError
from diagnocare.models.booking import Booking
from diagnocare.models.diagnostic_test import DiagnosticTest
from diagnocare.repositories.base import DocumentRepository
from diagnocare.schemas import InsertResult


logger = logging.getLogger(__name__)

REFERENCE_FIELDS = ('bookingId', 'testId')


def normalize_references(document: dict[str, Any]) -> dict[str, Any]:
    normalized = dict(document)
    for key in REFERENCE_FIELDS:
        if normalized.get(key) is not None:
            normalized[key] = str(normalized[key])
    return normalized


class BookingRepository(DocumentRepository):
    model = Booking

    def insert(self, document: dict[str, Any]) -> InsertResult:
        return super().insert(normalize_references(document))

    def create_with_slot_update(
        self,
        document: dict[str, Any],
        test_id: str,
        slots: int | None = None,
    ) -> InsertResult:
        """Record a booking and update the booked test in one transaction.

        With ``slots`` given the test's slot count is set to it; otherwise one
        slot is taken, and the update only applies while a slot is free. The
        test's ``bookings`` counter is incremented either way. Nothing is
        written unless both the booking and the test update succeed.
        """
        statement = (
            update(DiagnosticTest)
            .where(DiagnosticTest.id == test_id)
            .execution_options(synchronize_session=False)
        )
        if slots is None:
            statement = statement.where(DiagnosticTest.slots > 0).values(
                slots=DiagnosticTest.slots - 1,
                bookings=DiagnosticTest.bookings + 1,
            )
        else:
            statement = statement.values(slots=slots, bookings=DiagnosticTest.bookings + 1)

        booking = Booking.from_document(normalize_references({**document, 'testId': test_id}))

        try:
            result = self.db.execute(statement)
            if result.rowcount == 0:
                if self.db.get(DiagnosticTest, test_id) is None:
                    raise NotFoundError(f'Test {test_id} not found.')
                raise SlotsUnavailableError(f'Test {test_id} has no slots left.')

            self.db.add(booking)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(booking)
        logger.info('Booked test %s as booking %s', test_id, booking.id)
        return InsertResult(inserted_id=booking.id)
