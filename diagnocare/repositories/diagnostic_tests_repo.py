from typing import Any

from sqlalchemy import update

from diagnocare.models.diagnostic_test import DiagnosticTest
from diagnocare.repositories.base import DocumentRepository
from diagnocare.schemas import UpdateResult

FEATURED_LIMIT = 3


class DiagnosticTestRepository(DocumentRepository):
    model = DiagnosticTest

    def apply_booking(self, test_id: str, slots: int) -> UpdateResult:
        """Set the remaining slots and count one more booking in one statement."""
        result = self.db.execute(
            update(DiagnosticTest)
            .where(DiagnosticTest.id == test_id)
            .values(slots=slots, bookings=DiagnosticTest.bookings + 1)
            .execution_options(synchronize_session=False)
        )
        self.db.commit()
        return UpdateResult(matched_count=result.rowcount, modified_count=result.rowcount)

    def featured(self, limit: int = FEATURED_LIMIT) -> list[dict[str, Any]]:
        tests = self.list_all()
        ranked = sorted(tests, key=lambda test: test.get('bookings') or 0, reverse=True)
        return ranked[:limit]
