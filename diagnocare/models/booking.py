"""Booking model definitions."""

from sqlalchemy import Column, String
from diagnocare.database import Base
from diagnocare.models.document import DocumentMixin


class Booking(DocumentMixin, Base):
    """Represents a user's reservation of a diagnostic test."""
    __tablename__ = "bookings"

    document_fields = {"email": "email", "bookingId": "booking_id", "testId": "test_id"}

    email = Column(String, index=True)
    booking_id = Column(String, index=True)
    test_id = Column(String, index=True)
