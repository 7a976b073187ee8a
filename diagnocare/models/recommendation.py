"""Recommendation model definitions."""

from diagnocare.database import Base
from diagnocare.models.document import DocumentMixin


class Recommendation(DocumentMixin, Base):
    """Represents a health recommendation card."""
    __tablename__ = "recommendations"
