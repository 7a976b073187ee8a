"""Banner model definitions."""

from sqlalchemy import Column, String
from diagnocare.database import Base
from diagnocare.models.document import DocumentMixin


class Banner(DocumentMixin, Base):
    """Represents a promotional banner shown on the home page."""
    __tablename__ = "banners"

    document_fields = {"status": "status"}

    status = Column(String)
