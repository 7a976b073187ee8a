import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from diagnocare.models.user import ROLE_USER, User
from diagnocare.repositories.base import DocumentRepository
from diagnocare.schemas import InsertResult


logger = logging.getLogger(__name__)


class UserRepository(DocumentRepository):
    model = User

    def get_by_email(self, email: str) -> User | None:
        return self.db.execute(select(User).where(User.email == email)).scalars().first()

    def register(self, document: dict[str, Any]) -> InsertResult | None:
        """Insert a new user with the default role.

        Returns ``None`` when the email is already registered. Uniqueness is
        enforced by the ``users.email`` index, so concurrent registrations of
        one email still produce a single row.
        """
        document = {**document, 'role': ROLE_USER}
        try:
            return self.insert(document)
        except IntegrityError:
            self.db.rollback()
            logger.info('Registration skipped, %s already exists', document.get('email'))
            return None
