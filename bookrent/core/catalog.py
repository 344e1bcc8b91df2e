import logging
from typing import Optional
from sqlalchemy import update, func
from sqlalchemy.orm import Session
from bookrent.core.models import Book
from bookrent.core.exceptions import BookNotFoundError, BookUnavailableError

logger = logging.getLogger(__name__)

class Catalog:
    """Book lookups and the available-copy counter.

    Counter changes are single UPDATE statements so concurrent requests
    cannot lend the same last copy twice. Nothing here commits; the
    caller decides the transaction boundary.
    """

    def __init__(self, session: Session):
        self.session = session

    def find(self, external_id: str) -> Optional[Book]:
        return self.session.query(Book).filter(Book.external_id == external_id).first()

    def resolve(self, external_id: str) -> Book:
        if book := self.find(external_id):
            return book
        raise BookNotFoundError(f"Book not found with external id: {external_id}")

    def decrease_available(self, external_id: str):
        result = self.session.execute(
            update(Book)
            .where(Book.external_id == external_id, Book.available_quantity > 0)
            .values(available_quantity=Book.available_quantity - 1)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            self.resolve(external_id)
            raise BookUnavailableError(f"No copies available for book with external id: {external_id}")
        logger.debug(f"Decreased available copies of {external_id}")

    def increase_available(self, external_id: str):
        result = self.session.execute(
            update(Book)
            .where(Book.external_id == external_id)
            .values(available_quantity=func.coalesce(Book.available_quantity, 0) + 1)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            raise BookNotFoundError(f"Book not found with external id: {external_id}")
        logger.debug(f"Increased available copies of {external_id}")
