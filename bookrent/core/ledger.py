#!/usr/bin/env python

"""
    Reservation ledger for bookrent: creates reservations, closes them
    on return, and answers reservation queries.

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

import logging
from contextlib import contextmanager
from datetime import date, timedelta
from typing import List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from bookrent.core.catalog import Catalog
from bookrent.core.users import UserDirectory
from bookrent.core.store import ReservationStore
from bookrent.core.models import Reservation, ReservationStatus
from bookrent.core.fees import ZERO, calculate_total_fee, calculate_late_fee, days_late
from bookrent.core.exceptions import (
    BookRentError,
    BookUnavailableError,
    DatabaseInsertError,
    InvalidRequestError,
    InvalidReservationStateError,
    ReservationNotFoundError,
)

logger = logging.getLogger(__name__)

class ReservationLedger:

    def __init__(self, session: Session, catalog: Catalog = None,
                 users: UserDirectory = None, store: ReservationStore = None):
        self.session = session
        self.catalog = catalog or Catalog(session)
        self.users = users or UserDirectory(session)
        self.store = store or ReservationStore(session)

    @contextmanager
    def _unit_of_work(self, action: str):
        """Commits everything done inside the block, or nothing."""
        try:
            yield
            self.session.commit()
        except BookRentError as e:
            self.session.rollback()
            logger.warning(f"Rolled back {action}: {e}")
            raise
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.warning(f"Rolled back {action}: {e}")
            raise DatabaseInsertError(f"Failed to {action}: {str(e)}.") from e

    def create(self, user_id: int, book_external_id: str, rental_days: int,
               start_date: Optional[date] = None) -> Reservation:
        """
        Reserve one copy of a book for a user.

        Args:
            user_id: Renting user's id.
            book_external_id: External identifier of the book.
            rental_days: Requested rental length, a positive number of days.
            start_date: First day of the rental; today if omitted.

        Returns:
            The persisted ACTIVE reservation.

        Raises:
            InvalidRequestError: If rental_days is not a positive integer.
            UserNotFoundError / BookNotFoundError: If either is unknown.
            BookUnavailableError: If no copy is left to lend.
            DatabaseInsertError: If the copy count and the reservation
                could not be committed together.
        """
        if not isinstance(rental_days, int) or isinstance(rental_days, bool) or rental_days <= 0:
            raise InvalidRequestError("Rental days must be a positive number.")
        start_date = start_date or date.today()

        self.users.resolve(user_id)
        book = self.catalog.resolve(book_external_id)
        if not book.is_available:
            raise BookUnavailableError(
                f"No copies available for book with external id: {book_external_id}")

        reservation = Reservation(
            user_id=user_id,
            book_external_id=book.external_id,
            rental_days=rental_days,
            start_date=start_date,
            expected_return_date=start_date + timedelta(days=rental_days),
            daily_rate=book.price,
            total_fee=calculate_total_fee(book.price, rental_days),
            late_fee=ZERO,
            status=ReservationStatus.ACTIVE,
        )

        with self._unit_of_work("create reservation"):
            self.catalog.decrease_available(book.external_id)
            self.store.save(reservation)

        logger.info(f"Reservation {reservation.id} created: user {user_id}, book {book_external_id}, "
                    f"{rental_days} days, total {reservation.total_fee}")
        return reservation

    def return_book(self, reservation_id: int, return_date: Optional[date] = None) -> Reservation:
        """Close an ACTIVE reservation and charge any late fee.

        The late fee uses the book's price at return time while the base
        fee is recomputed from the rate stored on the reservation.
        """
        reservation = self.get_by_id(reservation_id)
        if not reservation.is_active:
            raise InvalidReservationStateError("Reservation was already returned.")
        return_date = return_date or date.today()
        book = self.catalog.resolve(reservation.book_external_id)

        late_fee = calculate_late_fee(
            book.price, days_late(reservation.expected_return_date, return_date))
        total_fee = calculate_total_fee(reservation.daily_rate, reservation.rental_days) + late_fee

        with self._unit_of_work("return reservation"):
            if not self.store.close(reservation.id, return_date, late_fee, total_fee):
                raise InvalidReservationStateError("Reservation was already returned.")
            self.catalog.increase_available(reservation.book_external_id)
        self.session.refresh(reservation)

        logger.info(f"Reservation {reservation_id} returned on {return_date}: "
                    f"late fee {reservation.late_fee}, total {reservation.total_fee}")
        return reservation

    def get_by_id(self, reservation_id: int) -> Reservation:
        if reservation := self.store.find_by_id(reservation_id):
            return reservation
        raise ReservationNotFoundError(f"Reservation not found with id: {reservation_id}")

    def get_all(self) -> List[Reservation]:
        return self.store.find_all()

    def get_by_user(self, user_id: int) -> List[Reservation]:
        return self.store.find_by_user_id(user_id)

    def get_active(self) -> List[Reservation]:
        return self.store.find_by_status(ReservationStatus.ACTIVE)

    def get_overdue(self, as_of: Optional[date] = None) -> List[Reservation]:
        return self.store.find_overdue(ReservationStatus.ACTIVE, as_of or date.today())
