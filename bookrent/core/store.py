from datetime import date
from decimal import Decimal
from typing import List, Optional
from sqlalchemy import update
from sqlalchemy.orm import Session
from bookrent.core.models import Reservation, ReservationStatus

class ReservationStore:
    """Queries and writes for reservation records.

    `save` flushes so new rows get their id, but never commits.
    """

    def __init__(self, session: Session):
        self.session = session

    def _query(self):
        return self.session.query(Reservation).order_by(Reservation.id)

    def save(self, reservation: Reservation) -> Reservation:
        self.session.add(reservation)
        self.session.flush()
        return reservation

    def close(self, reservation_id: int, return_date: date, late_fee: Decimal, total_fee: Decimal) -> bool:
        """Moves an ACTIVE reservation to RETURNED in one guarded UPDATE.

        Returns False when the row is missing or no longer ACTIVE.
        """
        result = self.session.execute(
            update(Reservation)
            .where(Reservation.id == reservation_id, Reservation.status == ReservationStatus.ACTIVE)
            .values(
                status=ReservationStatus.RETURNED,
                actual_return_date=return_date,
                late_fee=late_fee,
                total_fee=total_fee,
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    def find_by_id(self, reservation_id: int) -> Optional[Reservation]:
        return self.session.get(Reservation, reservation_id)

    def find_all(self) -> List[Reservation]:
        return self._query().all()

    def find_by_user_id(self, user_id: int) -> List[Reservation]:
        return self._query().filter(Reservation.user_id == user_id).all()

    def find_by_status(self, status: ReservationStatus) -> List[Reservation]:
        return self._query().filter(Reservation.status == status).all()

    def find_overdue(self, status: ReservationStatus, as_of: date) -> List[Reservation]:
        return self._query().filter(
            Reservation.status == status,
            Reservation.expected_return_date < as_of
        ).all()
