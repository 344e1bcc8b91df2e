#!/usr/bin/env python

"""
    API routes for bookrent,
    exposing reservation creation, returns and queries.

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Body, Depends, HTTPException, status
from sqlalchemy.orm import Session
from bookrent.core.db import get_session
from bookrent.core.ledger import ReservationLedger
from bookrent.core.models import Reservation
from bookrent.core.exceptions import (
    BookRentError,
    NotFoundError,
    BookUnavailableError,
    InvalidReservationStateError,
    InvalidRequestError,
)
from bookrent.schemas.reservation import (
    ReservationRequest,
    ReservationResponse,
    ReturnBookRequest,
)

router = APIRouter()

ERROR_STATUS = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (BookUnavailableError, status.HTTP_409_CONFLICT),
    (InvalidReservationStateError, status.HTTP_409_CONFLICT),
    (InvalidRequestError, status.HTTP_400_BAD_REQUEST),
]

def get_ledger(session: Session = Depends(get_session)) -> ReservationLedger:
    return ReservationLedger(session)

def to_http_error(e: BookRentError) -> HTTPException:
    for error_class, code in ERROR_STATUS:
        if isinstance(e, error_class):
            return HTTPException(status_code=code, detail=str(e))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

def serialize(ledger: ReservationLedger, reservation: Reservation) -> ReservationResponse:
    """Adds the user's name and book title, looked up now, to the reservation view."""
    user = ledger.users.find(reservation.user_id)
    book = ledger.catalog.find(reservation.book_external_id)
    view = ReservationResponse.model_validate(reservation)
    return view.model_copy(update={
        "user_name": user.name if user else None,
        "book_title": book.title if book else None,
    })

@router.post('/reservations', response_model=ReservationResponse, status_code=status.HTTP_201_CREATED)
async def create_reservation(request: ReservationRequest, ledger: ReservationLedger = Depends(get_ledger)):
    try:
        reservation = ledger.create(
            user_id=request.user_id,
            book_external_id=request.book_external_id,
            rental_days=request.rental_days,
            start_date=request.start_date,
        )
    except BookRentError as e:
        raise to_http_error(e)
    return serialize(ledger, reservation)

@router.put('/reservations/{reservation_id}/return', response_model=ReservationResponse)
async def return_book(reservation_id: int, request: Optional[ReturnBookRequest] = Body(None),
                      ledger: ReservationLedger = Depends(get_ledger)):
    return_date = request.return_date if request else None
    try:
        reservation = ledger.return_book(reservation_id, return_date)
    except BookRentError as e:
        raise to_http_error(e)
    return serialize(ledger, reservation)

@router.get('/reservations', response_model=List[ReservationResponse])
async def get_reservations(ledger: ReservationLedger = Depends(get_ledger)):
    return [serialize(ledger, r) for r in ledger.get_all()]

@router.get('/reservations/active', response_model=List[ReservationResponse])
async def get_active_reservations(ledger: ReservationLedger = Depends(get_ledger)):
    return [serialize(ledger, r) for r in ledger.get_active()]

@router.get('/reservations/overdue', response_model=List[ReservationResponse])
async def get_overdue_reservations(as_of: Optional[date] = None, ledger: ReservationLedger = Depends(get_ledger)):
    return [serialize(ledger, r) for r in ledger.get_overdue(as_of)]

@router.get('/reservations/user/{user_id}', response_model=List[ReservationResponse])
async def get_user_reservations(user_id: int, ledger: ReservationLedger = Depends(get_ledger)):
    return [serialize(ledger, r) for r in ledger.get_by_user(user_id)]

@router.get('/reservations/{reservation_id}', response_model=ReservationResponse)
async def get_reservation(reservation_id: int, ledger: ReservationLedger = Depends(get_ledger)):
    try:
        return serialize(ledger, ledger.get_by_id(reservation_id))
    except BookRentError as e:
        raise to_http_error(e)
