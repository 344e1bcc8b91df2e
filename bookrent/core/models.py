#!/usr/bin/env python 

"""
    Models for bookrent,
    including the Book, User and Reservation tables.

    Reservations refer to users and books by identifier only; the
    current state of either is looked up through the Catalog and
    UserDirectory at the moment it is needed.

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

from sqlalchemy import Column, String, Integer, Date, DateTime, Numeric, Enum as SQLAlchemyEnum
from sqlalchemy.sql import func
from bookrent.core.db import Base
import enum

class ReservationStatus(enum.Enum):
    ACTIVE = "ACTIVE"
    RETURNED = "RETURNED"

class Book(Base):
    __tablename__ = 'books'

    id = Column(Integer, primary_key=True)
    external_id = Column(String(100), unique=True, nullable=False, index=True)
    title = Column(String(255), nullable=False)
    author = Column(String(255))
    price = Column(Numeric(10, 2), nullable=False)
    stock_quantity = Column(Integer, default=0, nullable=False)
    available_quantity = Column(Integer)
    created_at = Column(DateTime(timezone=True), default=func.now())

    @property
    def is_available(self):
        """True when at least one copy can be lent."""
        return self.available_quantity is not None and self.available_quantity > 0

class User(Base):
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    phone = Column(String(50))
    created_at = Column(DateTime(timezone=True), default=func.now())

class Reservation(Base):
    __tablename__ = 'reservations'

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, nullable=False, index=True)
    book_external_id = Column(String(100), nullable=False, index=True)
    rental_days = Column(Integer, nullable=False)
    start_date = Column(Date, nullable=False)
    expected_return_date = Column(Date, nullable=False)
    actual_return_date = Column(Date, nullable=True)
    daily_rate = Column(Numeric(10, 2), nullable=False)
    total_fee = Column(Numeric(10, 2), nullable=False)
    late_fee = Column(Numeric(10, 2), nullable=False)
    status = Column(SQLAlchemyEnum(ReservationStatus), default=ReservationStatus.ACTIVE, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=func.now())

    @property
    def is_active(self):
        return self.status == ReservationStatus.ACTIVE
