import os
os.environ.setdefault("TESTING", "true")

import pytest
from decimal import Decimal
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from bookrent.core.db import Base
from bookrent.core.models import Book, User

@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)

@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)

@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def user(db_session):
    user = User(name="Juan Perez", email="juan@example.com", phone="555-0100")
    db_session.add(user)
    db_session.commit()
    return user

@pytest.fixture
def book(db_session):
    book = Book(
        external_id="258027",
        title="The Lord of the Rings",
        author="J.R.R. Tolkien",
        price=Decimal("15.99"),
        stock_quantity=10,
        available_quantity=5,
    )
    db_session.add(book)
    db_session.commit()
    return book
