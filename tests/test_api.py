#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
    tests.test_api
    ~~~~~~~~~~~~~~

    HTTP routes for reservations.

    :copyright: (c) 2025 by Authors.
    :license: see LICENSE for more details.
"""

import pytest
from datetime import date, timedelta
from unittest.mock import patch
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from bookrent.app import app
from bookrent.core.db import get_session
from bookrent.core.models import Book
from bookrent.core.store import ReservationStore

@pytest.fixture
def client(session_factory, user, book):
    def override_session():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_session] = override_session
    yield TestClient(app)
    app.dependency_overrides.clear()

def reserve(client, user_id=1, external_id="258027", days=7, start=None):
    start = start or date.today()
    return client.post("/v1/api/reservations", json={
        "user_id": user_id,
        "book_external_id": external_id,
        "rental_days": days,
        "start_date": start.isoformat(),
    })

def test_create_reservation(client):
    response = reserve(client)
    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "ACTIVE"
    assert body["user_name"] == "Juan Perez"
    assert body["book_title"] == "The Lord of the Rings"
    assert body["total_fee"] == "111.93"
    assert body["late_fee"] == "0.00"
    assert body["expected_return_date"] == (date.today() + timedelta(days=7)).isoformat()

def test_create_reservation_errors(client):
    assert reserve(client, user_id=99).status_code == 404
    assert reserve(client, external_id="missing").status_code == 404
    assert reserve(client, days=0).status_code == 422

def test_create_reservation_unavailable(client, db_session, book):
    book.available_quantity = 0
    db_session.commit()
    response = reserve(client)
    assert response.status_code == 409

def test_return_late(client):
    created = reserve(client, start=date.today() - timedelta(days=10)).json()

    response = client.put(f"/v1/api/reservations/{created['id']}/return",
                          json={"return_date": date.today().isoformat()})

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "RETURNED"
    assert body["late_fee"] == "7.20"
    assert body["total_fee"] == "119.13"

    again = client.put(f"/v1/api/reservations/{created['id']}/return")
    assert again.status_code == 409

def test_return_missing_reservation(client):
    assert client.put("/v1/api/reservations/12345/return").status_code == 404

def test_listing_endpoints(client):
    overdue = reserve(client, start=date.today() - timedelta(days=10)).json()
    current = reserve(client).json()

    assert client.get(f"/v1/api/reservations/{current['id']}").json()["id"] == current["id"]
    assert client.get("/v1/api/reservations/999").status_code == 404
    assert len(client.get("/v1/api/reservations").json()) == 2
    assert len(client.get("/v1/api/reservations/user/1").json()) == 2
    assert len(client.get("/v1/api/reservations/active").json()) == 2
    assert [r["id"] for r in client.get("/v1/api/reservations/overdue").json()] == [overdue["id"]]
    later = (date.today() + timedelta(days=30)).isoformat()
    assert len(client.get(f"/v1/api/reservations/overdue?as_of={later}").json()) == 2

def test_database_failure_is_a_server_error(client, db_session):
    with patch.object(ReservationStore, "save", side_effect=OperationalError("INSERT", {}, Exception("disk full"))):
        response = reserve(client)

    assert response.status_code == 500
    db_session.expire_all()
    assert db_session.query(Book).filter_by(external_id="258027").one().available_quantity == 5
    assert client.get("/v1/api/reservations").json() == []
