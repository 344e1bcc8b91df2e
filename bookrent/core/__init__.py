#!/usr/bin/env python

"""
    Core module for bookrent, db & reservation ledger

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

from bookrent.core import db as database
from bookrent.core import models
from bookrent.core.ledger import ReservationLedger

database.init()

__all__ = ["database", "models", "ReservationLedger"]
