#!/usr/bin/env python

"""
    Configurations for bookrent

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

import os
from decimal import Decimal


# Determine environment
TESTING = os.getenv("TESTING", "false").lower() == "true"

# API server configuration
HOST = os.environ.get('BOOKRENT_HOST', 'localhost')
PORT = int(os.environ.get('BOOKRENT_PORT', 8080))
WORKERS = int(os.environ.get('BOOKRENT_WORKERS', 1))
DEBUG = bool(int(os.environ.get('BOOKRENT_DEBUG', 0)))
LOG_LEVEL = os.environ.get('BOOKRENT_LOG_LEVEL', 'info')
CORS_ORIGINS = os.environ.get('BOOKRENT_CORS_ORIGINS', 'http://localhost:3000').split(',')

OPTIONS = {
    'host': HOST,
    'port': PORT,
    'log_level': LOG_LEVEL,
    'reload': DEBUG,
    'workers': WORKERS,
}

# Fee rules
LATE_FEE_RATE = Decimal(os.environ.get('BOOKRENT_LATE_FEE_RATE', '0.15'))  # per day, of book price

DB_CONFIG = {
    'user': os.environ.get('DB_USER', 'postgres'),
    'password': os.environ.get('DB_PASSWORD'),
    'host': os.environ.get('DB_HOST', 'localhost'),
    'port': int(os.environ.get('DB_PORT', '5432')),
    'dbname': os.environ.get('DB_NAME', 'bookrent'),
}

# Database configuration
DB_URI = os.environ.get('BOOKRENT_DB_URI') or (
    "sqlite:///:memory:" if TESTING else
    'postgresql+psycopg2://{user}:{password}@{host}:{port}/{dbname}'.format(**DB_CONFIG)
)

__all__ = ['HOST', 'PORT', 'WORKERS', 'DEBUG', 'LOG_LEVEL', 'CORS_ORIGINS', 'OPTIONS', 'DB_URI', 'DB_CONFIG', 'TESTING', 'LATE_FEE_RATE']
