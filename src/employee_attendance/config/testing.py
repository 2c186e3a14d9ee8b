import os

from .base import SQLALCHEMY_TRACK_MODIFICATIONS, WORKDAY_START  # noqa: F401

SECRET_KEY = "test-secret"
SQLALCHEMY_DATABASE_URI = os.getenv("TEST_DATABASE_URL", "sqlite:///:memory:")

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = True
AUTO_SEED_DB = False
