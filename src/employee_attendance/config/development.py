import os

from .base import SQLALCHEMY_TRACK_MODIFICATIONS, WORKDAY_START, database_uri  # noqa: F401

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")
SQLALCHEMY_DATABASE_URI = database_uri()

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, tables are created on startup (idempotent)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed placeholder employees when the table is empty
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))
