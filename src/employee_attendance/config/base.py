import os
import urllib.parse


def database_uri() -> str:
    """DATABASE_URL wins; otherwise build a MySQL URI from the DB_* variables."""
    url = os.getenv("DATABASE_URL")
    if url:
        return url

    user = os.getenv("DB_USER", "root")
    password = urllib.parse.quote_plus(os.getenv("DB_PASSWORD", ""))
    host = os.getenv("DB_HOST", "localhost")
    port = int(os.getenv("DB_PORT", "3306"))
    name = os.getenv("DB_NAME", "attendance_db")
    return f"mysql+mysqlconnector://{user}:{password}@{host}:{port}/{name}"


SQLALCHEMY_TRACK_MODIFICATIONS = False

# Check-ins after this time (HH:MM) are recorded as Late
WORKDAY_START = os.getenv("WORKDAY_START", "08:30")
