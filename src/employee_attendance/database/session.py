from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.exceptions import StoreError

logger = logging.getLogger(__name__)


@contextmanager
def session_scope(db: SQLAlchemy) -> Iterator[Session]:
    """Commit on success, roll back on failure.

    IntegrityError is re-raised untouched so repositories can translate it;
    any other SQLAlchemy failure becomes StoreError.
    """
    session = db.session
    try:
        yield session
        session.commit()
    except IntegrityError:
        session.rollback()
        raise
    except SQLAlchemyError as exc:
        session.rollback()
        logger.error("Database operation failed: %s", exc)
        raise StoreError("The attendance database is currently unavailable") from exc
