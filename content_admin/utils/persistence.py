# content_admin/utils/persistence.py
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from content_admin.errors import Conflict, Internal
from content_admin.extensions import db

logger = logging.getLogger(__name__)


def commit(operation, identifier=None):
    """Commit the session, rolling back and mapping storage failures."""
    try:
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        logger.warning("Constraint violation during %s (%s): %s", operation, identifier, e.orig)
        raise Conflict(details=str(e.orig)) from e
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception("Storage error during %s (%s)", operation, identifier)
        raise Internal(f"Failed to {operation}", details=str(e)) from e
