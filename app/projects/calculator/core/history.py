import logging

from sqlalchemy.exc import SQLAlchemyError

from app import db
from app.projects.calculator.core.constants import (
    CLEAR_HISTORY_MESSAGE,
    PROJECT_ID,
)
from app.projects.calculator.core.errors import StorageFailure
from app.projects.calculator.models import Calculation
from app.utils.logging import log_project_activity

logger = logging.getLogger(__name__)


class HistoryStore:
    """Append-only calculation history backed by the calculations table."""

    def _commit(self, action):
        try:
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.exception(f"Failed to {action}")
            raise StorageFailure() from e

    def append(self, first_number, second_number, operation, result):
        """Insert one calculation and return the stored record (with id and created_at)."""
        calculation = Calculation(
            first_number=first_number,
            second_number=second_number,
            operation=operation,
            result=result,
        )
        db.session.add(calculation)
        self._commit("save calculation")
        return calculation

    def list_all(self):
        """All calculations, most recent first."""
        try:
            return (
                Calculation.query
                .order_by(Calculation.created_at.desc(), Calculation.id.desc())
                .all()
            )
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.exception("Failed to fetch calculation history")
            raise StorageFailure() from e

    def clear_all(self):
        """Delete every calculation. Safe to call on an empty history."""
        try:
            deleted = Calculation.query.delete()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.exception("Failed to clear calculation history")
            raise StorageFailure() from e

        log_project_activity(
            PROJECT_ID,
            'Clear History',
            f"Cleared {deleted} calculation(s) from history"
        )
        self._commit("clear calculation history")
        logger.info(f"Cleared {deleted} calculations from history")
        return {'success': True, 'message': CLEAR_HISTORY_MESSAGE, 'deleted': deleted}
