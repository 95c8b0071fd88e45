"""
Base service interface for business logic layer.
Services orchestrate business operations using repositories.
"""

from contextlib import contextmanager
from typing import Generic, Iterator, TypeVar
from abc import ABC
import logging

from sqlalchemy.orm import Session

RepositoryType = TypeVar("RepositoryType")


class BaseService(Generic[RepositoryType], ABC):
    """
    Base service providing common functionality.
    All service classes should inherit from this class.

    The session is injected at construction and shared with the service's
    repositories; the service is the only layer that commits or rolls back.
    """

    def __init__(self, db: Session, repository: RepositoryType, logger_name: str):
        self.db = db
        self.repository = repository
        self.logger = logging.getLogger(logger_name)

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """
        Run a read-check-write sequence as one unit of work.

        Commits when the block exits normally (including an early ``return``
        of a rejecting envelope, which has nothing to commit) and rolls back
        on any exception, including one raised by the commit itself.
        """
        try:
            yield self.db
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def log_info(self, message: str, **kwargs):
        """Log info message with structured data"""
        extra_data = " ".join([f"{k}={v}" for k, v in kwargs.items()])
        self.logger.info(f"{message} {extra_data}".strip())

    def log_warning(self, message: str, **kwargs):
        """Log warning message with structured data"""
        extra_data = " ".join([f"{k}={v}" for k, v in kwargs.items()])
        self.logger.warning(f"{message} {extra_data}".strip())

    def log_error(self, message: str, **kwargs):
        """Log error message with structured data"""
        extra_data = " ".join([f"{k}={v}" for k, v in kwargs.items()])
        self.logger.error(f"{message} {extra_data}".strip())
