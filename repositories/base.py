"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.

Repositories never commit: they add, flush and delete within whatever
transaction the calling service has open.
"""

from typing import Generic, TypeVar, Optional, List, Type
from sqlalchemy import inspect
from sqlalchemy.orm import Session
from abc import ABC

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common CRUD operations.
    All repositories should inherit from this class.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def get_by_id(self, entity_id: int) -> Optional[ModelType]:
        """
        Get entity by primary key.

        Args:
            entity_id: Entity integer key

        Returns:
            Entity or None if not found
        """
        return self.db.get(self.model, entity_id)

    def get_for_update(self, entity_id: int) -> Optional[ModelType]:
        """
        Get entity by primary key and lock its row until the transaction ends.

        SQLite ignores FOR UPDATE, so callers still map the foreign key
        failure of a concurrent delete back to NotFound.

        Args:
            entity_id: Entity integer key

        Returns:
            Entity or None if not found
        """
        primary_key = inspect(self.model).primary_key[0]
        return (
            self.db.query(self.model)
            .filter(primary_key == entity_id)
            .with_for_update()
            .first()
        )

    def get_all(self) -> List[ModelType]:
        """Get all entities"""
        return self.db.query(self.model).all()

    def create(self, entity: ModelType) -> ModelType:
        """Insert new entity; its identity is assigned on flush"""
        self.db.add(entity)
        self.db.flush()
        return entity

    def update(self, entity: ModelType) -> ModelType:
        """Write pending changes of an already-persistent entity"""
        self.db.flush()
        return entity

    def delete(self, entity: ModelType) -> None:
        """Remove entity; configured cascades remove its dependents"""
        self.db.delete(entity)
        self.db.flush()

    def exists(self, entity_id: int) -> bool:
        """Check if entity exists"""
        return self.get_by_id(entity_id) is not None
