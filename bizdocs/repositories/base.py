"""Shared repository behaviour over a single SQLAlchemy model."""

import logging
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from bizdocs.exceptions import StorageFailure, ValidationFailure

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class Repository(Generic[ModelT]):
    """CRUD over one table.

    ``update`` and ``delete`` report a missing id by returning ``False``.
    Unique constraint violations surface as ``ValidationFailure`` naming the column.
    """

    model: ClassVar[type]
    unique_fields: ClassVar[tuple[str, ...]] = ()

    def __init__(self, db: Session):
        self.db = db

    def create(self, data: dict[str, Any]) -> ModelT:
        self._check_unique(data)
        instance = self.model(**data)
        self.db.add(instance)
        self._commit(data)
        self.db.refresh(instance)
        return instance

    def find_all(self) -> list[ModelT]:
        return self.db.query(self.model).order_by(self.model.id).all()

    def find_by_id(self, id: int) -> ModelT | None:
        return self.db.query(self.model).filter(self.model.id == id).first()

    def update(self, id: int, data: dict[str, Any]) -> bool:
        instance = self.find_by_id(id)
        if instance is None:
            return False
        self._check_unique(data, exclude_id=id)
        for key, value in data.items():
            setattr(instance, key, value)
        self._commit(data, exclude_id=id)
        return True

    def delete(self, id: int) -> bool:
        instance = self.find_by_id(id)
        if instance is None:
            return False
        self.db.delete(instance)
        self._commit()
        return True

    def _find_one_by(self, column: str, value: Any) -> ModelT | None:
        return self.db.query(self.model).filter(getattr(self.model, column) == value).first()

    def _conflicts(
        self, data: dict[str, Any], exclude_id: int | None = None
    ) -> dict[str, list[str]]:
        errors: dict[str, list[str]] = {}
        for field in self.unique_fields:
            if data.get(field) is None:
                continue
            query = self.db.query(self.model.id).filter(getattr(self.model, field) == data[field])
            if exclude_id is not None:
                query = query.filter(self.model.id != exclude_id)
            if query.first() is not None:
                label = field.replace("_", " ")
                errors[field] = [f"The {label} has already been taken."]
        return errors

    def _check_unique(self, data: dict[str, Any], exclude_id: int | None = None) -> None:
        errors = self._conflicts(data, exclude_id)
        if errors:
            raise ValidationFailure(errors)

    def _commit(self, data: dict[str, Any] | None = None, exclude_id: int | None = None) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Integrity error on {self.model.__tablename__}: {e.orig}")
            errors = self._conflicts(data or {}, exclude_id)
            raise ValidationFailure(
                errors or {"record": ["The record violates a database constraint."]}
            ) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Database error on {self.model.__tablename__}: {e}")
            raise StorageFailure(f"database write to {self.model.__tablename__} failed: {e}") from e
