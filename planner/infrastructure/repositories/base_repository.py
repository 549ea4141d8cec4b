"""
SQLAlchemy implementation of the Scoped Repository.
"""

from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy.orm import Query, Session

from planner.domain.repositories.base import ScopedRepository
from planner.infrastructure.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class SQLAlchemyScopedRepository(ScopedRepository[ModelType], Generic[ModelType]):
    """Generic owner-scoped repository for SQLAlchemy models.

    Every query goes through ``_scoped`` so that a row owned by another user
    behaves exactly like a row that does not exist.
    """

    def __init__(self, db: Session, model: Type[ModelType], owner_column: str = "user_id"):
        self.db = db
        self.model = model
        self.owner_column = getattr(model, owner_column)
        self.owner_field = owner_column

    def _scoped(self, owner_id: str) -> Query:
        return self.db.query(self.model).filter(self.owner_column == owner_id)

    def list_for_owner(self, owner_id: str) -> List[ModelType]:
        return self._scoped(owner_id).order_by(self.model.created_at.desc()).all()

    def get_owned(self, id: str, owner_id: str) -> Optional[ModelType]:
        return self._scoped(owner_id).filter(self.model.id == id).first()

    def create(self, owner_id: str, obj_in: Any) -> ModelType:
        if hasattr(obj_in, "model_dump"):
            obj_data = obj_in.model_dump(exclude_unset=True)
        else:
            obj_data = dict(obj_in)
        # The owner always comes from the caller, never from the payload
        obj_data[self.owner_field] = owner_id

        db_obj = self.model(**obj_data)
        self.db.add(db_obj)
        self.db.commit()
        self.db.refresh(db_obj)
        return db_obj

    def update_owned(self, id: str, owner_id: str, obj_in: Any) -> Optional[ModelType]:
        db_obj = self.get_owned(id, owner_id)
        if db_obj is None:
            return None

        if hasattr(obj_in, "model_dump"):
            update_data = obj_in.model_dump(exclude_unset=True)
        else:
            update_data = dict(obj_in)

        for field, value in update_data.items():
            if field in ("id", self.owner_field):
                continue
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        self.db.add(db_obj)
        self.db.commit()
        self.db.refresh(db_obj)
        return db_obj

    def delete_owned(self, id: str, owner_id: str) -> bool:
        deleted = (
            self._scoped(owner_id)
            .filter(self.model.id == id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted > 0
