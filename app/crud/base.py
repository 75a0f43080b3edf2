from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union
from pydantic import BaseModel
from sqlalchemy import inspect
from sqlalchemy.orm import Session
from app.core.database import Base
from app.core.exceptions import ValidationError

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)

SCALAR_FILTER_TYPES = (str, int, float, bool, type(None))

class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    def __init__(self, model: Type[ModelType]):
        self.model = model

    @property
    def filterable_fields(self) -> List[str]:
        return [column.key for column in inspect(self.model).column_attrs]

    def get(self, db: Session, id: Any) -> Optional[ModelType]:
        return db.query(self.model).filter(self.model.id == str(id)).first()

    def _apply_filters(self, query, filters: Optional[Dict[str, Any]]):
        for field, value in (filters or {}).items():
            if field not in self.filterable_fields:
                raise ValidationError(f"Unknown filter field '{field}'", details={"field": field})
            column = getattr(self.model, field)
            if isinstance(value, list):
                if not all(isinstance(v, SCALAR_FILTER_TYPES) for v in value):
                    raise ValidationError(f"Filter on '{field}' must be a scalar or a list of scalars")
                query = query.filter(column.in_(value))
            elif isinstance(value, SCALAR_FILTER_TYPES):
                query = query.filter(column == value)
            else:
                raise ValidationError(f"Filter on '{field}' must be a scalar or a list of scalars")
        return query

    def get_multi(
        self, db: Session, *, filters: Optional[Dict[str, Any]] = None, skip: int = 0, limit: int = 100
    ) -> List[ModelType]:
        query = self._apply_filters(db.query(self.model), filters)
        return (
            query.order_by(self.model.created_at, self.model.id)
            .offset(skip)
            .limit(limit)
            .all()
        )

    def count(self, db: Session, *, filters: Optional[Dict[str, Any]] = None) -> int:
        return self._apply_filters(db.query(self.model), filters).count()

    def create(self, db: Session, *, obj_in: Union[CreateSchemaType, Dict[str, Any]], commit: bool = True) -> ModelType:
        obj_in_data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump()
        db_obj = self.model(**obj_in_data)
        db.add(db_obj)
        db.flush()  # Populate ID
        if commit:
            db.commit()
        db.refresh(db_obj)
        return db_obj

    def update(
        self, db: Session, *, db_obj: ModelType, obj_in: Union[UpdateSchemaType, Dict[str, Any]]
    ) -> ModelType:
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)
        columns = set(self.filterable_fields)
        for field, value in update_data.items():
            if field in columns:
                setattr(db_obj, field, value)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, *, id: Any) -> Optional[ModelType]:
        obj = self.get(db, id=id)
        if not obj:
            return None
        db.delete(obj)
        db.commit()
        return obj
