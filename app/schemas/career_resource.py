from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime

from app.schemas.common import EntityId

class CareerResourceCategoryBase(BaseModel):
    category_name: str = Field(..., min_length=3, max_length=255)

class CareerResourceCategoryCreate(CareerResourceCategoryBase):
    pass

class CareerResourceCategoryUpdate(BaseModel):
    category_name: Optional[str] = Field(None, min_length=3, max_length=255)

    model_config = ConfigDict(extra="forbid")

class CareerResourceCategory(CareerResourceCategoryBase):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class CareerResourceBase(BaseModel):
    question: str = Field(..., min_length=5, max_length=1000)
    answer: str = Field(..., min_length=5, max_length=5000)
    date: datetime

class CareerResourceCreate(CareerResourceBase):
    category_id: Optional[EntityId] = Field(None, validation_alias="category")

    model_config = ConfigDict(populate_by_name=True)

class CareerResourceUpdate(BaseModel):
    question: Optional[str] = Field(None, min_length=5, max_length=1000)
    answer: Optional[str] = Field(None, min_length=5, max_length=5000)
    date: Optional[datetime] = None
    category_id: Optional[EntityId] = Field(None, validation_alias="category")

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

class CareerResource(CareerResourceBase):
    id: str
    category_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
