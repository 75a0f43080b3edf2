from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from datetime import datetime

from app.schemas.common import EntityId

class ModuleBase(BaseModel):
    title: str = Field(..., min_length=3, max_length=255)
    duration: str = Field(..., min_length=1, max_length=100)
    course_id: Optional[EntityId] = Field(None, validation_alias="course")

    model_config = ConfigDict(populate_by_name=True)

class ModuleCreate(ModuleBase):
    pass

class ModuleUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=3, max_length=255)
    duration: Optional[str] = Field(None, min_length=1, max_length=100)
    course_id: Optional[EntityId] = Field(None, validation_alias="course")

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

class Module(BaseModel):
    id: str
    title: str
    duration: str
    course_id: Optional[str] = None
    topic_ids: List[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
