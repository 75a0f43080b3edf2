from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from datetime import datetime

from app.schemas.common import EntityId, UrlStr

class Video(BaseModel):
    title: str = Field(..., min_length=3, max_length=255)
    video_url: UrlStr

class Assignment(BaseModel):
    title: str = Field(..., min_length=3, max_length=255)
    file_url: UrlStr

class TopicBase(BaseModel):
    title: str = Field(..., min_length=3, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    videos: List[Video] = Field(default_factory=list)
    assignments: List[Assignment] = Field(default_factory=list)

class TopicCreate(TopicBase):
    module_id: EntityId = Field(..., validation_alias="module")

    model_config = ConfigDict(populate_by_name=True)

class TopicUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=3, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    videos: Optional[List[Video]] = None
    assignments: Optional[List[Assignment]] = None
    module_id: Optional[EntityId] = Field(None, validation_alias="module")

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

class Topic(TopicBase):
    id: str
    module_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
