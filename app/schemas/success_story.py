from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime

from app.schemas.common import ImageRef

class SuccessStoryBase(BaseModel):
    name: str = Field(..., min_length=3, max_length=255)
    certificate_name: str = Field(..., min_length=3, max_length=255)
    review: str = Field(..., min_length=5, max_length=1000)
    date: datetime

class SuccessStoryCreate(SuccessStoryBase):
    person_image: ImageRef

class SuccessStoryUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=3, max_length=255)
    certificate_name: Optional[str] = Field(None, min_length=3, max_length=255)
    review: Optional[str] = Field(None, min_length=5, max_length=1000)
    date: Optional[datetime] = None
    person_image: Optional[ImageRef] = None

    model_config = ConfigDict(extra="forbid")

class SuccessStory(SuccessStoryBase):
    id: str
    person_image: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
