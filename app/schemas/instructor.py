from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from datetime import datetime

from app.schemas.common import ImageRef, UrlStr

class SocialMedia(BaseModel):
    linkedin: Optional[UrlStr] = None

class InstructorBase(BaseModel):
    name: str = Field(..., min_length=3, max_length=255)
    job: Optional[str] = Field(None, max_length=255)
    courses_title: List[str] = Field(default_factory=list)
    social_media: Optional[SocialMedia] = None
    description: Optional[str] = Field(None, max_length=1000)

class InstructorCreate(InstructorBase):
    external_id: str = Field(..., min_length=1)
    image: ImageRef

class InstructorUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=3, max_length=255)
    image: Optional[ImageRef] = None
    job: Optional[str] = Field(None, max_length=255)
    courses_title: Optional[List[str]] = None
    social_media: Optional[SocialMedia] = None
    description: Optional[str] = Field(None, max_length=1000)

    model_config = ConfigDict(extra="forbid")

class Instructor(InstructorBase):
    id: str
    external_id: str
    image: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
