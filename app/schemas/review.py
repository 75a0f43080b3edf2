from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime

from app.schemas.common import EntityId

class ReviewCreate(BaseModel):
    course_id: EntityId = Field(..., validation_alias="course")
    rating: int = Field(..., ge=1, le=5)
    review: Optional[str] = Field(None, max_length=2000)

    model_config = ConfigDict(populate_by_name=True)

class ReviewUpdate(BaseModel):
    rating: Optional[int] = Field(None, ge=1, le=5)
    review: Optional[str] = Field(None, max_length=2000)

    model_config = ConfigDict(extra="forbid")

class ReviewAuthor(BaseModel):
    id: str
    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

class ReviewCourse(BaseModel):
    id: str
    course_id: int
    name: str
    instructor_id: str

    model_config = ConfigDict(from_attributes=True)

class Review(BaseModel):
    id: str
    rating: int
    review: Optional[str] = None
    user: ReviewAuthor
    course: ReviewCourse
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
