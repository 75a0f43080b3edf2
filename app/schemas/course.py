from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List
from datetime import datetime

from app.schemas.common import EntityId, ImageRef

class RelatedCourse(BaseModel):
    related_course_id: EntityId
    name: Optional[str] = None
    image: Optional[str] = None

class CourseBase(BaseModel):
    name: str = Field(..., min_length=3, max_length=255)
    description: Optional[str] = Field(None, min_length=25, max_length=500)
    category_id: Optional[int] = None
    if_you_like: Optional[str] = None
    if_you_like_value: Optional[str] = None
    skills_needed: Optional[str] = None
    skills_needed_value: Optional[str] = None
    logo_image: Optional[str] = None
    organization: Optional[str] = None
    related_courses: List[RelatedCourse] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v):
        if v is None:
            return v
        v = v.strip().lower()
        if len(v) < 3:
            raise ValueError("Course name must be at least 3 characters long.")
        return v

    @field_validator("description")
    @classmethod
    def strip_description(cls, v):
        return v.strip() if v is not None else v

class CourseCreate(CourseBase):
    instructor_id: EntityId = Field(..., validation_alias=AliasChoices("instructor_id", "instructor"))
    image: ImageRef

class CourseUpdate(CourseBase):
    name: Optional[str] = Field(None, min_length=3, max_length=255)
    instructor_id: Optional[EntityId] = Field(None, validation_alias=AliasChoices("instructor_id", "instructor"))
    image: Optional[ImageRef] = None
    related_courses: Optional[List[RelatedCourse]] = None

    model_config = ConfigDict(extra="forbid")

class Course(CourseBase):
    id: str
    course_id: int
    instructor_id: str
    image: Optional[str] = None
    views: int = 0
    enrolled: int = 0
    average_rating: float = 0.0
    review_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    # Stored names are already normalized; skip the input validator on read.
    @field_validator("name")
    @classmethod
    def normalize_name(cls, v):
        return v
