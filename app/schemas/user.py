from pydantic import BaseModel, EmailStr, field_validator, ConfigDict
from typing import Optional, List
from datetime import date, datetime

from app.core.constants import RoleEnum

class UserBase(BaseModel):
    """Base user schema with common fields."""
    username: str
    email: EmailStr
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    dob: Optional[date] = None

    @field_validator("username")
    def normalize_username(cls, v):
        if not v or not v.strip():
            raise ValueError("Username cannot be empty.")
        return v.strip().lower()

class UserCreate(UserBase):
    """Schema for signing up, includes password."""
    password: str

    @field_validator("password")
    def validate_password(cls, v):
        if not v or not v.strip():
            raise ValueError("Password cannot be empty or contain only whitespace.")
        if len(v) < 8:
            raise ValueError("Password must be at least 8 characters long.")
        return v

class User(UserBase):
    """Main user schema for reading user data."""
    id: str
    role: RoleEnum
    is_confirmed: bool
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ProgressTopic(BaseModel):
    topic_id: str
    name: Optional[str] = None

class ProgressModule(BaseModel):
    module_id: str
    name: Optional[str] = None
    topics: List[ProgressTopic] = []

class ProgressCourse(BaseModel):
    course_id: str
    name: Optional[str] = None
    modules: List[ProgressModule] = []

class Progress(BaseModel):
    courses: List[ProgressCourse] = []

class TopicProgressCreate(BaseModel):
    """Marks one topic as passed."""
    course_id: str
    module_id: str
    topic_id: str
