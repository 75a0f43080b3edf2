from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime

from app.schemas.common import ImageRef, UrlStr

class DegreeBase(BaseModel):
    name: str = Field(..., min_length=3, max_length=255)
    degree: str = Field(..., min_length=2, max_length=255)
    description: str = Field(..., min_length=10, max_length=1000)
    duration: str = Field(..., min_length=1, max_length=100)
    level: str = Field(..., min_length=1, max_length=100)
    subject: str = Field(..., min_length=1, max_length=255)
    link: UrlStr

class DegreeCreate(DegreeBase):
    img: ImageRef

class DegreeUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=3, max_length=255)
    degree: Optional[str] = Field(None, min_length=2, max_length=255)
    description: Optional[str] = Field(None, min_length=10, max_length=1000)
    duration: Optional[str] = Field(None, min_length=1, max_length=100)
    level: Optional[str] = Field(None, min_length=1, max_length=100)
    subject: Optional[str] = Field(None, min_length=1, max_length=255)
    link: Optional[UrlStr] = None
    img: Optional[ImageRef] = None

    model_config = ConfigDict(extra="forbid")

class Degree(DegreeBase):
    id: str
    img: str
    link: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
