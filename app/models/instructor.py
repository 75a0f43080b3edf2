from sqlalchemy import Column, String, DateTime, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base, generate_id

class Instructor(Base):
    __tablename__ = "instructors"

    id = Column(String(32), primary_key=True, default=generate_id)
    external_id = Column(String, unique=True, index=True, nullable=False)
    name = Column(String(255), nullable=False)
    image = Column(String, nullable=True)
    job = Column(String(255), nullable=True)
    courses_title = Column(JSON, nullable=False, default=list)
    social_media = Column(JSON, nullable=True)
    description = Column(String(1000), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    courses = relationship("Course", back_populates="instructor")
