from sqlalchemy import Boolean, Column, String, DateTime, Date, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base, generate_id
from app.core.constants import RoleEnum
from app.models.course import user_courses_association

class User(Base):
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=generate_id)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    username = Column(String, index=True, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    dob = Column(Date, nullable=True)
    role = Column(String, nullable=False, default=RoleEnum.USER.value, index=True)
    is_confirmed = Column(Boolean(), nullable=False, default=False)
    is_deleted = Column(Boolean(), nullable=False, default=False)

    # Embedded progress tree: {"courses": [{course_id, name, modules: [{module_id, name, topics: [...]}]}]}
    progress = Column(JSON, nullable=False, default=lambda: {"courses": []})

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    courses = relationship("Course", secondary=user_courses_association, back_populates="students")
    reviews = relationship("Review", back_populates="user")
