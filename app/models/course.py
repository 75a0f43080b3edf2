from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Table, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base, generate_id

user_courses_association = Table(
    "user_courses_association",
    Base.metadata,
    Column("user_id", String(32), ForeignKey("users.id"), primary_key=True),
    Column("course_id", String(32), ForeignKey("courses.id", ondelete="CASCADE"), primary_key=True),
)

class Course(Base):
    __tablename__ = "courses"

    id = Column(String(32), primary_key=True, default=generate_id)
    course_id = Column(Integer, unique=True, index=True, nullable=False)
    instructor_id = Column(String(32), ForeignKey("instructors.id"), nullable=False, index=True)
    name = Column(String(255), index=True, nullable=False)
    description = Column(String(500), nullable=True)
    category_id = Column(Integer, nullable=True)
    if_you_like = Column(String, nullable=True)
    if_you_like_value = Column(String, nullable=True)
    skills_needed = Column(String, nullable=True)
    skills_needed_value = Column(String, nullable=True)
    logo_image = Column(String, nullable=True)
    organization = Column(String, nullable=True)
    views = Column(Integer, nullable=False, default=0)
    enrolled = Column(Integer, nullable=False, default=0)
    related_courses = Column(JSON, nullable=False, default=list)
    image = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    instructor = relationship("Instructor", back_populates="courses")
    modules = relationship("Module", back_populates="course")
    reviews = relationship("Review", back_populates="course", cascade="all, delete-orphan")
    students = relationship("User", secondary=user_courses_association, back_populates="courses")

    @property
    def average_rating(self) -> float:
        if not self.reviews:
            return 0.0
        return round(sum(r.rating for r in self.reviews) / len(self.reviews), 2)

    @property
    def review_count(self) -> int:
        return len(self.reviews)
