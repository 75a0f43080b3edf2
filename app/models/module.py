from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base, generate_id

class Module(Base):
    __tablename__ = "modules"

    id = Column(String(32), primary_key=True, default=generate_id)
    title = Column(String(255), nullable=False, index=True)
    duration = Column(String(100), nullable=False)
    course_id = Column(String(32), ForeignKey("courses.id", ondelete="SET NULL"), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    course = relationship("Course", back_populates="modules")
    topics = relationship("Topic", back_populates="module", cascade="all, delete-orphan")

    @property
    def topic_ids(self):
        return [topic.id for topic in self.topics]
