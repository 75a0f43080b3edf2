from sqlalchemy import Column, String, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base, generate_id

class Topic(Base):
    __tablename__ = "topics"

    id = Column(String(32), primary_key=True, default=generate_id)
    title = Column(String(255), nullable=False, index=True)
    description = Column(String(1000), nullable=True)
    videos = Column(JSON, nullable=False, default=list)        # [{title, video_url}]
    assignments = Column(JSON, nullable=False, default=list)   # [{title, file_url}]
    module_id = Column(String(32), ForeignKey("modules.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    module = relationship("Module", back_populates="topics")
