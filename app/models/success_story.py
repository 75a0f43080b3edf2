from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func
from app.core.database import Base, generate_id

class SuccessStory(Base):
    __tablename__ = "success_stories"

    id = Column(String(32), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=False)
    certificate_name = Column(String(255), nullable=False)
    review = Column(String(1000), nullable=False)
    date = Column(DateTime(timezone=True), nullable=False)
    person_image = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
